"""
Cookie jar and controller adapters for Django.

The cookie session only talks to a controller exposing ``cookies`` and
``cookie_domain``. These adapters bridge Django's request and response
objects (and DRF's Request, which proxies them) into that shape.
"""

from django.conf import settings
from django.utils.translation import gettext_lazy as _

from drf_remember.compat import Optional
from drf_remember.types import CookieAttrs
from drf_remember.settings import drf_remember_settings


class BaseCookieJar:
    """
    Minimal cookie jar interface.

    Subclasses that can sign cookies expose a ``signed`` attribute returning
    a jar with the same interface.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, attrs: CookieAttrs) -> None:
        raise NotImplementedError

    def delete(self, key: str, domain: Optional[str] = None) -> None:
        raise NotImplementedError


class DjangoCookieJar(BaseCookieJar):
    """
    Reads cookies from the request and writes them to the response.

    A jar built without a response can only be read from, which is all the
    authentication path needs.
    """

    def __init__(self, request, response=None):
        self.request = request
        self.response = response

    def _get_response(self):
        if self.response is None:
            raise RuntimeError(
                _("{0} needs a response to write cookies.").format(
                    self.__class__.__name__
                )
            )
        return self.response

    def get(self, key: str) -> Optional[str]:
        return self.request.COOKIES.get(key)

    def set(self, key: str, attrs: CookieAttrs) -> None:
        self._get_response().set_cookie(key, attrs.value, **self._cookie_kwargs(attrs))

    def delete(self, key: str, domain: Optional[str] = None) -> None:
        self._get_response().delete_cookie(key, domain=domain)

    @staticmethod
    def _cookie_kwargs(attrs: CookieAttrs) -> dict:
        return {
            "expires": attrs.expires,
            "domain": attrs.domain,
            "secure": attrs.secure,
            "httponly": attrs.httponly,
            "samesite": attrs.samesite,
        }

    @property
    def signed(self) -> "SignedDjangoCookieJar":
        return SignedDjangoCookieJar(self.request, self.response)


class SignedDjangoCookieJar(DjangoCookieJar):
    """
    Uses Django's signed cookies. A cookie with a bad signature reads as
    absent.
    """

    signed = None

    def get(self, key: str) -> Optional[str]:
        return self.request.get_signed_cookie(
            key, default=None, salt=drf_remember_settings.SIGNING_SALT
        )

    def set(self, key: str, attrs: CookieAttrs) -> None:
        self._get_response().set_signed_cookie(
            key,
            attrs.value,
            salt=drf_remember_settings.SIGNING_SALT,
            **self._cookie_kwargs(attrs),
        )


class DjangoController:
    """
    Thin wrapper around a Django request/response pair.
    """

    def __init__(self, request, response=None, cookie_jar_class=None):
        jar_class = cookie_jar_class or drf_remember_settings.COOKIE_JAR_CLASS
        self.request = request
        self.response = response
        self.cookies = jar_class(request, response)

    @property
    def cookie_domain(self) -> Optional[str]:
        return drf_remember_settings.COOKIE_DOMAIN or settings.SESSION_COOKIE_DOMAIN
