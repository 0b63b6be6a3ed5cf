"""
Cookie-backed session lifecycle.

A CookieSession lives for a single request. It validates the remember-me
cookie on load, writes a fresh cookie once a record has been authenticated,
and deletes the cookie on logout. Session types are created with
``session_class_for`` from a SessionConfig; there is no global
registration.
"""

import logging

from django.utils import timezone
from django.utils.crypto import constant_time_compare
from django.utils.translation import gettext_lazy as _

from drf_remember.types import CookieAttrs, CookiePayload
from drf_remember.choices import SESSION_STATE
from drf_remember.stores import BaseRecordStore, ModelRecordStore
from drf_remember.exceptions import ConfigurationError
from drf_remember.settings import drf_remember_settings
from drf_remember.config import NOT_PROVIDED, Configured, SessionConfig
from drf_remember.compat import Any, Type, Mapping, Optional
from drf_remember.codec import decode_cookie, encode_cookie, parse_remember_until
from drf_remember.validators import (
    parse_loose_bool,
    supports_signing,
    validate_same_site,
)

logger = logging.getLogger(__name__)

REMEMBER_ME_KEY = "remember_me"


def extract_remember_me(credentials: Any) -> Any:
    """
    Finds a remember-me flag in submitted credentials.

    A mapping (or a list starting with one) contributes its ``remember_me``
    entry. Any other list or scalar contributes its first boolean value.
    Returns NOT_PROVIDED when no flag was supplied; an explicit None in a
    mapping is a supplied flag.
    """
    values = credentials if isinstance(credentials, (list, tuple)) else [credentials]
    first = values[0] if values else None

    if isinstance(first, Mapping):
        if REMEMBER_ME_KEY in first:
            return first[REMEMBER_ME_KEY]
        return NOT_PROVIDED

    for value in values:
        if isinstance(value, bool):
            return value
    return NOT_PROVIDED


class CookieSession:
    """
    One authentication attempt backed by a remember-me cookie.

    Every cookie option resolves from an instance override first, then the
    session type's SessionConfig, then the library settings.
    """

    config: SessionConfig = None
    record_store_class: Type[BaseRecordStore] = ModelRecordStore

    def __init__(
        self,
        controller,
        credentials: Any = None,
        session_id: Optional[str] = None,
        record_store: Optional[BaseRecordStore] = None,
    ) -> None:
        if self.config is None:
            raise ConfigurationError(
                _("{0} has no SessionConfig; build it with session_class_for().").format(
                    self.__class__.__name__
                )
            )
        self.config.seal()

        self.controller = controller
        self.session_id = session_id
        self.record_store = record_store or self.record_store_class()
        self.record = None
        self.unauthorized_record = None
        self.state = SESSION_STATE.UNVALIDATED

        self._credentials = None
        self._remember_me = Configured(self.config.remember_me)
        self._secure = Configured(self.config.secure)
        self._httponly = Configured(self.config.httponly)
        self._same_site = Configured(self.config.same_site)
        self._sign_cookie = Configured(self.config.sign_cookie)

        if credentials is not None:
            self.credentials = credentials

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} key={self.cookie_key!r} state={self.state}>"

    # Credentials

    @property
    def credentials(self) -> Any:
        return self._credentials

    @credentials.setter
    def credentials(self, value: Any) -> None:
        self._credentials = value
        remember_me = extract_remember_me(value)
        if remember_me is not NOT_PROVIDED:
            self.remember_me = remember_me

    # Remember-me

    @property
    def remember_me(self) -> Any:
        return self._remember_me.resolve()

    @remember_me.setter
    def remember_me(self, value: Any) -> None:
        self._remember_me.set(value)

    @property
    def remember_me_enabled(self) -> bool:
        return parse_loose_bool(self.remember_me)

    @property
    def remember_me_for(self):
        if not self.remember_me_enabled:
            return None
        return self.config.remember_me_for

    @property
    def remember_me_until(self):
        """When a remembered cookie expires; None for a session-only cookie."""
        if not self.remember_me_enabled:
            return None
        # Whole seconds, so the cookie field and the expires attribute agree.
        return (timezone.now() + self.remember_me_for).replace(microsecond=0)

    # Cookie attributes

    @property
    def secure(self) -> bool:
        return parse_loose_bool(self._secure.resolve())

    @secure.setter
    def secure(self, value: Any) -> None:
        self._secure.set(value)

    @property
    def httponly(self) -> bool:
        return parse_loose_bool(self._httponly.resolve())

    @httponly.setter
    def httponly(self, value: Any) -> None:
        self._httponly.set(value)

    @property
    def same_site(self) -> Optional[str]:
        return self._same_site.resolve()

    @same_site.setter
    def same_site(self, value: Optional[str]) -> None:
        validate_same_site(value)
        self._same_site.set(value)

    @property
    def sign_cookie(self) -> bool:
        return parse_loose_bool(self._sign_cookie.resolve())

    @sign_cookie.setter
    def sign_cookie(self, value: Any) -> None:
        if parse_loose_bool(value) and not supports_signing(self.config.cookie_jar_class):
            raise ConfigurationError(
                _("Signed cookies not supported with {0}!").format(
                    self.config.cookie_jar_class.__name__
                )
            )
        self._sign_cookie.set(value)

    # Cookie access

    @property
    def cookie_key(self) -> str:
        if self.session_id:
            return f"{self.session_id}_{self.config.cookie_key}"
        return self.config.cookie_key

    @property
    def cookie_jar(self):
        if self.sign_cookie:
            return self.controller.cookies.signed
        return self.controller.cookies

    def cookie_credentials(self):
        """The decoded cookie fields, or None when there is no cookie."""
        return decode_cookie(self.cookie_jar.get(self.cookie_key))

    def cookie_payload(self) -> Optional[CookiePayload]:
        fields = self.cookie_credentials()
        if fields is None:
            return None
        return CookiePayload.from_fields(fields)

    def is_remember_me_expired(
        self, payload: Optional[CookiePayload] = None
    ) -> Optional[bool]:
        """
        Whether the cookie's remember-me timestamp is in the past.

        Returns None for a cookie without a timestamp. A timestamp that
        cannot be parsed counts as expired.
        """
        payload = payload or self.cookie_payload()
        if payload is None or not payload.remembers:
            return None

        remember_until = parse_remember_until(payload.remember_until)
        if remember_until is None:
            return True
        if timezone.is_naive(remember_until):
            remember_until = timezone.make_aware(remember_until)
        return remember_until < timezone.now()

    # Lifecycle

    def persist_by_cookie(self) -> bool:
        """
        Tries to authenticate from the remember-me cookie.

        Returns True and sets ``record`` when the cookie names an existing
        record whose persistence token matches. Any failure returns False.
        """
        payload = self.cookie_payload()
        if payload is None or not payload.persistence_token:
            return self._reject("no cookie credentials")

        store = self.record_store
        record = store.find_by_primary_key(store.primary_key_name(), payload.record_id)
        if record is None:
            return self._reject("unknown record")

        stored_token = store.get_persistence_token(record)
        if not stored_token or not constant_time_compare(
            stored_token, payload.persistence_token
        ):
            return self._reject("persistence token mismatch")

        if (
            drf_remember_settings.REJECT_EXPIRED_REMEMBER_ME
            and self.is_remember_me_expired(payload)
        ):
            return self._reject("remember-me period has expired")

        self.unauthorized_record = record
        return self.is_valid()

    def is_valid(self) -> bool:
        """
        Promotes the pending record once it passes the record checks: an
        inactive record is refused, as is one the RECORD_VALIDATOR_HOOK
        rejects.
        """
        record = self.unauthorized_record
        if record is None:
            return self._reject("no record to validate")

        if not getattr(record, "is_active", True):
            return self._reject("record is inactive")

        hook = drf_remember_settings.RECORD_VALIDATOR_HOOK
        if hook and not hook(record, self):
            return self._reject("record failed validator hook")

        self.record = record
        self.unauthorized_record = None
        self.state = SESSION_STATE.VALIDATED
        return True

    def _reject(self, reason: str) -> bool:
        logger.debug("Rejected cookie '%s': %s.", self.cookie_key, reason)
        self.record = None
        self.unauthorized_record = None
        self.state = SESSION_STATE.REJECTED
        return False

    def generate_cookie_for_saving(self, record) -> CookieAttrs:
        token = self.record_store.get_persistence_token(record)
        if not token:
            raise ValueError(_("The record has no persistence token to save."))

        remember_until = self.remember_me_until
        value = encode_cookie(
            token, self.record_store.get_primary_key_value(record), remember_until
        )
        return CookieAttrs(
            value=value,
            expires=remember_until,
            secure=self.secure,
            httponly=self.httponly,
            samesite=self.same_site,
            domain=self.controller.cookie_domain,
        )

    def save_cookie(self, record=None) -> CookieAttrs:
        """
        Writes the cookie for ``record`` (or the already validated record).
        """
        if record is None:
            record = self.record
        if record is None:
            raise ValueError(_("save_cookie() needs an authenticated record."))

        attrs = self.generate_cookie_for_saving(record)
        self.cookie_jar.set(self.cookie_key, attrs)

        self.record = record
        self.state = SESSION_STATE.PERSISTED
        logger.info(
            "Saved cookie '%s' (remember_me=%s).",
            self.cookie_key,
            attrs.expires is not None,
        )
        return attrs

    def destroy_cookie(self) -> None:
        """Deletes the cookie with the same domain it was saved with."""
        self.controller.cookies.delete(
            self.cookie_key, domain=self.controller.cookie_domain
        )
        self.record = None
        self.unauthorized_record = None
        self.state = SESSION_STATE.DESTROYED
        logger.info("Destroyed cookie '%s'.", self.cookie_key)


def session_class_for(
    config: SessionConfig, base: Type[CookieSession] = CookieSession
) -> Type[CookieSession]:
    """
    Builds a session type bound to ``config``.

        UserSession = session_class_for(SessionConfig("UserSession", remember_me=True))
        session = UserSession(DjangoController(request, response))
    """
    return type(config.name, (base,), {"config": config, "__module__": base.__module__})


_default_session_class = None


def get_default_session_class() -> Type[CookieSession]:
    """
    The SESSION_CLASS setting, or a "UserSession" type that takes all its
    options from the library settings.
    """
    global _default_session_class

    if drf_remember_settings.SESSION_CLASS:
        return drf_remember_settings.SESSION_CLASS
    if _default_session_class is None:
        _default_session_class = session_class_for(SessionConfig("UserSession"))
    return _default_session_class
