"""
Per-session-type cookie configuration.

A SessionConfig is built once at application setup for each session type
(e.g. "UserSession") and is sealed as soon as the first session instance is
created from it. Every option falls back to the library settings when it
was not given explicitly, and session instances layer their own overrides
on top through Configured values.
"""

from datetime import timedelta

from django.utils.text import camel_case_to_spaces
from django.utils.translation import gettext_lazy as _

from drf_remember.compat import Any, Dict, Type, Generic, TypeVar
from drf_remember.exceptions import ConfigurationError
from drf_remember.settings import drf_remember_settings
from drf_remember.validators import (
    parse_loose_bool,
    supports_signing,
    validate_same_site,
)

T = TypeVar("T")

NOT_PROVIDED = object()


class Configured(Generic[T]):
    """
    A type-level default with an optional instance-level override.

    ``resolve()`` returns the override when one was explicitly set (even if
    it is None or False), otherwise the default.
    """

    __slots__ = ("default", "_override")

    def __init__(self, default: T) -> None:
        self.default = default
        self._override = NOT_PROVIDED

    @property
    def is_set(self) -> bool:
        return self._override is not NOT_PROVIDED

    def set(self, value: T) -> None:
        self._override = value

    def clear(self) -> None:
        self._override = NOT_PROVIDED

    def resolve(self) -> T:
        return self.default if self._override is NOT_PROVIDED else self._override

    def __repr__(self) -> str:
        override = self._override if self.is_set else "<unset>"
        return f"{self.__class__.__name__}(default={self.default!r}, override={override!r})"


class SessionConfig:
    """
    Cookie settings for one session type.

    Options left out fall back to the matching DRF_REMEMBER setting:

        cookie_key        -> "<snake_case(name)>_credentials"
        remember_me       -> REMEMBER_ME
        remember_me_for   -> REMEMBER_ME_FOR
        secure            -> SECURE
        httponly          -> HTTPONLY
        same_site         -> SAME_SITE
        sign_cookie       -> SIGN_COOKIE
        cookie_jar_class  -> COOKIE_JAR_CLASS
    """

    __slots__ = ("name", "_values", "_sealed")

    SETTING_NAMES = {
        "remember_me": "REMEMBER_ME",
        "remember_me_for": "REMEMBER_ME_FOR",
        "secure": "SECURE",
        "httponly": "HTTPONLY",
        "same_site": "SAME_SITE",
        "sign_cookie": "SIGN_COOKIE",
        "cookie_jar_class": "COOKIE_JAR_CLASS",
    }

    def __init__(
        self,
        name: str,
        cookie_key=NOT_PROVIDED,
        remember_me=NOT_PROVIDED,
        remember_me_for=NOT_PROVIDED,
        secure=NOT_PROVIDED,
        httponly=NOT_PROVIDED,
        same_site=NOT_PROVIDED,
        cookie_jar_class=NOT_PROVIDED,
        sign_cookie=NOT_PROVIDED,
    ) -> None:
        self.name = name
        self._values: Dict[str, Any] = {}
        self._sealed = False

        # The jar class goes first so the signing check sees it.
        options = (
            ("cookie_jar_class", cookie_jar_class),
            ("cookie_key", cookie_key),
            ("remember_me", remember_me),
            ("remember_me_for", remember_me_for),
            ("secure", secure),
            ("httponly", httponly),
            ("same_site", same_site),
            ("sign_cookie", sign_cookie),
        )
        for option, value in options:
            if value is not NOT_PROVIDED:
                setattr(self, option, value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"

    def _get(self, option: str):
        if option in self._values:
            return self._values[option]
        return getattr(drf_remember_settings, self.SETTING_NAMES[option])

    def _assign(self, option: str, value) -> None:
        if self._sealed:
            raise ConfigurationError(
                _("Cannot change '{0}' on {1!r}: it is already in use.").format(
                    option, self
                )
            )
        self._values[option] = value

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """
        Freezes the configuration. Called when the first session instance is
        built, since request handling must only ever read it.
        """
        if self._sealed:
            return
        self._check_signing_support(self.sign_cookie)
        self._sealed = True

    def _check_signing_support(self, sign_cookie) -> None:
        jar_class = self.cookie_jar_class
        if parse_loose_bool(sign_cookie) and not supports_signing(jar_class):
            raise ConfigurationError(
                _("Signed cookies not supported with {0}!").format(jar_class.__name__)
            )

    @property
    def cookie_key(self) -> str:
        if "cookie_key" in self._values:
            return self._values["cookie_key"]
        return "{0}_credentials".format(camel_case_to_spaces(self.name).replace(" ", "_"))

    @cookie_key.setter
    def cookie_key(self, value: str) -> None:
        self._assign("cookie_key", value)

    @property
    def remember_me(self):
        return self._get("remember_me")

    @remember_me.setter
    def remember_me(self, value) -> None:
        self._assign("remember_me", value)

    @property
    def remember_me_for(self) -> timedelta:
        return self._get("remember_me_for")

    @remember_me_for.setter
    def remember_me_for(self, value) -> None:
        if isinstance(value, int) and not isinstance(value, bool):
            value = timedelta(seconds=value)
        if not isinstance(value, timedelta) or value <= timedelta(0):
            raise ConfigurationError(
                _("remember_me_for must be a positive timedelta or number of seconds.")
            )
        self._assign("remember_me_for", value)

    @property
    def secure(self):
        return self._get("secure")

    @secure.setter
    def secure(self, value) -> None:
        self._assign("secure", value)

    @property
    def httponly(self):
        return self._get("httponly")

    @httponly.setter
    def httponly(self, value) -> None:
        self._assign("httponly", value)

    @property
    def same_site(self):
        return self._get("same_site")

    @same_site.setter
    def same_site(self, value) -> None:
        validate_same_site(value)
        self._assign("same_site", value)

    @property
    def sign_cookie(self):
        return self._get("sign_cookie")

    @sign_cookie.setter
    def sign_cookie(self, value) -> None:
        self._check_signing_support(value)
        self._assign("sign_cookie", value)

    @property
    def cookie_jar_class(self) -> Type:
        return self._get("cookie_jar_class")

    @cookie_jar_class.setter
    def cookie_jar_class(self, value: Type) -> None:
        self._assign("cookie_jar_class", value)
