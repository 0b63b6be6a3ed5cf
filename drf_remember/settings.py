"""
Configuration management for DRF Remember.

This module handles the loading, validation, and caching of library
settings. The values here are the process-wide defaults every session type
falls back to, and it synchronizes the swappable record model setting with
the Django runtime.
"""

from datetime import timedelta

from django.conf import settings
from django.test.signals import setting_changed
from django.utils.module_loading import import_string
from django.utils.translation import gettext_lazy as _

from drf_remember.exceptions import ConfigurationError
from drf_remember.validators import validate_same_site


DEFAULTS = {
    # Remember-me behaviour
    "REMEMBER_ME": False,
    "REMEMBER_ME_FOR": timedelta(days=90),
    "REJECT_EXPIRED_REMEMBER_ME": True,
    # Cookie attributes
    "SECURE": True,
    "HTTPONLY": True,
    "SAME_SITE": None,
    "SIGN_COOKIE": False,
    "SIGNING_SALT": "drf_remember",
    "COOKIE_DOMAIN": None,
    # Collaborators
    "COOKIE_JAR_CLASS": "drf_remember.adapters.DjangoCookieJar",
    "RECORD_MODEL": settings.AUTH_USER_MODEL,
    "PERSISTENCE_TOKEN_FIELD": "persistence_token",
    "SESSION_CLASS": None,
    # Extensibility Hooks (Dotted paths to callables)
    "RECORD_VALIDATOR_HOOK": None,
    "POST_AUTHENTICATED_HOOK": None,
}

IMPORT_STRINGS = (
    "COOKIE_JAR_CLASS",
    "SESSION_CLASS",
    "RECORD_VALIDATOR_HOOK",
    "POST_AUTHENTICATED_HOOK",
)

REMOVED_SETTINGS = ()

TYPE_VALIDATORS = {
    "REMEMBER_ME": bool,
    "REMEMBER_ME_FOR": timedelta,
    "REJECT_EXPIRED_REMEMBER_ME": bool,
    "SECURE": bool,
    "HTTPONLY": bool,
    "SAME_SITE": (str, type(None)),
    "SIGN_COOKIE": bool,
    "SIGNING_SALT": str,
    "COOKIE_DOMAIN": (str, type(None)),
    "COOKIE_JAR_CLASS": (str, type),
    "RECORD_MODEL": str,
    "PERSISTENCE_TOKEN_FIELD": str,
    "SESSION_CLASS": (str, type, type(None)),
}


class DRFRememberSettings:
    """
    Lazy settings container for DRF Remember.
    """

    __slots__ = ("_user_settings", "_cache")

    def __init__(self, user_settings=None):
        self._user_settings = user_settings or {}
        self._cache = {}
        self._validate_all()
        self._sync_swapper()

    def _get_setting(self, setting_name: str):
        return self._user_settings.get(setting_name, DEFAULTS[setting_name])

    def __getattr__(self, setting_name: str):
        if setting_name not in DEFAULTS:
            if setting_name in REMOVED_SETTINGS:
                raise AttributeError(_(f"'{setting_name}' has been removed."))
            raise AttributeError(_(f"Invalid setting: '{setting_name}'."))

        if setting_name in self._cache:
            return self._cache[setting_name]

        value = self._get_setting(setting_name)

        if setting_name in IMPORT_STRINGS and isinstance(value, str):
            value = self._import_from_string(setting_name, value)

        self._cache[setting_name] = value
        return value

    def _import_from_string(self, setting_name: str, path: str):
        try:
            value = import_string(path)
        except ImportError as exc:
            raise ConfigurationError(
                _(f"Could not import '{path}' for '{setting_name}'.")
            ) from exc

        if not callable(value):
            raise ConfigurationError(_(f"'{setting_name}' must be a callable."))
        return value

    def _validate_all(self):
        self._validate_removed_settings()
        self._validate_primitive_types()
        self._validate_business_logic()

    def _validate_removed_settings(self):
        for setting_name in REMOVED_SETTINGS:
            if setting_name in self._user_settings:
                raise ConfigurationError(_(f"'{setting_name}' is no longer supported."))

    def _validate_primitive_types(self):
        for setting_name, expected_types in TYPE_VALIDATORS.items():
            value = self._get_setting(setting_name)
            if not isinstance(value, expected_types):
                raise ConfigurationError(_(f"'{setting_name}' has invalid type."))

    def _validate_business_logic(self):
        self._validate_remember_me_for()
        validate_same_site(self._get_setting("SAME_SITE"))

    def _validate_remember_me_for(self):
        if self._get_setting("REMEMBER_ME_FOR") <= timedelta(0):
            raise ConfigurationError(_("REMEMBER_ME_FOR must be positive."))

    def _sync_swapper(self):
        record_model = self._get_setting("RECORD_MODEL")
        setattr(settings, "DRF_REMEMBER_RECORD_MODEL", record_model)

    def reload(self, new_user_settings=None):
        self._user_settings = new_user_settings or {}
        self._cache.clear()
        self._validate_all()
        self._sync_swapper()


drf_remember_settings = DRFRememberSettings(getattr(settings, "DRF_REMEMBER", None))


def reload_drf_remember_settings(*args, **kwargs):
    if kwargs.get("setting") == "DRF_REMEMBER":
        drf_remember_settings.reload(kwargs.get("value"))


setting_changed.connect(reload_drf_remember_settings)
