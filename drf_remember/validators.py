"""
Validation and normalization helpers for cookie configuration values.
"""

from django.utils.translation import gettext_lazy as _

from drf_remember.compat import Any
from drf_remember.exceptions import ConfigurationError
from drf_remember.choices import VALID_SAME_SITE_VALUES


TRUTHY_STRINGS = ("true", "1")


def parse_loose_bool(value: Any) -> bool:
    """
    Normalizes a flag that may arrive as a string from external input.

    Only ``True``, ``"true"`` and ``"1"`` count as true; everything else,
    including None, is false.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value in TRUTHY_STRINGS
    return False


def validate_same_site(value):
    """
    Ensures a SameSite flag is one of None, 'Lax' or 'Strict'.

    Raises ConfigurationError otherwise, so that a bad value is caught when
    it is configured rather than when a cookie is written.
    """
    if value not in VALID_SAME_SITE_VALUES:
        raise ConfigurationError(
            _("Invalid same_site value: {0!r}. Valid: {1!r}").format(
                value, list(VALID_SAME_SITE_VALUES)
            )
        )
    return value


def supports_signing(jar_class) -> bool:
    """Whether a cookie jar class exposes a ``signed`` sub-jar."""
    return getattr(jar_class, "signed", None) is not None
