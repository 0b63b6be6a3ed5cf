"""
Constants for cookie attributes and session lifecycle states.

SAME_SITE lists the SameSite flags a remember-me cookie may carry; leaving
the flag unset (None) is also allowed and means the attribute is omitted.
SESSION_STATE tracks where a single authentication attempt stands.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class SAME_SITE(models.TextChoices):
    """
    Accepted SameSite cookie flags.

    Attributes:
        LAX: Cookie is sent on top-level navigations from other sites.
        STRICT: Cookie is never sent on cross-site requests.
    """

    LAX = "Lax", _("Lax")
    STRICT = "Strict", _("Strict")


VALID_SAME_SITE_VALUES = (None, SAME_SITE.LAX.value, SAME_SITE.STRICT.value)


class SESSION_STATE(models.TextChoices):
    """Lifecycle of a cookie session within a single request."""

    UNVALIDATED = "unvalidated", _("Unvalidated")
    VALIDATED = "validated", _("Validated")
    REJECTED = "rejected", _("Rejected")
    PERSISTED = "persisted", _("Persisted")
    DESTROYED = "destroyed", _("Destroyed")
