"""
Exception types raised by DRF Remember.

Cookie validation failures are never exceptions; only setup-time
misconfiguration is.
"""

from django.core.exceptions import ImproperlyConfigured


class ConfigurationError(ImproperlyConfigured):
    """
    Raised when a session type or library setting is configured with a value
    the cookie layer cannot honour (e.g. an unknown SameSite flag, or signed
    cookies on a jar without signing support).
    """
