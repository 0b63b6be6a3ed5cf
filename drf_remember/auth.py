"""
Concrete authentication classes for DRF Remember.
"""

from rest_framework.request import Request
from rest_framework.authentication import SessionAuthentication

from drf_remember.base.auth import BaseCookieSessionAuthentication


class RememberCookieAuthentication(BaseCookieSessionAuthentication):
    """
    Authenticates from the remember-me cookie and, like DRF's own
    SessionAuthentication, enforces CSRF validation for cookie-borne
    credentials.
    """

    enforce_csrf_checks = True

    def authenticate(self, request: Request):
        result = super().authenticate(request)
        if result is not None and self.enforce_csrf_checks:
            self.enforce_csrf(request)
        return result

    def enforce_csrf(self, request: Request) -> None:
        return SessionAuthentication.enforce_csrf(self, request)
