"""
Abstract base authentication class for DRF Remember.

Integrates remember-me cookie validation into the DRF request lifecycle. A
missing or invalid cookie is not an error: authentication simply returns
None so the next authenticator can run.
"""

from rest_framework.request import Request
from rest_framework.authentication import BaseAuthentication

from drf_remember.adapters import DjangoController
from drf_remember.settings import drf_remember_settings
from drf_remember.compat import TYPE_CHECKING, Any, Type, Tuple, Optional
from drf_remember.session import CookieSession, get_default_session_class

if TYPE_CHECKING:
    from django.db.models import Model


class BaseCookieSessionAuthentication(BaseAuthentication):
    """
    Core template for remember-me cookie authentication.
    """

    session_class: Type[CookieSession] = None

    def get_session_class(self) -> Type[CookieSession]:
        return self.session_class or get_default_session_class()

    def get_controller(self, request: Request, session_class: Type[CookieSession]):
        return DjangoController(
            request, cookie_jar_class=session_class.config.cookie_jar_class
        )

    def authenticate(self, request: Request) -> Optional[Tuple["Model", CookieSession]]:
        session_class = self.get_session_class()
        session = session_class(self.get_controller(request, session_class))

        if not session.persist_by_cookie():
            return None

        return self.run_post_auth_hook(session.record, session, request)

    def run_post_auth_hook(
        self, record: Any, session: CookieSession, request: Request
    ) -> Tuple:
        hook = drf_remember_settings.POST_AUTHENTICATED_HOOK
        if hook:
            result = hook(user=record, session=session, request=request)
            if result:
                return result
        return record, session

    def authenticate_header(self, request: Request) -> str:
        # Informs the client that a remember-me cookie is expected
        return 'Cookie realm="api"'
