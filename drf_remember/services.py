"""
Orchestration layer for logging records in and out through the
remember-me cookie.
"""

import logging

from drf_remember.adapters import DjangoController
from drf_remember.compat import Any, Type, Optional
from drf_remember.session import CookieSession, get_default_session_class

logger = logging.getLogger(__name__)


class RememberMeService:
    """
    Unified interface for issuing, reading and clearing remember-me cookies
    from Django views.
    """

    @staticmethod
    def _build_session(
        request,
        response=None,
        session_class: Optional[Type[CookieSession]] = None,
        **kwargs,
    ) -> CookieSession:
        session_class = session_class or get_default_session_class()
        controller = DjangoController(
            request, response, cookie_jar_class=session_class.config.cookie_jar_class
        )
        return session_class(controller, **kwargs)

    @classmethod
    def login(
        cls,
        request,
        response,
        record,
        credentials: Any = None,
        remember_me: Any = None,
        session_class: Optional[Type[CookieSession]] = None,
    ) -> CookieSession:
        """
        Writes the cookie for an authenticated record onto ``response``.

        ``remember_me`` wins over any flag found in ``credentials``.
        """
        session = cls._build_session(
            request, response, session_class, credentials=credentials
        )
        if remember_me is not None:
            session.remember_me = remember_me

        if not session.record_store.get_persistence_token(record) and hasattr(
            record, "reset_persistence_token"
        ):
            record.reset_persistence_token()

        session.save_cookie(record)
        return session

    @classmethod
    def current_record(
        cls, request, session_class: Optional[Type[CookieSession]] = None
    ) -> Optional[Any]:
        """Returns the remembered record for ``request``, if any."""
        session = cls._build_session(request, session_class=session_class)
        if session.persist_by_cookie():
            return session.record
        return None

    @classmethod
    def logout(
        cls,
        request,
        response,
        forget: bool = False,
        session_class: Optional[Type[CookieSession]] = None,
    ) -> CookieSession:
        """
        Deletes the cookie. With ``forget`` the remembered record's token is
        also rotated, invalidating its cookies in every other browser.
        """
        session = cls._build_session(request, response, session_class)
        if forget and session.persist_by_cookie():
            cls.forget(session.record)
        session.destroy_cookie()
        return session

    @staticmethod
    def forget(record) -> None:
        """Rotates the record's persistence token."""
        record.reset_persistence_token()
        logger.info("Rotated persistence token for record %s.", record.pk)
