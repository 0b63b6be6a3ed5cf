"""
Data structures exchanged between the cookie codec, the session lifecycle
and the cookie jar.
"""

from datetime import datetime

from drf_remember.compat import List, Optional, NamedTuple


class CookiePayload(NamedTuple):
    """
    Decoded contents of a remember-me cookie.

    ``remember_until`` is the raw ISO-8601 string written when remember-me
    was active, or None for a session-only cookie.
    """

    persistence_token: Optional[str]
    record_id: Optional[str]
    remember_until: Optional[str] = None

    @classmethod
    def from_fields(cls, fields: Optional[List[str]]) -> "CookiePayload":
        fields = list(fields or [])[:3]
        fields += [None] * (3 - len(fields))
        return cls(*fields)

    @property
    def remembers(self) -> bool:
        return self.remember_until is not None


class CookieAttrs(NamedTuple):
    """Everything a cookie jar needs to write a cookie."""

    value: str
    expires: Optional[datetime] = None
    secure: bool = True
    httponly: bool = True
    samesite: Optional[str] = None
    domain: Optional[str] = None
