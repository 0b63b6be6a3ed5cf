"""
Encoding and decoding of the remember-me cookie value.

The wire format is ``token::record_id`` for session-only cookies and
``token::record_id::ISO8601`` when remember-me was active. Previously
issued cookies must keep decoding, so the format never changes.
"""

from datetime import datetime

from django.utils.dateparse import parse_datetime

from drf_remember.compat import List, Union, Optional

DELIMITER = "::"


def encode_cookie(
    persistence_token: str,
    record_id,
    remember_until: Optional[Union[datetime, str]] = None,
) -> str:
    """
    Joins the cookie fields with the delimiter.

    Raises:
        ValueError: If the token or record id contains the delimiter, since
            the value could not be decoded back into the same fields.
    """
    token = str(persistence_token)
    record_id = str(record_id)

    for name, field in (("persistence token", token), ("record id", record_id)):
        if DELIMITER in field:
            raise ValueError(f"The {name} must not contain {DELIMITER!r}.")

    fields = [token, record_id]
    if remember_until is not None:
        if isinstance(remember_until, datetime):
            remember_until = remember_until.isoformat()
        fields.append(remember_until)

    return DELIMITER.join(fields)


def decode_cookie(raw: Optional[str]) -> Optional[List[str]]:
    """
    Splits a cookie value into its fields.

    Returns None when there is no cookie at all. A present but malformed
    value yields whatever fields it has; callers decide what a short list
    means.
    """
    if not raw:
        return None
    return raw.split(DELIMITER)


def parse_remember_until(value: Optional[str]) -> Optional[datetime]:
    """Parses the third cookie field, returning None if it is unusable."""
    if not value:
        return None
    try:
        return parse_datetime(value)
    except ValueError:
        # Well formatted but not a valid date, e.g. month 13.
        return None
