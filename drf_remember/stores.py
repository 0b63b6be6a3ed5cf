"""
Record store collaborators.

A record store looks records up by primary key and exposes the two values
the cookie carries: the persistence token and the primary key value.
"""

from django.db import DataError
from django.core.exceptions import ValidationError

from drf_remember.compat import Any, Optional
from drf_remember.models import get_record_model
from drf_remember.settings import drf_remember_settings


class BaseRecordStore:
    """Interface the cookie session expects from a record store."""

    def primary_key_name(self) -> str:
        raise NotImplementedError

    def find_by_primary_key(self, field_name: str, value: Any) -> Optional[Any]:
        raise NotImplementedError

    def get_primary_key_value(self, record) -> Any:
        return getattr(record, self.primary_key_name())

    def get_persistence_token(self, record) -> Optional[str]:
        return getattr(record, drf_remember_settings.PERSISTENCE_TOKEN_FIELD, None)


class ModelRecordStore(BaseRecordStore):
    """
    Record store backed by a Django model, the configured record model by
    default.
    """

    def __init__(self, model=None):
        self._model = model

    @property
    def model(self):
        return self._model or get_record_model()

    def primary_key_name(self) -> str:
        return self.model._meta.pk.name

    def get_primary_key_value(self, record) -> Any:
        return record.pk

    def find_by_primary_key(self, field_name: str, value: Any) -> Optional[Any]:
        if value in (None, ""):
            return None
        try:
            return self.model._default_manager.filter(**{field_name: value}).first()
        except (ValueError, TypeError, OverflowError, ValidationError, DataError):
            # The cookie carried an id the primary key field cannot hold.
            return None
