"""
Model helpers for records that can be remembered by cookie.

The record model itself belongs to the integrating project. It is resolved
through the 'swapper' pattern from the RECORD_MODEL setting, which defaults
to AUTH_USER_MODEL.
"""

import swapper
from django.db import models
from django.utils.translation import gettext_lazy as _

from drf_remember.compat import Type
from drf_remember.utils.tokens import generate_persistence_token


def get_record_model() -> Type[models.Model]:
    """
    Resolves the active record model class at runtime.

    DRF_REMEMBER["RECORD_MODEL"] is synchronized into the
    DRF_REMEMBER_RECORD_MODEL setting so swapper can find it.
    """
    return swapper.load_model("drf_remember", "Record")


class PersistenceTokenMixin(models.Model):
    """
    Adds a rotating persistence token to a record model.
    """

    persistence_token = models.CharField(
        _("persistence token"),
        max_length=255,
        blank=True,
        db_index=True,
        default=generate_persistence_token,
    )

    class Meta:
        abstract = True

    def reset_persistence_token(self, save: bool = True) -> str:
        """
        Replaces the persistence token, logging the record out of every
        remembered browser.
        """
        self.persistence_token = generate_persistence_token()
        if save and self.pk is not None:
            self.save(update_fields=["persistence_token"])
        return self.persistence_token
