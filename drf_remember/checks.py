from django.core.checks import Error, register
from django.core.exceptions import FieldDoesNotExist, ImproperlyConfigured

from drf_remember.models import get_record_model
from drf_remember.validators import supports_signing
from drf_remember.settings import drf_remember_settings


@register()
def check_record_model(app_configs, **kwargs):
    errors = []
    field_name = drf_remember_settings.PERSISTENCE_TOKEN_FIELD

    try:
        model = get_record_model()
    except (LookupError, ImproperlyConfigured):
        return [
            Error(
                f"The record model '{drf_remember_settings.RECORD_MODEL}' "
                "could not be loaded.",
                obj="settings.DRF_REMEMBER['RECORD_MODEL']",
                id="drf_remember.E003",
            )
        ]

    try:
        model._meta.get_field(field_name)
    except FieldDoesNotExist:
        errors.append(
            Error(
                f"'{model._meta.label}' has no '{field_name}' field.",
                hint="Add drf_remember.models.PersistenceTokenMixin to the model.",
                obj="settings.DRF_REMEMBER['PERSISTENCE_TOKEN_FIELD']",
                id="drf_remember.E001",
            )
        )
    return errors


@register()
def check_signing_support(app_configs, **kwargs):
    errors = []
    jar_class = drf_remember_settings.COOKIE_JAR_CLASS

    if drf_remember_settings.SIGN_COOKIE and not supports_signing(jar_class):
        errors.append(
            Error(
                f"SIGN_COOKIE is enabled but {jar_class.__name__} cannot sign cookies.",
                obj="settings.DRF_REMEMBER['SIGN_COOKIE']",
                id="drf_remember.E002",
            )
        )
    return errors
