from django.apps import AppConfig


class DrfRememberConfig(AppConfig):
    name = "drf_remember"

    def ready(self):
        # run extra user configuration checks
        import drf_remember.checks  # noqa: F401
