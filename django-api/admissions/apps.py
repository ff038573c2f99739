from django.apps import AppConfig
from django.conf import settings


class AdmissionsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "admissions"
    verbose_name = "Event admissions"

    def ready(self) -> None:
        from admissions import container
        from config.logging import setup_logging

        setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
        # fail fast on a missing signing secret
        container.get_token_rotator()
