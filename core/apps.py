"""Django application configuration for core."""

from django.apps import AppConfig
from django.conf import settings


class CoreConfig(AppConfig):
    """Configuration class for the core application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self) -> None:
        """Configure logging.

        The reminder scheduler is not started here: every process that loads
        Django (rq workers, management commands) runs ready(), and only the
        runscheduler command may host the periodic job.
        """
        from core.logging import setup_logging  # noqa: PLC0415

        if getattr(settings, "TEST_MODE", False):
            return

        setup_logging()
