"""Pytest configuration and shared fixtures."""

import os

import django

import pytest
import structlog

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "reminder_service.settings_test")
django.setup()

# Route structlog through stdlib logging so the null handlers in the test
# settings silence it.
structlog.configure(
    processors=[structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=False,
)


@pytest.fixture(autouse=True)
def _clear_run_context():
    """Make sure no run ID leaks between tests."""
    from core.logging import clear_run_id  # noqa: PLC0415

    yield
    clear_run_id()
