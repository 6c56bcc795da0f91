"""Tests for the core app configuration."""

from unittest.mock import patch

from django.apps import apps
from django.test import TestCase, override_settings


class TestCoreConfig(TestCase):
    """Test suite for CoreConfig.ready."""

    @patch("core.services.reminder_scheduler.start_scheduler")
    @patch("core.logging.setup_logging")
    def test_ready_skips_setup_in_test_mode(self, mock_setup_logging, mock_start):
        """Test that logging and the scheduler are left alone in tests."""
        apps.get_app_config("core").ready()

        mock_setup_logging.assert_not_called()
        mock_start.assert_not_called()

    @override_settings(TEST_MODE=False, REMINDER_SCHEDULER_ENABLED=True)
    @patch("core.services.reminder_scheduler.ReminderScheduler.start")
    @patch("core.services.reminder_scheduler.start_scheduler")
    @patch("core.logging.setup_logging")
    def test_ready_configures_logging_only(
        self, mock_setup_logging, mock_start_scheduler, mock_scheduler_start
    ):
        """Test that app loading never hosts the scheduler, even when enabled."""
        apps.get_app_config("core").ready()

        mock_setup_logging.assert_called_once()
        mock_start_scheduler.assert_not_called()
        mock_scheduler_start.assert_not_called()
