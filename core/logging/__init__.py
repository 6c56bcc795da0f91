"""Logging utilities for the reminder service."""

from core.logging.config import cleanup_old_logs, setup_logging
from core.logging.context import clear_run_id, get_run_id, set_run_id
from core.logging.filters import RunIDFilter

__all__ = [
    "RunIDFilter",
    "cleanup_old_logs",
    "clear_run_id",
    "get_run_id",
    "set_run_id",
    "setup_logging",
]
