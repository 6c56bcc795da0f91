"""Structlog configuration for dual output: JSON files and colored console."""

import logging
import logging.handlers
import os
import time
from pathlib import Path

import structlog

from core.logging.filters import RunIDFilter
from core.logging.processors import (
    add_process_info,
    add_run_context,
    add_service_context,
    console_renderer,
)

DEFAULT_LOG_FILE = "./logs/collection-reminder-service.log"


def setup_logging() -> None:
    """Configure structlog with JSON file logs and colored console logs.

    File output is JSON with all metadata, rotated at 100MB. Console output
    is pretty-printed as ``[LEVEL] timestamp | run_id | logger | message``.

    Environment Variables:
    - LOG_FILE_PATH: Path to log file (default: ./logs/collection-reminder-service.log)
    - LOG_LEVEL: Logging level (default: INFO)
    - SERVICE_NAME: Service name for metadata
    - ENVIRONMENT: Deployment environment (default: development)
    """
    log_file_path = os.getenv("LOG_FILE_PATH", DEFAULT_LOG_FILE)
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, log_level, logging.INFO)

    Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(format="%(message)s", level=level, handlers=[])

    # Reminder runs are daily, so a modest backlog covers several weeks.
    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file_path,
        maxBytes=100 * 1024 * 1024,
        backupCount=30,
        encoding="utf-8",
    )
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    shared_processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_run_context,
            add_service_context,
            add_process_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=[
                *shared_processors,
                add_run_context,
                add_service_context,
                add_process_info,
            ],
        )
    )

    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=[*shared_processors, add_run_context],
        )
    )

    run_filter = RunIDFilter()
    file_handler.addFilter(run_filter)
    console_handler.addFilter(run_filter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # APScheduler logs every job execution at INFO.
    logging.getLogger("apscheduler").setLevel(max(level, logging.WARNING))

    logger = structlog.get_logger(__name__)
    logger.info(
        "logging_configured",
        log_file=log_file_path,
        log_level=log_level,
    )


def cleanup_old_logs(
    log_file_path: str | None = None, retention_days: int = 30
) -> int:
    """Remove rotated log files older than the retention period.

    Args:
        log_file_path: Path to the main log file. If None, uses LOG_FILE_PATH env var.
        retention_days: Number of days to retain logs (default: 30).

    Returns:
        Number of files deleted.
    """
    if log_file_path is None:
        log_file_path = os.getenv("LOG_FILE_PATH", DEFAULT_LOG_FILE)

    log_dir = Path(log_file_path).parent
    log_name = Path(log_file_path).name
    logger = structlog.get_logger(__name__)

    current_time = time.time()
    retention_seconds = retention_days * 24 * 60 * 60

    deleted_count = 0
    for log_file in log_dir.glob(f"{log_name}*"):
        if log_file.name == log_name:
            continue

        if current_time - log_file.stat().st_mtime > retention_seconds:
            try:
                log_file.unlink()
                deleted_count += 1
            except OSError as e:
                logger.warning(
                    "old_log_delete_failed",
                    file=str(log_file),
                    error=str(e),
                )

    if deleted_count > 0:
        logger.info(
            "old_logs_cleaned_up",
            deleted_count=deleted_count,
            retention_days=retention_days,
        )

    return deleted_count
