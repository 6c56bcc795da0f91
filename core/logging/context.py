"""Thread-local context management for reminder run tracking."""

import threading

# Thread-local storage for run context
_run_context = threading.local()


def set_run_id(run_id: str) -> None:
    """Store the reminder run ID in thread-local storage.

    Args:
        run_id: The unique reminder run identifier to store.
    """
    _run_context.run_id = run_id


def get_run_id() -> str | None:
    """Retrieve the reminder run ID from thread-local storage.

    Returns:
        The current run ID, or None if not set.
    """
    return getattr(_run_context, "run_id", None)


def clear_run_id() -> None:
    """Clear the run ID from thread-local storage.

    Worker threads are reused across runs, so the ID must be cleared once
    the unit of work finishes to avoid bleeding into the next run.
    """
    if hasattr(_run_context, "run_id"):
        delattr(_run_context, "run_id")
