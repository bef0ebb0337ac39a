"""Structured logging utilities with context support."""

import functools
import logging
import threading
from typing import Any, Callable, Dict, Optional

# Thread-local storage for log context
_thread_local = threading.local()


def get_log_context() -> Dict[str, Any]:
    """
    Get a copy of the fields currently attached to log records.

    Returns:
        Dictionary of context fields (empty if none are set)
    """
    return dict(getattr(_thread_local, "context", {}))


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields are stored in thread-local storage and added to every log record
    emitted inside the block by the handlers set up in configure_logging().

    Example:
        with LogContext(source="week12.docx", row_count=5):
            logger.info("Recalculating timesheet")
            # Log will include source and row_count fields
    """

    def __init__(self, **kwargs):
        """
        Initialize log context with custom fields.

        Args:
            **kwargs: Key-value pairs to add to log records
        """
        self.fields = kwargs
        self.previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self):
        """Enter context and add fields to thread-local storage."""
        if not hasattr(_thread_local, "context"):
            _thread_local.context = {}

        # Save previous context for restoration
        self.previous_context = _thread_local.context.copy()
        _thread_local.context.update(self.fields)

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context and restore the previous fields."""
        if self.previous_context is not None:
            _thread_local.context = self.previous_context
        else:
            _thread_local.context = {}


class _ContextFilter(logging.Filter):
    """Logging filter that adds context fields to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Add context fields to log record.

        Args:
            record: Log record to modify

        Returns:
            True (always allow record through)
        """
        for key, value in get_log_context().items():
            setattr(record, key, value)
        return True


def log_function_call(
    func: Optional[Callable] = None, *, level: str = "DEBUG"
) -> Callable:
    """
    Decorator to log function entry, exit and exceptions.

    Args:
        func: Function to decorate (when used without arguments)
        level: Log level to use for entry and exit (DEBUG, INFO, ...)

    Returns:
        Decorated function

    Example:
        @log_function_call(level="INFO")
        def read(self, path):
            ...
    """

    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            logger = logging.getLogger(f.__module__)
            log_level = getattr(logging, level.upper())

            logger.log(log_level, f"Entering {f.__name__}")
            try:
                result = f(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Exception in {f.__name__}: {type(e).__name__}: {e}",
                    exc_info=True,
                )
                raise
            logger.log(log_level, f"Exiting {f.__name__}")
            return result

        return wrapper

    # Handle both @log_function_call and @log_function_call() syntax
    if func is None:
        return decorator
    return decorator(func)
