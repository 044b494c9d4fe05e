"""Structured logging configuration for the SpeedRead service"""

import inspect
import json
import logging
import time
from datetime import datetime
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Callable, Optional


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Custom fields passed through extra={"extra_data": {...}}
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data)


class ConsoleFormatter(logging.Formatter):
    """Human-readable console formatter with colors"""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        log_msg = f"{color}[{record.levelname}]{reset} {record.name} - {record.getMessage()}"

        if hasattr(record, "extra_data") and "duration_ms" in record.extra_data:
            duration = record.extra_data["duration_ms"]
            log_msg += f" ({duration:.2f}ms)"

        if record.exc_info:
            log_msg += f"\n{self.formatException(record.exc_info)}"

        return log_msg


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    enable_console_logging: bool = True,
) -> None:
    """
    Setup logging configuration for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path of a rotating JSON log file, or None to disable file logging
        enable_console_logging: Enable logging to console
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    root_logger.handlers.clear()

    if enable_console_logging:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, log_level.upper()))
        console_handler.setFormatter(ConsoleFormatter())
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path, maxBytes=10 * 1024 * 1024, backupCount=5  # 10MB
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    # Per-token playback logging is noisy at DEBUG
    logging.getLogger("speedread.services.playback").setLevel(logging.INFO)


def log_performance(operation_name: str):
    """
    Decorator to log function execution time.

    Args:
        operation_name: Name of the operation for logging
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def async_wrapper(*args, **kwargs) -> Any:
            logger = logging.getLogger(func.__module__)
            start_time = time.perf_counter()

            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    f"{operation_name} failed: {e}",
                    exc_info=True,
                    extra={
                        "extra_data": {
                            "operation": operation_name,
                            "duration_ms": duration_ms,
                            "success": False,
                            "error_type": type(e).__name__,
                        }
                    },
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.debug(
                f"{operation_name} completed",
                extra={
                    "extra_data": {
                        "operation": operation_name,
                        "duration_ms": duration_ms,
                        "success": True,
                    }
                },
            )
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs) -> Any:
            logger = logging.getLogger(func.__module__)
            start_time = time.perf_counter()

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    f"{operation_name} failed: {e}",
                    exc_info=True,
                    extra={
                        "extra_data": {
                            "operation": operation_name,
                            "duration_ms": duration_ms,
                            "success": False,
                            "error_type": type(e).__name__,
                        }
                    },
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.debug(
                f"{operation_name} completed",
                extra={
                    "extra_data": {
                        "operation": operation_name,
                        "duration_ms": duration_ms,
                        "success": True,
                    }
                },
            )
            return result

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
