"""
Logging for the DesignOS loaders.

Every module logs under the ``designos`` hierarchy. Handlers are attached
only to the ``designos`` logger and write to stderr, so JSON printed by the
CLI on stdout is never mixed with log lines.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional


DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "designos"

_configured = False


def _build_handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[Path | str] = None,
    console: bool = True,
) -> None:
    """
    Configure the ``designos`` logger.

    Replaces any handlers from a previous call, so the CLI can reconfigure
    after loading its config file.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR); unknown names mean INFO
        format_string: Record format (DEFAULT_FORMAT if None)
        log_file: Optional file that also receives every record
        console: Attach a stderr handler
    """
    global _configured

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(numeric_level)
    package_logger.propagate = False
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if console:
        package_logger.addHandler(
            _build_handler(logging.StreamHandler(sys.stderr), numeric_level, formatter)
        )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        package_logger.addHandler(
            _build_handler(logging.FileHandler(log_path, encoding='utf-8'), numeric_level, formatter)
        )

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger inside the ``designos`` hierarchy.

    Module names already under ``designos`` are used as-is; anything else
    is nested below it. Until ``setup_logging`` runs, only warnings and
    errors are shown.
    """
    if not _configured:
        setup_logging(level="WARNING")

    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


class LogContext:
    """
    Times one load pass and logs its start, end and failure.

    Example:
        with LogContext(logger, "Loading product data", root=product_root):
            overview = loader.load_product_overview()

    Exceptions are logged and re-raised.
    """

    def __init__(self, logger: logging.Logger, operation: str, **context):
        self.logger = logger
        self.operation = operation
        self.context = context
        self._started: Optional[float] = None

    @property
    def elapsed(self) -> float:
        if self._started is None:
            return 0.0
        return time.perf_counter() - self._started

    def __enter__(self):
        self._started = time.perf_counter()
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        self.logger.debug(f"{self.operation}: started" + (f" ({details})" if details else ""))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.debug(f"{self.operation}: done in {self.elapsed:.3f}s")
        else:
            self.logger.error(
                f"{self.operation}: failed after {self.elapsed:.3f}s ({exc_type.__name__}: {exc_val})"
            )
        return False


def log_exception(logger: logging.Logger, message: str, exc: Exception) -> None:
    """Log ``exc`` with its traceback at ERROR level."""
    logger.error(f"{message}: {type(exc).__name__}: {exc}", exc_info=exc)
