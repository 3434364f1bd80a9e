import os
from contextlib import AbstractContextManager, contextmanager
from typing import Any, Generator

import structlog
from tqdm.contrib.logging import logging_redirect_tqdm as _redirect_tqdm

from imgmaker.loggers.logging_config import DEFAULT_LOG_LEVEL, LoggingManager

DEFAULT_OR_ENV = os.environ.get("IMGMAKER_LOG_LEVEL", DEFAULT_LOG_LEVEL)


def get_logger(name: str, level: str = "INFO") -> structlog.stdlib.BoundLogger:
    """
    Retrieve a logger with the specified log level.

    Parameters
    ----------
    name : str
        Name of Logger Instance
    level : str
        Desired logging level.

    Returns
    -------
    structlog.stdlib.BoundLogger
        Configured logger instance.
    """
    logging_manager = LoggingManager(name)
    env_level = logging_manager.env_level

    if env_level not in (level.upper(), DEFAULT_LOG_LEVEL):
        logging_manager.get_logger().warning(
            f"Environment variable {name.upper()}_LOG_LEVEL is {env_level} "
            f"but you are setting it to {level}"
        )
    return logging_manager.configure_logging(level=level)


@contextmanager
def temporary_log_level(
    logger: structlog.stdlib.BoundLogger, level: str
) -> Generator[None, Any, None]:
    """
    Temporarily change the log level of a logger within a context.

    Examples
    --------
    >>> with temporary_log_level(logger, "ERROR"):
    ...     logger.warning("This won't be logged")
    ...     logger.error("This will be logged")
    """
    import logging

    original_level = logger.level
    logger.setLevel(getattr(logging, level.upper()))
    try:
        yield
    finally:
        logger.setLevel(original_level)


def tqdm_logging_redirect(
    logger_name: str = "imgmaker",
) -> AbstractContextManager[None]:
    """Route log records through tqdm so they don't break progress bars."""
    import logging

    return _redirect_tqdm([logging.getLogger(logger_name)])


logger = get_logger("imgmaker", DEFAULT_OR_ENV)

__all__ = [
    "get_logger",
    "logger",
    "temporary_log_level",
    "tqdm_logging_redirect",
]
