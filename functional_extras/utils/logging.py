"""
Functions for logging
"""

import inspect
import logging
import sys
import warnings
from functools import wraps
from typing import TextIO

from loguru import logger

from .. import constants as c
from ..config import auto_match_config


def _loguru_level(record: logging.LogRecord) -> str | int:
    """
    Loguru level of the same name, else the numeric level of `record`
    """
    try:
        return logger.level(record.levelname).name
    except ValueError:
        return record.levelno


class _StdlibToLoguru(logging.Handler):
    """
    Forward records of the standard `logging` module to loguru
    """

    def emit(self, record: logging.LogRecord) -> None:
        # depth 1 is the frame that called emit, skip until outside `logging`
        caller, depth = inspect.currentframe().f_back, 1  # type: ignore
        while caller is not None and caller.f_code.co_filename == logging.__file__:
            caller, depth = caller.f_back, depth + 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            _loguru_level(record), record.getMessage()
        )


@auto_match_config(prefixes=[c.LOGGER_PREFIX])
def config_logger(
    sink: str | TextIO = sys.stderr,
    format: str = "{time:YYYY-MM-DD at HH:mm:ss} {level} {message}",
    level: str = "INFO",
    backtrace: bool = True,
    diagnose: bool = True,
    retention: str | None = None,
):
    """
    Replace the loguru handlers with a single `sink` and enable package logs

    Messages from the standard `logging` module and from `warnings` are
    forwarded to the same sink.
    """
    logger.remove()
    # loguru only accepts retention for file sinks
    file_kwargs = {"retention": retention} if isinstance(sink, str) else {}
    logger.add(
        sink,  # type: ignore
        format=format,
        level=level,
        backtrace=backtrace,
        diagnose=diagnose,
        **file_kwargs,
    )
    logger.enable(c.PACKAGE_NAME)

    logging.basicConfig(handlers=[_StdlibToLoguru()], level=0, force=True)
    warnings.showwarning = lambda msg, *args, **kwargs: logger.warning(msg)


def logger_wraps(*, entry=True, exit=True, level="DEBUG"):
    """
    Logs entry and exit of a function
    """

    def wrapper(func):
        name = func.__name__

        @wraps(func)
        def wrapped(*args, **kwargs):
            if entry:
                logger.log(level, f"Entering '{name}' (args={args}, kwargs={kwargs})")
            result = func(*args, **kwargs)
            if exit:
                logger.log(level, f"Exiting '{name}' (result={result})")
            return result

        return wrapped

    return wrapper
