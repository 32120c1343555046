#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/logging_utils.py
"""Logging setup for the ``clashview`` package logger.

Every module logs through a child of the ``clashview`` logger, so advisories
such as the legacy monospace warning reach whatever handlers are installed
here. The root logger and the handlers of the embedding application are
left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "clashview"

# Marks handlers installed by configure_logging so a second call replaces them
_HANDLER_FLAG = "_clashview_handler"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def _install(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_FLAG, True)
    logger.addHandler(handler)


def configure_logging(
    log_level: int | str = logging.WARNING,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Send clashview log records to a stream and optionally a file.

    Calling this again replaces the handlers installed by the previous call.
    Records stop propagating to the root logger so they are not written
    twice when the application has its own root handlers.

    Parameters
    ----------
    log_level : int | str, default logging.WARNING
        Numeric logging level or string name (e.g., "INFO"); unknown names
        fall back to INFO
    log_file : str, optional
        Path of a log file that receives the same records
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces
    stream : TextIO, optional
        Stream for the console handler; defaults to ``sys.stderr``

    Returns
    -------
    logging.Logger
        The configured ``clashview`` logger

    """
    resolved_level = _resolve_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        if getattr(handler, _HANDLER_FLAG, False):
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(resolved_level)
    package_logger.propagate = False

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    _install(package_logger, logging.StreamHandler(stream or sys.stderr), resolved_level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            _install(package_logger, file_handler, resolved_level, formatter)
            package_logger.info("Logging to file: %s", log_file)

    return package_logger
