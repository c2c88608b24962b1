#!/usr/bin/env python3
"""
lldp-netcfg - Logging setup
Copyright (C) 2025  Dorin Badea
GPLv3 License

Configures the package logger once per run: a rotating debug log on disk and a
terse stderr handler whose level follows --debug / --verbose.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

from lldpnetcfg.utils.constants import (
    DEFAULT_LOG_DIR,
    ENV_LOG_DIR,
    ENV_NO_FILE_LOG,
    LOG_BACKUP_COUNT,
    LOG_MAX_BYTES,
    PROG_NAME,
)

LOGGER_NAME = "lldpnetcfg"

FILE_FORMAT = "%(asctime)s - [%(levelname)s] - %(funcName)s:%(lineno)d - %(message)s"
STREAM_FORMAT = "%(asctime)s [%(levelname)s] - %(message)s"


class _NoTracebackFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        exc_info = record.exc_info
        stack_info = record.stack_info
        record.exc_info = None
        record.stack_info = None
        try:
            return super().format(record)
        finally:
            record.exc_info = exc_info
            record.stack_info = stack_info


def get_log_dir() -> str:
    return os.path.expanduser(os.environ.get(ENV_LOG_DIR) or DEFAULT_LOG_DIR)


def _file_logging_disabled() -> bool:
    return os.environ.get(ENV_NO_FILE_LOG, "").strip().lower() in {"1", "true", "yes", "on"}


def _build_file_handler(log_dir: str) -> Optional[RotatingFileHandler]:
    try:
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, f"{PROG_NAME}_{datetime.now().strftime('%Y%m%d')}.log")
        handler = RotatingFileHandler(
            log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
        )
    except OSError:
        return None
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    handler.setLevel(logging.DEBUG)
    return handler


def setup_logging(level: int = logging.ERROR, *, stream=None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Threshold for the stderr handler (file log always records DEBUG)
        stream: Stream for console records (defaults to stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream=stream or sys.stderr)
    console.setLevel(level)
    console.setFormatter(_NoTracebackFormatter(STREAM_FORMAT, datefmt="%Y/%m/%d %H:%M:%S"))
    logger.addHandler(console)

    if not _file_logging_disabled():
        file_handler = _build_file_handler(get_log_dir())
        if file_handler is None:
            logger.warning("File logging disabled (permission or path issue)")
        else:
            logger.addHandler(file_handler)

    logger.debug("=" * 60)
    logger.debug("%s session start", PROG_NAME)
    logger.debug("User: %s", os.getenv("SUDO_USER", os.getenv("USER", "unknown")))
    logger.debug("PID: %s", os.getpid())
    return logger


def level_from_flags(debug: bool = False, verbose: bool = False) -> int:
    """Map --debug / --verbose to a console log level (debug wins)."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.ERROR
