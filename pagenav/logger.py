# -*- coding: utf-8 -*-
# Calibre-Web Automated – fork of Calibre-Web
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

import os
import sys
import inspect
import logging
from logging import Formatter, StreamHandler
from logging.handlers import RotatingFileHandler


FORMATTER = Formatter("[%(asctime)s] %(levelname)5s {%(name)s:%(lineno)d} %(message)s")
DEFAULT_LOG_LEVEL = logging.INFO
LOG_TO_STDERR = '/dev/stderr'
LOG_TO_STDOUT = '/dev/stdout'

PACKAGE_LOGGER = 'pagenav'

logging.addLevelName(logging.WARNING, "WARN")
logging.addLevelName(logging.CRITICAL, "CRIT")


def get(name=None):
    return logging.getLogger(name)


def create():
    parent_frame = inspect.stack(0)[1]
    if hasattr(parent_frame, 'frame'):
        parent_frame = parent_frame.frame
    else:
        parent_frame = parent_frame[0]
    parent_module = inspect.getmodule(parent_frame)
    return get(parent_module.__name__)


def is_debug_enabled():
    return get(PACKAGE_LOGGER).getEffectiveLevel() <= logging.DEBUG


def get_level_name(level):
    return logging.getLevelName(level)


def is_valid_logfile(file_path):
    if file_path in (LOG_TO_STDERR, LOG_TO_STDOUT):
        return True
    if not file_path:
        return True
    if os.path.isdir(file_path):
        return False
    log_dir = os.path.dirname(file_path)
    return (not log_dir) or os.path.isdir(log_dir)


def setup(log_file=None, log_level=None):
    """Attach exactly one handler to the package logger.

    ``log_file`` may be a path, ``/dev/stderr``, ``/dev/stdout`` or empty
    (stderr). Invalid paths fall back to stderr.
    """
    log_level = log_level or DEFAULT_LOG_LEVEL
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
        if not isinstance(log_level, int):
            log_level = DEFAULT_LOG_LEVEL

    package_logger = get(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)

    if not is_valid_logfile(log_file):
        log_file = LOG_TO_STDERR

    if log_file == LOG_TO_STDOUT:
        file_handler = StreamHandler(sys.stdout)
    elif not log_file or log_file == LOG_TO_STDERR:
        file_handler = StreamHandler()
    else:
        try:
            file_handler = RotatingFileHandler(log_file, maxBytes=100000, backupCount=2, encoding='utf-8')
        except (IOError, PermissionError):
            file_handler = StreamHandler()
            log_file = LOG_TO_STDERR
    file_handler.setFormatter(FORMATTER)

    for h in package_logger.handlers[:]:
        package_logger.removeHandler(h)
        h.close()
    package_logger.addHandler(file_handler)
    return log_file or LOG_TO_STDERR
