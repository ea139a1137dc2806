# -*- coding: utf-8 -*-
# Calibre-Web Automated – fork of Calibre-Web
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from logging.handlers import RotatingFileHandler

from pagenav import logger
from pagenav.pagination import plan_page_links


class TestLogger:
    """Tests for the package logger setup"""

    def test_create_uses_calling_module(self):
        assert logger.create().name == __name__

    def test_setup_stderr(self, clean_logger):
        assert logger.setup(None, logging.WARNING) == logger.LOG_TO_STDERR
        assert len(clean_logger.handlers) == 1
        assert clean_logger.level == logging.WARNING
        assert logger.is_debug_enabled() is False

    def test_setup_file(self, clean_logger, tmp_path):
        log_file = str(tmp_path / 'pagenav.log')
        assert logger.setup(log_file, 'debug') == log_file
        assert isinstance(clean_logger.handlers[0], RotatingFileHandler)
        assert logger.is_debug_enabled() is True

        plan_page_links(95, 10, 5, 3)
        clean_logger.handlers[0].flush()
        with open(log_file, encoding='utf-8') as f:
            content = f.read()
        assert 'DEBUG {pagenav.pagination:' in content
        assert 'Planned pager for page 5 of 10' in content

    def test_setup_replaces_handlers(self, clean_logger, tmp_path):
        logger.setup(None)
        logger.setup(str(tmp_path / 'pagenav.log'))
        assert len(clean_logger.handlers) == 1

    def test_invalid_log_file_falls_back_to_stderr(self, clean_logger, tmp_path):
        assert logger.setup(str(tmp_path / 'missing' / 'pagenav.log')) == logger.LOG_TO_STDERR
        assert logger.setup(str(tmp_path)) == logger.LOG_TO_STDERR

    def test_unknown_level_name(self, clean_logger):
        logger.setup(None, 'chatty')
        assert clean_logger.level == logger.DEFAULT_LOG_LEVEL

    def test_level_names(self):
        assert logger.get_level_name(logging.WARNING) == 'WARN'
        assert logger.get_level_name(logging.CRITICAL) == 'CRIT'
