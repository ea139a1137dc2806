# Calibre-Web Automated – fork of Calibre-Web
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

"""
Shared pytest fixtures and configuration for pagenav tests.

This module contains common fixtures that are automatically available
to all tests without needing to import them explicitly.
"""

import logging
import os
import sys

import pytest
from flask import Flask

# Add the parent directory to the path so we can import pagenav
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pagenav import logger
from pagenav.templating import init_app


# ============================================================================
# Flask Fixtures
# ============================================================================

@pytest.fixture
def app():
    """Flask app with the pager blueprint registered."""
    flask_app = Flask(__name__)
    flask_app.config.update(
        TESTING=True,
        PAGENAV_GET_VARS=['q'],
    )
    init_app(flask_app)
    yield flask_app
    reset_package_logger()


@pytest.fixture
def path_app():
    """Flask app encoding page numbers as trailing-slash path segments."""
    flask_app = Flask(__name__)
    flask_app.config.update(
        TESTING=True,
        PAGENAV_ALLOW_PAGE_NUM=True,
        PAGENAV_SLASH_URLS=True,
    )
    init_app(flask_app)
    yield flask_app
    reset_package_logger()


# ============================================================================
# Logging Fixtures
# ============================================================================

def reset_package_logger():
    package_logger = logger.get(logger.PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def clean_logger():
    """Reset the package logger after a test installed handlers on it."""
    yield logger.get(logger.PACKAGE_LOGGER)
    reset_package_logger()
