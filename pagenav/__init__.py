# -*- coding: utf-8 -*-
# Calibre-Web Automated – fork of Calibre-Web
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

__package__ = "pagenav"

from .pagination import InvalidConfiguration, Pagination, PagerItem, plan_page_links
from .config import RenderConfig
from .helper import build_query_string
from .renderer import NavigationRenderer, RenderResult, page_url, render_pagination

__all__ = [
    'InvalidConfiguration',
    'NavigationRenderer',
    'Pagination',
    'PagerItem',
    'RenderConfig',
    'RenderResult',
    'build_query_string',
    'page_url',
    'plan_page_links',
    'render_pagination',
]
