# -*- coding: utf-8 -*-
# Calibre-Web Automated – fork of Calibre-Web
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

import logging


# pager item types
ITEM_PREVIOUS = 'previous'
ITEM_NEXT = 'next'
ITEM_FIRST = 'first'
ITEM_LAST = 'last'
ITEM_NUMBER = 'number'
ITEM_CURRENT = 'current'
ITEM_SEPARATOR = 'separator'

ITEM_TYPES = frozenset([ITEM_PREVIOUS, ITEM_NEXT, ITEM_FIRST, ITEM_LAST,
                        ITEM_NUMBER, ITEM_CURRENT, ITEM_SEPARATOR])

DEFAULT_NUM_PAGE_LINKS = 7
DEFAULT_PAGE_NUM_URL_PREFIX = 'page'

# templates are jinja2 source strings, rendered with autoescaping
DEFAULT_LIST_TEMPLATE = '<ul class="pagination">{{ items }}</ul>'
DEFAULT_ITEM_TEMPLATE = '<li class="{{ classes }}">{{ content }}</li>'
DEFAULT_LINK_TEMPLATE = '<a href="{{ url }}">{{ label }}</a>'
DEFAULT_CURRENT_LINK_TEMPLATE = '<span aria-current="page">{{ label }}</span>'

DEFAULT_LABEL_PREVIOUS = 'Previous'
DEFAULT_LABEL_NEXT = 'Next'
DEFAULT_LABEL_FIRST = 'First'
DEFAULT_LABEL_LAST = 'Last'
DEFAULT_LABEL_SEPARATOR = '…'

DEFAULT_CLASSES = {
    ITEM_PREVIOUS: 'previous',
    ITEM_NEXT: 'next',
    ITEM_FIRST: 'first-page',
    ITEM_LAST: 'last-page',
    ITEM_NUMBER: '',
    ITEM_CURRENT: 'active',
    ITEM_SEPARATOR: 'separator',
}
DEFAULT_CLASS_FIRST_ITEM = 'first'
DEFAULT_CLASS_LAST_ITEM = 'last'
DEFAULT_CLASS_FIRST_NUMBER = 'first-number'
DEFAULT_CLASS_LAST_NUMBER = 'last-number'

# flask app.config keys of the host integration and their defaults
HOST_CONFIG_DEFAULTS = {
    'PAGENAV_ALLOW_PAGE_NUM': False,
    'PAGENAV_SLASH_URLS': False,
    'PAGENAV_PAGE_NUM_URL_PREFIX': DEFAULT_PAGE_NUM_URL_PREFIX,
    'PAGENAV_GET_VARS': (),
    'PAGENAV_ARRAY_TO_CSV': False,
    'PAGENAV_NUM_PAGE_LINKS': DEFAULT_NUM_PAGE_LINKS,
    'PAGENAV_LOG_LEVEL': logging.INFO,
    'PAGENAV_LOG_FILE': None,
}
