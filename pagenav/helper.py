# -*- coding: utf-8 -*-
# Calibre-Web Automated – fork of Calibre-Web
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

from urllib.parse import quote_plus


def _encode(value):
    if value is None:
        return ''
    if isinstance(value, bool):
        value = int(value)
    return quote_plus(str(value))


def build_query_string(variables, array_to_csv=False):
    """Canonical query string for the variables preserved across page links.

    Returns ``''`` for an empty mapping, otherwise ``?k=v&k2=v2``. List
    values become ``k=v1%2Cv2`` with ``array_to_csv`` and ``k%5B%5D=v1&k%5B%5D=v2``
    without it.
    """
    if not variables:
        return ''
    query = '?'
    for key, value in variables.items():
        if isinstance(value, (list, tuple)):
            if array_to_csv:
                query += '{}={}&'.format(_encode(key), _encode(','.join(str(v) for v in value)))
            else:
                for element in value:
                    query += '{}={}&'.format(_encode(str(key) + '[]'), _encode(element))
        else:
            query += '{}={}&'.format(_encode(key), _encode(value))
    return query.rstrip('?&')


def append_query_param(url, name, value):
    separator = '&' if '?' in url else '?'
    return '{}{}{}={}'.format(url, separator, name, value)


def ensure_trailing_slash(url):
    return url if url.endswith('/') else url + '/'
