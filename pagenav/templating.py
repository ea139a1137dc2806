# -*- coding: utf-8 -*-
# Calibre-Web Automated – fork of Calibre-Web
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

# pager globals and filters for jinja templates of a flask app

import re

from flask import Blueprint, current_app, g, request
from flask_babel import Babel
from flask_babel import gettext as _
from markupsafe import Markup, escape

from . import constants, logger
from .config import RenderConfig, resolve_aliases
from .helper import build_query_string
from .pagination import Pagination
from .renderer import page_url, render_pagination

pagenav = Blueprint('pagenav', __name__)
log = logger.create()

babel = Babel()


def _setting(name):
    return current_app.config.get(name, constants.HOST_CONFIG_DEFAULTS[name])


def preserved_get_vars(get_vars=None):
    """GET variables to keep on every page link.

    An explicit ``get_vars`` mapping wins; otherwise the names listed in
    ``PAGENAV_GET_VARS`` are picked from the current request.
    """
    if get_vars:
        return dict(get_vars)
    whitelist = _setting('PAGENAV_GET_VARS') or ()
    page_param = None if _setting('PAGENAV_ALLOW_PAGE_NUM') else _setting('PAGENAV_PAGE_NUM_URL_PREFIX')
    preserved = dict()
    for name in whitelist:
        if name == page_param:
            continue
        if name + '[]' in request.args:
            preserved[name] = request.args.getlist(name + '[]')
        elif name in request.args:
            values = request.args.getlist(name)
            preserved[name] = values if len(values) > 1 else values[0]
    return preserved


def _base_url():
    path = request.path
    if _setting('PAGENAV_ALLOW_PAGE_NUM'):
        # drop the page segment of the current url
        segment = re.escape(_setting('PAGENAV_PAGE_NUM_URL_PREFIX')) + r'\d+/?$'
        path = re.sub(r'/' + segment, '', path) or '/'
    return request.script_root + path


def build_render_config(get_vars=None, **options):
    options = resolve_aliases(options)
    array_to_csv = options.pop('array_to_csv', _setting('PAGENAV_ARRAY_TO_CSV'))
    slash_urls = _setting('PAGENAV_SLASH_URLS')
    defaults = {
        'num_page_links': _setting('PAGENAV_NUM_PAGE_LINKS'),
        'base_url': _base_url(),
        'query_string': build_query_string(preserved_get_vars(get_vars), array_to_csv),
        'array_to_csv': array_to_csv,
        'allow_page_num': _setting('PAGENAV_ALLOW_PAGE_NUM'),
        'slash_urls': slash_urls,
        'slash_page_num': slash_urls,
        'page_num_url_prefix': _setting('PAGENAV_PAGE_NUM_URL_PREFIX'),
        'label_previous': _('Previous'),
        'label_next': _('Next'),
        'label_first': _('First'),
        'label_last': _('Last'),
    }
    return RenderConfig.from_mapping(defaults, **options)


def _publish(result):
    g.pagenav_prev_url = result.previous_url
    g.pagenav_next_url = result.next_url
    g.pagenav_is_last_page = result.is_last_page


@pagenav.app_template_global('render_pager')
def render_pager(source=None, total=None, per_page=None, page=None, get_vars=None, **options):
    if source is not None:
        pagination = source if isinstance(source, Pagination) else Pagination.from_source(source)
        total, per_page, page = pagination.total_count, pagination.per_page, pagination.page
    config = build_render_config(get_vars, **options)
    result = render_pagination(total or 0, per_page, page or 1, config)
    _publish(result)
    return result.html


@pagenav.app_template_global('pager_link_tags')
def pager_link_tags():
    links = list()
    if g.get('pagenav_prev_url'):
        links.append('<link rel="prev" href="{}">'.format(escape(g.pagenav_prev_url)))
    if g.get('pagenav_next_url'):
        links.append('<link rel="next" href="{}">'.format(escape(g.pagenav_next_url)))
    return Markup('\n'.join(links))


# pagination links in jinja
@pagenav.app_template_filter('url_for_page')
def url_for_page(page):
    return page_url(int(page), build_render_config())


def init_app(app):
    for key, value in constants.HOST_CONFIG_DEFAULTS.items():
        app.config.setdefault(key, value)
    if 'babel' not in app.extensions:
        babel.init_app(app)
    log_file = logger.setup(app.config['PAGENAV_LOG_FILE'], app.config['PAGENAV_LOG_LEVEL'])
    log.debug('Pager logging to %s', log_file)
    app.register_blueprint(pagenav)
