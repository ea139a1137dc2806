# -*- coding: utf-8 -*-
# Calibre-Web Automated – fork of Calibre-Web
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

import dataclasses
import re
from functools import lru_cache
from typing import Callable, List, Optional

from jinja2 import Environment
from markupsafe import Markup

from . import constants, logger
from .config import RenderConfig
from .helper import append_query_param, ensure_trailing_slash
from .pagination import PagerItem, plan_page_links


log = logger.create()

_EMPTY_CLASS_RE = re.compile(r'\s+class\s*=\s*(["\'])\s*\1')
_CONTENT_MARK = '\x00pagenav-content\x00'

_env = Environment(autoescape=True)


@lru_cache(maxsize=64)
def _template(source):
    return _env.from_string(source)


@dataclasses.dataclass
class RenderResult:
    html: Markup
    previous_url: str = ''
    next_url: str = ''
    is_last_page: Optional[bool] = None


def page_url(page_num, config):
    """URL of ``page_num`` under the URL style of ``config``."""
    base_url = config.base_url or ''
    if page_num <= 1:
        if config.slash_urls:
            base_url = ensure_trailing_slash(base_url)
        return base_url + config.query_string
    if config.allow_page_num:
        url = ensure_trailing_slash(base_url) + '{}{}'.format(config.page_num_url_prefix, page_num)
        if config.slash_page_num:
            url += '/'
        return url + config.query_string
    return append_query_param(base_url + config.query_string, config.page_num_url_prefix, page_num)


class NavigationRenderer(object):
    """Turns a pager plan into markup.

    ``url_builder`` replaces the URL construction of :func:`page_url`; it is
    called with a page number and must return the URL for it.
    """

    def __init__(self, config: Optional[RenderConfig] = None,
                 url_builder: Optional[Callable[[int], str]] = None):
        self.config = config or RenderConfig()
        self.url_builder = url_builder or (lambda page_num: page_url(page_num, self.config))

    def _classes(self, item, position, count, first_number, last_number):
        config = self.config
        classes = [config.css_class(item.type)]
        if position == 0:
            classes.append(config.class_first_item)
        if position == count - 1:
            classes.append(config.class_last_item)
        if position == first_number:
            classes.append(config.class_first_number)
        if position == last_number:
            classes.append(config.class_last_number)
        return ' '.join(c.strip() for c in classes if c and c.strip())

    def _content(self, item, url):
        config = self.config
        if item.type == constants.ITEM_SEPARATOR:
            return Markup.escape(config.label_separator)
        if item.type == constants.ITEM_CURRENT:
            source = config.current_link_template
        else:
            source = config.link_template
        return Markup(_template(source).render(url=url, label=config.labels.get(item.type, item.label)))

    def render(self, plan: List[PagerItem]) -> RenderResult:
        if not plan:
            return RenderResult(html=Markup(''))

        count = len(plan)
        numbered = [position for position, item in enumerate(plan) if item.label.isdigit()]
        first_number = numbered[0] if numbered else None
        last_number = numbered[-1] if numbered else None

        is_last_page = count <= 1
        if last_number is not None and plan[last_number].type == constants.ITEM_CURRENT:
            is_last_page = True

        urls = [None if item.type == constants.ITEM_SEPARATOR else self.url_builder(item.page_num)
                for item in plan]
        previous_url = ''
        next_url = ''
        rendered = list()
        item_template = _template(self.config.item_template)
        for position, item in enumerate(plan):
            if item.type == constants.ITEM_CURRENT:
                if position > 0 and urls[position - 1] is not None:
                    previous_url = urls[position - 1]
                if position < count - 1 and urls[position + 1] is not None:
                    next_url = urls[position + 1]
            # content is filled in after the wrapper lost an empty class attribute
            wrapper = item_template.render(
                classes=self._classes(item, position, count, first_number, last_number),
                content=Markup(_CONTENT_MARK))
            wrapper = _EMPTY_CLASS_RE.sub('', wrapper)
            rendered.append(wrapper.replace(_CONTENT_MARK, self._content(item, urls[position])))

        html = _template(self.config.list_template).render(items=Markup(''.join(rendered)))
        log.debug('Rendered pager with %s items, previous %r, next %r', count, previous_url, next_url)
        return RenderResult(html=Markup(html), previous_url=previous_url, next_url=next_url,
                            is_last_page=is_last_page)


def render_pagination(total_items, items_per_page, current_page, config=None,
                      url_builder=None, **overrides):
    """Plan and render the pager of one page of results in a single call."""
    config = config or RenderConfig()
    if overrides:
        config = config.merge(**overrides)
    plan = plan_page_links(total_items, items_per_page, current_page, config.num_page_links,
                           show_first_last=config.show_first_last)
    return NavigationRenderer(config, url_builder=url_builder).render(plan)
