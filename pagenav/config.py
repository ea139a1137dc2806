# -*- coding: utf-8 -*-
# Calibre-Web Automated – fork of Calibre-Web
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

import dataclasses
from typing import Dict, Mapping, Optional

from . import constants, logger
from .pagination import InvalidConfiguration


log = logger.create()

# spellings used by host configuration files
_ALIASES = {
    'numPageLinks': 'num_page_links',
    'baseUrl': 'base_url',
    'queryString': 'query_string',
    'arrayToCSV': 'array_to_csv',
    'allowPageNum': 'allow_page_num',
    'slashUrls': 'slash_urls',
    'slashPageNum': 'slash_page_num',
    'pageNumUrlPrefix': 'page_num_url_prefix',
    'showFirstLast': 'show_first_last',
}


def resolve_aliases(mapping):
    return {_ALIASES.get(key, key): value for key, value in (mapping or {}).items()}


@dataclasses.dataclass(frozen=True)
class RenderConfig:
    """Templates, labels, classes and URL parameters of one pager render.

    Attributes:
        list_template: wraps all rendered items, placeholder ``items``
        item_template: wraps one item, placeholders ``classes`` and ``content``
        link_template: link of a navigable item, placeholders ``url`` and ``label``
        current_link_template: link template of the current page
        classes: CSS class per item type
        num_page_links: maximum size of the numbered window
        base_url: URL of page 1 without query string
        query_string: canonical query string preserved on every link
        allow_page_num: encode page numbers as path segments instead of a query parameter
        slash_urls: enforce a trailing slash on page 1 URLs
        slash_page_num: append a slash after the page number path segment
        page_num_url_prefix: path prefix or query parameter name of the page number
    """

    list_template: str = constants.DEFAULT_LIST_TEMPLATE
    item_template: str = constants.DEFAULT_ITEM_TEMPLATE
    link_template: str = constants.DEFAULT_LINK_TEMPLATE
    current_link_template: str = constants.DEFAULT_CURRENT_LINK_TEMPLATE

    label_previous: str = constants.DEFAULT_LABEL_PREVIOUS
    label_next: str = constants.DEFAULT_LABEL_NEXT
    label_first: str = constants.DEFAULT_LABEL_FIRST
    label_last: str = constants.DEFAULT_LABEL_LAST
    label_separator: str = constants.DEFAULT_LABEL_SEPARATOR

    classes: Dict[str, str] = dataclasses.field(default_factory=lambda: dict(constants.DEFAULT_CLASSES))
    class_first_item: str = constants.DEFAULT_CLASS_FIRST_ITEM
    class_last_item: str = constants.DEFAULT_CLASS_LAST_ITEM
    class_first_number: str = constants.DEFAULT_CLASS_FIRST_NUMBER
    class_last_number: str = constants.DEFAULT_CLASS_LAST_NUMBER

    num_page_links: int = constants.DEFAULT_NUM_PAGE_LINKS
    show_first_last: bool = False
    base_url: str = ''
    query_string: str = ''
    array_to_csv: bool = False
    allow_page_num: bool = False
    slash_urls: bool = False
    slash_page_num: bool = False
    page_num_url_prefix: str = constants.DEFAULT_PAGE_NUM_URL_PREFIX

    def __post_init__(self):
        try:
            num_page_links = int(self.num_page_links)
        except (TypeError, ValueError):
            raise InvalidConfiguration("num_page_links must be an integer, got {!r}".format(self.num_page_links))
        if num_page_links < 1:
            raise InvalidConfiguration("num_page_links must be a positive integer, got {!r}".format(num_page_links))
        object.__setattr__(self, 'num_page_links', num_page_links)
        # partial class mappings extend the defaults
        merged = dict(constants.DEFAULT_CLASSES)
        merged.update(self.classes or {})
        object.__setattr__(self, 'classes', merged)

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping] = None, **overrides) -> "RenderConfig":
        """Merge caller values over the defaults, ignoring unknown keys."""
        return cls().merge(mapping, **overrides)

    def merge(self, mapping: Optional[Mapping] = None, **overrides) -> "RenderConfig":
        values = resolve_aliases(mapping)
        values.update(resolve_aliases(overrides))
        known = {f.name for f in dataclasses.fields(self)}
        changes = dict()
        for key, value in values.items():
            if key not in known:
                log.debug('Ignoring unknown pager option %r', key)
                continue
            changes[key] = value
        if 'classes' in changes:
            classes = dict(self.classes)
            classes.update(changes['classes'] or {})
            changes['classes'] = classes
        return dataclasses.replace(self, **changes)

    @property
    def labels(self) -> Dict[str, str]:
        return {
            constants.ITEM_PREVIOUS: self.label_previous,
            constants.ITEM_NEXT: self.label_next,
            constants.ITEM_FIRST: self.label_first,
            constants.ITEM_LAST: self.label_last,
            constants.ITEM_SEPARATOR: self.label_separator,
        }

    def css_class(self, item_type: str) -> str:
        return self.classes.get(item_type, '')
