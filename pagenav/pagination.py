# -*- coding: utf-8 -*-
# Calibre-Web Automated – fork of Calibre-Web
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

import dataclasses
from math import ceil, floor

from . import constants, logger


log = logger.create()


class InvalidConfiguration(ValueError):
    pass


@dataclasses.dataclass(frozen=True)
class PagerItem:
    type: str
    label: str
    page_num: int


def _check_positive(name, value):
    if value is None or int(value) < 1:
        raise InvalidConfiguration("{} must be a positive integer, got {!r}".format(name, value))


def plan_page_links(total_items, items_per_page, current_page, max_links,
                    show_first_last=False):
    """Compute the ordered list of pager items for one page of results.

    The numbered window holds up to ``max_links`` pages centered on the
    current page. Page 1 and the last page are always shown, with a
    separator item wherever the window does not touch them.

    :raises InvalidConfiguration: on a non-positive page size, current page
        or ``max_links`` and on a negative item total
    """
    _check_positive('items_per_page', items_per_page)
    _check_positive('current_page', current_page)
    _check_positive('max_links', max_links)
    if total_items is None or int(total_items) < 0:
        raise InvalidConfiguration("total_items must not be negative, got {!r}".format(total_items))

    total_items = int(total_items)
    items_per_page = int(items_per_page)
    max_links = int(max_links)

    if total_items == 0:
        return []

    pages = int(ceil(total_items / float(items_per_page)))
    current = min(int(current_page), pages)
    if current != int(current_page):
        log.debug('Current page %s clamped to last page %s', current_page, pages)

    if pages == 1:
        return [PagerItem(constants.ITEM_CURRENT, '1', 1)]

    def numbered(page_num):
        item_type = constants.ITEM_CURRENT if page_num == current else constants.ITEM_NUMBER
        return PagerItem(item_type, str(page_num), page_num)

    size = min(max_links, pages)
    start = current - size // 2
    start = max(1, min(start, pages - size + 1))
    end = start + size - 1

    plan = list()
    if show_first_last and current > 1:
        plan.append(PagerItem(constants.ITEM_FIRST, constants.DEFAULT_LABEL_FIRST, 1))
    if current > 1:
        plan.append(PagerItem(constants.ITEM_PREVIOUS, constants.DEFAULT_LABEL_PREVIOUS, max(1, current - 1)))

    # Leading boundary page, separated when the window does not reach page 2
    if start > 1:
        plan.append(numbered(1))
        if start > 2:
            plan.append(PagerItem(constants.ITEM_SEPARATOR, constants.DEFAULT_LABEL_SEPARATOR, 2))

    plan.extend(numbered(page_num) for page_num in range(start, end + 1))

    if end < pages:
        if end < pages - 1:
            plan.append(PagerItem(constants.ITEM_SEPARATOR, constants.DEFAULT_LABEL_SEPARATOR, end + 1))
        plan.append(numbered(pages))

    if current < pages:
        plan.append(PagerItem(constants.ITEM_NEXT, constants.DEFAULT_LABEL_NEXT, min(pages, current + 1)))
    if show_first_last and current < pages:
        plan.append(PagerItem(constants.ITEM_LAST, constants.DEFAULT_LABEL_LAST, pages))

    log.debug('Planned pager for page %s of %s: window %s-%s, %s items', current, pages, start, end, len(plan))
    return plan


# pagination state for one page of a result set
class Pagination(object):
    def __init__(self, page, per_page, total_count):
        _check_positive('per_page', per_page)
        _check_positive('page', page)
        self.page = int(page)
        self.per_page = int(per_page)
        self.total_count = int(total_count)

    @classmethod
    def from_offset(cls, start, limit, total_count):
        """Derive the current page from a zero-based start offset."""
        _check_positive('limit', limit)
        start = max(0, int(start or 0))
        limit = int(limit)
        if start < limit:
            page = int(floor(start / float(limit))) + 1
        else:
            page = int(ceil(start / float(limit))) + 1
        return cls(page, limit, total_count)

    @classmethod
    def from_source(cls, source):
        """Build from any data source exposing ``start``, ``limit`` and ``total``."""
        return cls.from_offset(getattr(source, 'start', 0), getattr(source, 'limit', None),
                               getattr(source, 'total', 0))

    @property
    def offset(self):
        return int((self.page - 1) * self.per_page)

    @property
    def pages(self):
        return int(ceil(self.total_count / float(self.per_page)))

    @property
    def has_prev(self):
        return self.page > 1

    @property
    def has_next(self):
        return self.page < self.pages

    def plan(self, max_links=constants.DEFAULT_NUM_PAGE_LINKS, show_first_last=False):
        return plan_page_links(self.total_count, self.per_page, self.page, max_links,
                               show_first_last=show_first_last)
