"""
Pagination helpers for the results page.

Pages are zero-based. Page links are built by rewriting the ``p`` query
parameter of the current request URL, so every other parameter (query,
filters, format) survives navigation.
"""

from dataclasses import dataclass
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

PAGE_PARAM = "p"


def link_for(page: int, current_url: str) -> str:
    """Return ``current_url`` with its ``p`` parameter set to ``page`` (minimum 0)."""
    page = max(page, 0)

    parts = urlsplit(current_url)
    params = []
    replaced = False
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        if key == PAGE_PARAM:
            if replaced:
                continue
            value = str(page)
            replaced = True
        params.append((key, value))
    if not replaced:
        params.append((PAGE_PARAM, str(page)))

    return urlunsplit(parts._replace(query=urlencode(params)))


def max_pages(total: int, per_page: int, rounding: str = "ceil") -> int:
    """Number of result pages for ``total`` hits.

    ``floor`` leaves a trailing partial page uncounted.
    """
    if rounding == "floor":
        return total // per_page
    return -(-total // per_page)


@dataclass(frozen=True)
class PageWindow:
    page: int
    per_page: int
    total: int
    frompage: int
    maxpages: int
    prevpage: str
    nextpage: str

    @property
    def has_prev(self) -> bool:
        return self.page > 0

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.maxpages


def build_page_window(page: int, per_page: int, total: int, current_url: str, rounding: str = "ceil") -> PageWindow:
    return PageWindow(
        page=page,
        per_page=per_page,
        total=total,
        frompage=per_page * page,
        maxpages=max_pages(total, per_page, rounding),
        prevpage=link_for(page - 1, current_url),
        nextpage=link_for(page + 1, current_url),
    )
