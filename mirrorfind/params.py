"""
Decoding of search request parameters.

    q       search query, may be empty
    p       zero-based page, 0 when missing or not a number
    f       facet filter, may be repeated
    format  output format, "json" or anything else for HTML
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from mirrorfind.filters import Filter

PAGE_PATTERN = re.compile(r"^[+-]?[0-9]+$")
# Pages that do not fit a signed 64-bit integer count as unparseable
MAX_PAGE = 2**63 - 1


class OutputFormat(str, Enum):
    HTML = "html"
    JSON = "json"


class MultiValueMapping(Protocol):
    def getlist(self, key: str) -> list[str]: ...


@dataclass(frozen=True)
class SearchRequest:
    query: str = ""
    format: OutputFormat = OutputFormat.HTML
    page: int = 0
    filter: Filter = field(default_factory=Filter)


def _first(params: MultiValueMapping, key: str) -> str:
    values = params.getlist(key)
    return values[0] if values else ""


def parse_page(raw: str) -> int:
    """Parse a page number; anything that is not a non-negative integer gives 0."""
    if not PAGE_PATTERN.match(raw) or len(raw.lstrip("+-").lstrip("0")) > len(str(MAX_PAGE)):
        return 0
    page = int(raw)
    if page > MAX_PAGE:
        return 0
    return max(page, 0)


def parse_format(raw: str) -> OutputFormat:
    if raw == OutputFormat.JSON.value:
        return OutputFormat.JSON
    return OutputFormat.HTML


def decode_search_request(params: MultiValueMapping) -> SearchRequest:
    """Decode request parameters into a SearchRequest. Never raises."""
    return SearchRequest(
        query=_first(params, "q"),
        format=parse_format(_first(params, "format")),
        page=parse_page(_first(params, "p")),
        filter=Filter.decode(params.getlist("f")),
    )
