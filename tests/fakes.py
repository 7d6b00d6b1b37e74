"""
Test doubles shared across the test suite.
"""

from typing import Optional

from mirrorfind.filters import Filter
from mirrorfind.models import SearchHit, SearchResponse


class FakeBackend:
    """In-memory search backend recording every call."""

    def __init__(self, response: Optional[SearchResponse] = None, error: Optional[Exception] = None):
        self.response = response or SearchResponse()
        self.error = error
        self.calls: list[tuple[str, Filter, int, int]] = []

    def search(self, query: str, filter: Filter, per_page: int, page: int) -> SearchResponse:
        self.calls.append((query, filter, per_page, page))
        if self.error is not None:
            raise self.error
        return self.response


def make_response(payloads: list[dict], total: Optional[int] = None) -> SearchResponse:
    return SearchResponse(
        hits=[SearchHit(payload=payload) for payload in payloads],
        total=len(payloads) if total is None else total,
    )
