"""Search backend used by the search pipeline.

The pipeline only needs a ``search(query, filter, per_page, page)`` call
that returns ranked hits and a total count. The Meilisearch implementation
maps a Filter to a Meilisearch filter expression and uses exhaustive
pagination so that ``total`` is an exact count.
"""

import logging
from typing import Any, Optional, Protocol

import meilisearch
import requests
from meilisearch.errors import MeilisearchError

from mirrorfind.config import Settings
from mirrorfind.errors import SearchBackendError
from mirrorfind.filters import Filter
from mirrorfind.models import SearchHit, SearchResponse

logger = logging.getLogger(__name__)

# Keys Meilisearch adds to a hit on request; everything else is the stored document
HIT_EXTRAS = frozenset({"_rankingScore", "_rankingScoreDetails", "_formatted", "_matchesPosition"})


class SearchBackend(Protocol):
    def search(self, query: str, filter: Filter, per_page: int, page: int) -> SearchResponse: ...


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_filter_expression(search_filter: Filter) -> Optional[str]:
    """Translate a Filter into a Meilisearch filter expression.

    Values of the same key are ORed, different keys are ANDed::

        (type = "pdf" OR type = "iso") AND server = "ftp1"

    Returns None for an empty filter.
    """
    clauses: list[str] = []
    for key in search_filter.keys():
        terms = [f"{key} = {_quote(value)}" for value in search_filter.values_for(key)]
        if len(terms) == 1:
            clauses.append(terms[0])
        else:
            clauses.append("(" + " OR ".join(terms) + ")")
    if not clauses:
        return None
    return " AND ".join(clauses)


def _split_hit(hit: dict[str, Any]) -> SearchHit:
    """Separate Meilisearch's ranking extras from the document.

    Other underscore fields such as ``_geo`` and ``_vectors`` are document
    data and stay in the payload.
    """
    payload = {k: v for k, v in hit.items() if k not in HIT_EXTRAS}
    metadata = {k: v for k, v in hit.items() if k in HIT_EXTRAS}
    return SearchHit(payload=payload, metadata=metadata)


class MeilisearchBackend:
    """Search backend backed by a single Meilisearch index.

    One instance is shared by all requests. ``meilisearch.Client`` issues
    an independent HTTP request per call and keeps no per-request state.
    """

    def __init__(self, client: meilisearch.Client, index_name: str):
        self.client = client
        self.index_name = index_name

    @classmethod
    def from_settings(cls, settings: Settings) -> "MeilisearchBackend":
        kwargs: dict[str, Any] = {"url": settings.meilisearch_url, "timeout": settings.meilisearch_timeout}
        if settings.meilisearch_api_key:
            kwargs["api_key"] = settings.meilisearch_api_key

        client = meilisearch.Client(**kwargs)
        logger.info(f"Using Meilisearch at {settings.meilisearch_url} (index={settings.meilisearch_index_name!r})")
        return cls(client, settings.meilisearch_index_name)

    def search(self, query: str, filter: Filter, per_page: int, page: int) -> SearchResponse:
        search_params: dict[str, Any] = {
            # Meilisearch pages are 1-based
            "page": page + 1,
            "hitsPerPage": per_page,
        }
        expression = build_filter_expression(filter)
        if expression:
            search_params["filter"] = expression

        try:
            result = self.client.index(self.index_name).search(query, search_params)
        except (MeilisearchError, requests.RequestException) as exc:
            raise SearchBackendError(f"search backend error: {exc}") from exc

        hits = result.get("hits", [])
        total = result.get("totalHits", result.get("estimatedTotalHits", len(hits)))

        return SearchResponse(
            hits=[_split_hit(hit) for hit in hits],
            total=total,
            processing_time_ms=result.get("processingTimeMs"),
        )
