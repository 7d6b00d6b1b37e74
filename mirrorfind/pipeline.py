"""Search request pipeline.

decode parameters -> query the backend -> render JSON or HTML

Every failure after decoding is fatal to the request: it is logged once
and answered with a 500 whose body is the error message. Nothing is
retried and no partial page is produced, except when a template fails
after streaming has begun (see ``rendering.stream_template``).
"""

import logging
import time
from typing import Any

from fastapi import Request
from fastapi.responses import PlainTextResponse, Response

from mirrorfind.context import AppContext
from mirrorfind.models import SearchResponse
from mirrorfind.pagination import build_page_window
from mirrorfind.params import OutputFormat, SearchRequest, decode_search_request
from mirrorfind.rendering import decode_results, render_json, stream_template

logger = logging.getLogger(__name__)

RESULTS_TEMPLATE = "results.html"


def _relative_url(request: Request) -> str:
    url = request.url
    return f"{url.path}?{url.query}" if url.query else url.path


class SearchPipeline:
    def __init__(self, context: AppContext):
        self.context = context

    @property
    def per_page(self) -> int:
        return self.context.settings.per_page

    def handle(self, request: Request) -> Response:
        """Serve one search request, converting any failure into a 500."""
        start = time.monotonic()
        try:
            params = decode_search_request(request.query_params)
            response = self.context.backend.search(params.query, params.filter, self.per_page, params.page)

            if params.format is OutputFormat.JSON:
                result = render_json(response)
            else:
                result = self._render_html(request, params, response, start)

            logger.info(
                f"Search q={params.query!r} filters={params.filter.encode()} page={params.page} "
                f"format={params.format.value} hits={len(response.hits)}/{response.total}"
            )
            return result
        except Exception as exc:
            logger.error(str(exc))
            return PlainTextResponse(str(exc), status_code=500)

    def build_context(
        self, request: Request, params: SearchRequest, response: SearchResponse, start: float
    ) -> dict[str, Any]:
        """Assemble the template context for the HTML results page."""
        results = decode_results(response)
        window = build_page_window(
            params.page,
            self.per_page,
            response.total,
            _relative_url(request),
            self.context.settings.page_count_rounding,
        )

        return {
            "request": request,
            "query": params.query,
            "filters": params.filter,
            "page": window.page,
            "per_page": window.per_page,
            "total": window.total,
            "frompage": window.frompage,
            "maxpages": window.maxpages,
            "prevpage": window.prevpage,
            "nextpage": window.nextpage,
            "window": window,
            "elapsed": int((time.monotonic() - start) * 1000),
            "response": response,
            "results": results,
        }

    def _render_html(self, request: Request, params: SearchRequest, response: SearchResponse, start: float) -> Response:
        context = self.build_context(request, params, response, start)
        return stream_template(self.context.templates, RESULTS_TEMPLATE, context)
