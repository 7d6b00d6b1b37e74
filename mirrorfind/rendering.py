"""
Response rendering for search results.

Two strategies: JSON passthrough of the raw hit payloads, and HTML
rendered from a Jinja2 template and streamed to the client.
"""

import logging
from typing import Any, Iterator

from fastapi.responses import JSONResponse, Response, StreamingResponse
from fastapi.templating import Jinja2Templates
from jinja2 import Environment
from pydantic import ValidationError

from mirrorfind.errors import RenderError, ResultDecodeError, SerializationError
from mirrorfind.models import Result, SearchResponse
from mirrorfind.utils.sizes import human_bytes

logger = logging.getLogger(__name__)


def register_template_filters(env: Environment) -> None:
    env.filters["humansize"] = human_bytes


def render_json(response: SearchResponse) -> Response:
    """Return the raw hit payloads as a JSON array."""
    payloads = [hit.payload for hit in response.hits]
    try:
        return JSONResponse(payloads)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"could not encode hits as JSON: {exc}") from exc


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or '<payload>'}: {error['msg']}" for error in exc.errors()
    )


def decode_results(response: SearchResponse) -> list[Result]:
    """Decode every hit payload into a Result.

    The first payload that does not decode aborts with ResultDecodeError;
    no partial result list is returned.
    """
    results = []
    for position, hit in enumerate(response.hits):
        try:
            results.append(Result.model_validate(hit.payload))
        except ValidationError as exc:
            raise ResultDecodeError(f"could not decode hit {position}: {_describe(exc)}") from exc
    return results


def _remaining_chunks(first: str, chunks: Iterator[str], name: str) -> Iterator[str]:
    yield first
    try:
        yield from chunks
    except Exception as exc:
        # Headers and part of the body are already sent; the page stays truncated.
        logger.error(f"rendering {name} failed after output started: {exc}")


def stream_template(templates: Jinja2Templates, name: str, context: dict[str, Any]) -> StreamingResponse:
    """Render ``name`` with ``context`` and stream the output.

    The first chunk is produced before the response is returned, so a
    template that fails right away raises RenderError here instead of
    sending a half-written page.
    """
    try:
        chunks = templates.get_template(name).generate(context)
        first = next(chunks, "")
    except Exception as exc:
        raise RenderError(f"rendering {name} failed: {exc}") from exc

    return StreamingResponse(_remaining_chunks(first, chunks, name), media_type="text/html")
