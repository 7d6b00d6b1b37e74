"""
Search results view.

    GET /s?q=<query>&p=<page>&f=<key:value>...&format=<html|json>
"""

from fastapi import APIRouter, Depends, Request

from mirrorfind.context import AppContext, get_context
from mirrorfind.pipeline import SearchPipeline

router = APIRouter()


@router.get("/s", include_in_schema=False)
def search_page(request: Request, context: AppContext = Depends(get_context)):
    """Render search results as HTML, or as raw JSON hits with ``format=json``."""
    return SearchPipeline(context).handle(request)
