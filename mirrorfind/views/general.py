"""
General routes: the site root and the custom 404 page.
"""
from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mirrorfind.context import AppContext

router = APIRouter()


@router.get("/", include_in_schema=False)
def serve_index():
    """The search page is the home page."""
    return RedirectResponse(url="/s", status_code=status.HTTP_301_MOVED_PERMANENTLY)


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    context: AppContext = request.app.state.context
    return context.templates.TemplateResponse(
        request,
        "404.html",
        {"path": request.url.path},
        status_code=status.HTTP_404_NOT_FOUND,
    )
