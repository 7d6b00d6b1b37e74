#!/usr/bin/env python3
import logging
import os
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from mirrorfind.backend import MeilisearchBackend, SearchBackend
from mirrorfind.config import Settings
from mirrorfind.context import AppContext
from mirrorfind.rendering import register_template_filters
from mirrorfind.utils.logging import configure_logging
from mirrorfind.views import router as frontend_router
from mirrorfind.views.general import not_found_handler

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    backend: Optional[SearchBackend] = None,
    templates: Optional[Jinja2Templates] = None,
) -> FastAPI:
    """Build the application and its shared context.

    Anything not passed in is created from ``settings``; tests pass their
    own backend and templates.
    """
    settings = settings or Settings()

    if templates is None:
        templates = Jinja2Templates(directory=settings.templates_dir)
    register_template_filters(templates.env)

    if backend is None:
        backend = MeilisearchBackend.from_settings(settings)

    app = FastAPI(title="mirrorfind", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.context = AppContext(settings=settings, backend=backend, templates=templates)

    # Mount the static files directory
    if os.path.isdir(settings.static_dir):
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")
    else:
        logger.warning(f"Static directory not found at {settings.static_dir}. Static files will not be served.")

    app.add_exception_handler(404, not_found_handler)
    app.include_router(frontend_router)

    return app


def build_default_app() -> FastAPI:
    """Application factory for ``uvicorn --factory mirrorfind.main:build_default_app``."""
    settings = Settings()
    configure_logging(settings)
    return create_app(settings)
