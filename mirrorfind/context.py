"""
Application context shared by all requests.

Built once at startup by ``create_app`` and never mutated afterwards.
"""

from dataclasses import dataclass

from fastapi import Request
from fastapi.templating import Jinja2Templates

from mirrorfind.backend import SearchBackend
from mirrorfind.config import Settings


@dataclass(frozen=True)
class AppContext:
    settings: Settings
    backend: SearchBackend
    templates: Jinja2Templates


def get_context(request: Request) -> AppContext:
    """Dependency returning the context of the application serving ``request``."""
    return request.app.state.context
