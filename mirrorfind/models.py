from typing import Any, List, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, computed_field

from mirrorfind.utils.sizes import human_bytes

LINK_SCHEMES = frozenset({"http", "https", "ftp"})


class SearchHit(BaseModel):
    payload: dict[str, Any]  # raw document as stored in the index
    metadata: dict[str, Any] = {}


class SearchResponse(BaseModel):
    hits: List[SearchHit] = []
    total: int = 0
    processing_time_ms: Optional[int] = None


class Server(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str = ""
    path: str = ""

    @property
    def href(self) -> Optional[str]:
        """Link target for the mirror, or None unless it is an http(s) or ftp URL."""
        link = self.url + self.path
        if urlsplit(link.strip()).scheme.lower() not in LINK_SCHEMES:
            return None
        return link


class Result(BaseModel):
    """Presentation view of a hit payload."""

    model_config = ConfigDict(extra="ignore")

    servers: List[Server] = []
    filename: str = ""
    size: int = Field(default=0, ge=0, strict=True)

    @computed_field
    @property
    def human_size(self) -> str:
        return human_bytes(self.size)
