#!/usr/bin/env python3

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

FRONTEND_DIR = Path(__file__).parents[1] / "frontend"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MIRRORFIND_", env_file=".env", extra="ignore", frozen=True)

    # HTTP listener
    http_host: str = "127.0.0.1"
    http_port: int = 8080

    # Meilisearch backend
    meilisearch_url: str = "http://localhost:7700"
    meilisearch_api_key: Optional[str] = None
    meilisearch_index_name: str = "files"
    meilisearch_timeout: int = 10  # seconds

    # Results per page, fixed per deployment
    per_page: int = Field(default=10, ge=1)
    # How a trailing partial page is counted in maxpages
    page_count_rounding: Literal["ceil", "floor"] = "ceil"

    templates_dir: str = str(FRONTEND_DIR / "templates")
    static_dir: str = str(FRONTEND_DIR / "static")

    log_level: str = "INFO"
    log_file: Optional[str] = None  # Defaults to stderr
