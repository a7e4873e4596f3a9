from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from social_graph.graph.models import DuplicatePolicy


class SocialGraphSettings(BaseSettings):
    """Unified configuration for social-graph.

    Environment variables are prefixed with SOCIAL_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="SOCIAL_GRAPH_", extra="ignore")

    # --- Core ---
    log_level: str = Field(default="INFO", description="Python logging level")

    # --- Graph store ---
    duplicate_policy: DuplicatePolicy = Field(
        default=DuplicatePolicy.OVERWRITE, description="overwrite|reject"
    )

    # --- Record sources ---
    base_url: str = Field(default="https://jsonplaceholder.typicode.com")
    page_size: int | None = Field(
        default=None, ge=1, description="If set, request ?_page=N&_limit=page_size"
    )
    max_pages: int = Field(default=1000, ge=1, description="Upper bound on pages per listing")
    fetch_attempts: int = Field(default=1, ge=1, description="1 disables retries")

    # --- HTTP ---
    connect_timeout: float = 10.0
    read_timeout: float = 30.0


settings = SocialGraphSettings()
