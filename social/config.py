"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphSettings(BaseModel):
    """Graph store (Neo4j) configuration."""

    uri: str = "bolt://localhost:7687"
    user: str = "neo4j"
    password: str = "CHANGE_ME_IN_PRODUCTION"
    database: str = "neo4j"

    # Connection pool owned by the driver, shared across requests
    max_connection_pool_size: int = 50

    # Upper bound in seconds for a single query, server and client side
    query_timeout: float = Field(default=10.0, gt=0)


class MediaSettings(BaseModel):
    """Media store configuration.

    Image paths persisted on graph nodes are relative to ``root``.
    """

    root: Path = Path(".")

    # Upper bound in seconds for a single filesystem operation
    io_timeout: float = Field(default=10.0, gt=0)

    max_post_images: int = Field(default=20, ge=0)
    max_profile_images: int = Field(default=1, ge=0)
    max_image_bytes: int = Field(default=50 << 20, gt=0)  # 50 MiB


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested sections use ``__``:

        GRAPH__URI=bolt://neo4j:7687
        GRAPH__USER=neo4j
        GRAPH__PASSWORD=secret
        MEDIA__ROOT=/var/lib/social
        ENVIRONMENT=production
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows GRAPH__URI syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = [
        "http://localhost:3000",  # Local development
        "http://localhost:5173",  # Vite default
    ]

    # Nested settings
    graph: GraphSettings = GraphSettings()
    media: MediaSettings = MediaSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
