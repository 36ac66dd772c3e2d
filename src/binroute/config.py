"""Application configuration and settings management."""

from typing import Any, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

COORDINATES_PLACEHOLDER = "{coordinates}"


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="BINROUTE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Bin Route Planner API"
    api_prefix: str = "/api"
    directions_url_template: str = Field(
        default=(
            "https://router.project-osrm.org/route/v1/driving/{coordinates}"
            "?overview=full&geometries=polyline&steps=false"
        ),
        description="Directions endpoint with a single {coordinates} placeholder (lon,lat;lon,lat;...).",
    )
    directions_timeout_seconds: float = Field(
        default=10.0,
        gt=0.0,
        description="Upper bound on a single directions request, connect and read included.",
    )
    reachable_threshold_km: float = Field(
        default=0.010,
        ge=0.0,
        description="A bin closer than this to the vehicle can be serviced.",
    )
    max_tracked_drivers: int = Field(
        default=1000,
        ge=1,
        description="Route selectors kept in memory; the least recently used driver is dropped first.",
    )
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:8081",
            "http://127.0.0.1:8081",
            "http://localhost:19006",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Supabase configuration
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co).",
    )
    supabase_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key for backend operations.",
    )

    @field_validator("directions_url_template")
    @classmethod
    def _require_placeholder(cls, value: str) -> str:
        if value.count(COORDINATES_PLACEHOLDER) != 1:
            raise ValueError(
                f"directions_url_template must contain exactly one {COORDINATES_PLACEHOLDER} placeholder."
            )
        return value

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
