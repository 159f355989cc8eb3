"""Application configuration and settings management."""

from typing import Any, Literal

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="TRUCKPLAN_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Truckload Delivery Planner API"
    api_prefix: str = "/api"
    log_level: str = Field(default="info", description="Log level passed to uvicorn and the root logger.")

    default_capacity: float = Field(default=6.0, gt=0.0, description="Vehicle capacity in tonnes.")
    default_load_unload_rate: float = Field(
        default=0.1,
        ge=0.0,
        description="Hours spent per tonne when loading, reused for unloading.",
    )
    default_cell_size: float = Field(default=4.0, gt=0.0, description="Length of one grid cell in km.")
    default_speed: float = Field(default=40.0, gt=0.0, description="Average vehicle speed in km/h.")
    default_distance_mode: Literal["manhattan", "euclidean"] = Field(default="manhattan")
    default_workday_length: float = Field(default=24.0, gt=0.0, description="Shift length in hours.")
    default_working_hours: float = Field(
        default=8.0,
        gt=0.0,
        description="Customer working-hour limit applied when a request omits one.",
    )

    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
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

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> str:
        return str(value or "info").strip().lower()


settings = Settings()
