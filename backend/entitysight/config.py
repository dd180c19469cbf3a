"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    entitysight_env: str = "development"
    entitysight_log_level: str = "info"

    # CORS — the plugin UI iframe posts from a null origin
    cors_origins: list[str] = ["null", "http://localhost:3000"]

    # Report output
    entitysight_scale_factor: float = 3.5
    entitysight_fallback_fill: str = "#2D2D2D"
    entitysight_use_group_rotation: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
