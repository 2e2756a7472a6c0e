"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    sankeysight_env: str = "development"
    sankeysight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Rendering
    sankeysight_arc_samples: int = 50
    sankeysight_png_dpi: int = 150

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
