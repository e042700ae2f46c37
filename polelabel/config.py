"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    polelabel_env: str = "development"
    polelabel_log_level: str = "info"

    # Used when a request omits precision or sends 0
    default_precision: float = 1.0

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
