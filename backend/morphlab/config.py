"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    anthropic_api_key: str = ""
    morphlab_env: str = "development"
    morphlab_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:8080"]

    # Transformation model
    model_transform: str = "claude-sonnet-4-5-20250929"
    transform_temperature: float = 0.2
    transform_max_tokens: int = 16384
    transform_timeout_s: float = 120.0

    # SVGs above this size are flagged as likely to time out when regenerated
    complexity_warning_bytes: int = 15000

    # Storage / static assets
    history_dir: str = "data"
    static_dir: str = "../frontend/dist"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
