"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    bouba_env: str = "development"
    bouba_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Generation defaults
    default_min_radius: float = 50.0
    default_max_radius: float = 100.0
    default_max_tries: int = 100
    seeded_min_circles: int = 10
    seeded_max_circles: int = 50

    # Request limits; generation runs on the event loop
    max_circle_count: int = 100
    max_n_points: int = 500
    max_retry_budget: int = 1000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
