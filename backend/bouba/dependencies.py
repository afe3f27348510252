"""FastAPI dependency injection."""

from __future__ import annotations

from bouba.config import Settings, settings


def get_settings() -> Settings:
    return settings
