"""Application configuration objects."""
from __future__ import annotations

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return (os.getenv(name, default) or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    APP_TITLE: str
    # Raw value: None when unset, "" when set but empty
    DATABASE_URL: str | None
    SQL_ECHO: bool
    LOG_LEVEL: str


def get_settings() -> Settings:
    """Snapshot of the current environment."""
    return Settings(
        APP_TITLE=os.getenv("APP_TITLE") or "Dashboard",
        DATABASE_URL=os.getenv("DATABASE_URL"),
        SQL_ECHO=_env_flag("SQL_ECHO"),
        LOG_LEVEL=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
