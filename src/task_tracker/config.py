"""Settings loaded from TASKTRACKER_* environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKTRACKER"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class Settings:
    app_title: str = "Task Tracker"
    log_level: str = "INFO"
    log_dir: Path = Path("./logs")
    host: str = "127.0.0.1"
    port: int = 8000


def load_settings() -> Settings:
    return Settings(
        app_title=_env(_k("APP_TITLE"), "Task Tracker"),
        log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
        log_dir=Path(_env(_k("LOG_DIR"), "./logs")).expanduser(),
        host=_env(_k("HOST"), "127.0.0.1"),
        port=_env_int(_k("PORT"), 8000),
    )
