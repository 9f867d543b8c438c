from __future__ import annotations

import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """
    Persistence settings loaded from environment variables.

    Env vars:
    - TODOS_DB_PATH: path to the sqlite database file. Default './data/todos.db'
    - TODOS_FOREIGN_KEYS: 'true' (default) to enforce foreign keys on connect
    - LOG_LEVEL: level name for the package logger (default: INFO)
    """

    database_path: str
    foreign_keys: bool
    log_level: int


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_bool(value: str, default: bool = False) -> bool:
    v = value.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    # getLevelName returns a "Level X" string for unknown names
    if not isinstance(level, int):
        return logging.INFO
    return level


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return persistence settings loaded from environment variables."""
    return Settings(
        database_path=_get_env("TODOS_DB_PATH", "./data/todos.db").strip(),
        foreign_keys=_parse_bool(_get_env("TODOS_FOREIGN_KEYS", "true"), True),
        log_level=_parse_log_level(_get_env("LOG_LEVEL", "INFO")),
    )
