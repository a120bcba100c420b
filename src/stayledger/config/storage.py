"""Database configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import require_env_var

DATABASE_URI_VAR: Final[str] = "DATABASE_URI"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str
    echo: bool = False


def get_database_config() -> DatabaseConfig:
    return DatabaseConfig(uri=require_env_var(DATABASE_URI_VAR).strip())
