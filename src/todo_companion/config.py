# src/todo_companion/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No secrets required at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Session ----
    owner_id: Optional[str]

    # ---- Sync policy ----
    reload_after_add: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    seed_path: Optional[Path]

    @staticmethod
    def from_env() -> "Settings":
        app_name = _first_env(_k("APP_NAME"), default="todo") or "todo"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        owner_id = (_first_env(_k("OWNER_ID"), default="") or "").strip() or None

        # Re-fetch the whole list after each create instead of trusting the local insert.
        reload_after_add = _env_bool(_k("RELOAD_AFTER_ADD"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo")) or Path(".local/todo")
        seed_path = _env_path(_k("SEED_PATH"), None)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            owner_id=owner_id,
            reload_after_add=reload_after_add,
            data_dir=data_dir,
            seed_path=seed_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
