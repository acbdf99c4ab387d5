from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final, Mapping

from casing.styles import RenamingType

from .locks import rename_session_lock_enabled

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_STYLE: Final[str] = RenamingType.SNAKE_CASE.slug


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_file: str | None
    default_style: RenamingType
    session_lock: bool


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Read settings from the environment (or ``env`` when given).

    RENAMER_LOG_LEVEL      logging level name (default WARNING)
    RENAMER_LOG_FILE       also log to this file (default: stderr only)
    RENAMER_DEFAULT_STYLE  renaming type used when --style is omitted
    RENAMER_SESSION_LOCK   lock tree files during --in-place rewrites
    """
    if env is None:
        env = os.environ

    log_file = env.get("RENAMER_LOG_FILE", "").strip() or None
    style_raw = env.get("RENAMER_DEFAULT_STYLE", "").strip() or DEFAULT_STYLE

    return Settings(
        log_level=env.get("RENAMER_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL,
        log_file=log_file,
        default_style=RenamingType.parse(style_raw),
        session_lock=rename_session_lock_enabled(env=env),
    )
