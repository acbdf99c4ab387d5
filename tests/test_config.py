from __future__ import annotations

import pytest

from casing.styles import RenamingType
from renamer.config import load_settings


def test_defaults() -> None:
    s = load_settings(env={})
    assert s.log_level == "WARNING"
    assert s.log_file is None
    assert s.default_style is RenamingType.SNAKE_CASE
    assert s.session_lock is True


def test_overrides() -> None:
    s = load_settings(
        env={
            "RENAMER_LOG_LEVEL": "debug",
            "RENAMER_LOG_FILE": " logs/renamer.log ",
            "RENAMER_DEFAULT_STYLE": "SCREAMING_SNAKE_CASE",
            "RENAMER_SESSION_LOCK": "0",
        }
    )
    assert s.log_level == "debug"
    assert s.log_file == "logs/renamer.log"
    assert s.default_style is RenamingType.SCREAMING_SNAKE_CASE
    assert s.session_lock is False


def test_blank_values_fall_back_to_defaults() -> None:
    s = load_settings(env={"RENAMER_LOG_LEVEL": "  ", "RENAMER_DEFAULT_STYLE": ""})
    assert s.log_level == "WARNING"
    assert s.default_style is RenamingType.SNAKE_CASE


def test_invalid_default_style() -> None:
    with pytest.raises(ValueError):
        load_settings(env={"RENAMER_DEFAULT_STYLE": "sentence"})
