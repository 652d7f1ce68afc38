#!/usr/bin/env python3
"""Configuration loading and logging setup for famcal."""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from paths import APP_NAME, default_data_dir, ensure_dir, xdg_config_home

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"
LOG_FILENAME = "famcal.log"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Config:
    editor: str
    data_dir: Path
    log_level: str = DEFAULT_LOG_LEVEL
    first_weekday: int = 0

    @property
    def log_path(self) -> Path:
        return self.data_dir / LOG_FILENAME


def config_path() -> Path:
    return (xdg_config_home() / APP_NAME / CONFIG_FILENAME).expanduser()


def _read_raw(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        raw_text = path.read_text()
    except OSError as exc:
        logger.warning("Could not read %s: %s", path, exc)
        return {}
    try:
        raw = json.loads(raw_text)
    except json.JSONDecodeError:
        try:
            raw = json.loads(_strip_trailing_commas(raw_text))
        except json.JSONDecodeError as exc:
            logger.warning("Ignoring invalid config %s: %s", path, exc)
            return {}
    if not isinstance(raw, dict):
        logger.warning("Ignoring config %s: top level must be an object", path)
        return {}
    return raw


def _coerce_weekday(value: Any) -> int:
    try:
        weekday = int(value)
    except (TypeError, ValueError):
        logger.warning("Invalid first_weekday %r, using Monday", value)
        return 0
    if not 0 <= weekday <= 6:
        logger.warning("first_weekday %d out of range, using Monday", weekday)
        return 0
    return weekday


def _coerce_level(value: Any) -> str:
    level = str(value or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Unknown log_level %r, using %s", value, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


def load_config() -> Config:
    """Load config from the XDG path, falling back to defaults.

    A missing file, unreadable JSON or bad values all fall back to defaults
    key by key; JSON with trailing commas is accepted.
    """

    raw = _read_raw(config_path())

    editor = raw.get("editor") or os.environ.get("EDITOR") or "vi"
    data_dir = Path(raw.get("data_dir") or default_data_dir()).expanduser()

    return Config(
        editor=str(editor),
        data_dir=data_dir,
        log_level=_coerce_level(raw.get("log_level")),
        first_weekday=_coerce_weekday(raw.get("first_weekday", 0)),
    )


def configure_logging(config: Config) -> None:
    """Send log records to a file; the terminal belongs to curses."""
    ensure_dir(config.data_dir)
    logging.basicConfig(
        filename=str(config.log_path),
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _strip_trailing_commas(text: str) -> str:
    """Remove trailing commas before closing braces/brackets."""
    return re.sub(r",(\s*[}\]])", r"\1", text)


__all__ = ["Config", "load_config", "configure_logging", "config_path", "CONFIG_FILENAME"]
