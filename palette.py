#!/usr/bin/env python3
"""Severity colors, labels and curses color pairs."""

from __future__ import annotations

import curses
from typing import Dict, List, Tuple

from models import SeverityLevel

NEUTRAL_COLOR = "#ededed"

SEVERITY_COLORS: Dict[SeverityLevel, str] = {
    "healthy": "#a6d17d",
    "reminder": "#91bef8",
    "warning": "#fdcb46",
    "critical": "#fa6255",
    "none": NEUTRAL_COLOR,
}

SEVERITY_LABELS: Dict[SeverityLevel, str] = {
    "healthy": "Healthy",
    "reminder": "Reminder",
    "warning": "Warning",
    "critical": "Critical",
    "none": "",
}

# Single-character markers for plain-text output.
SEVERITY_GLYPHS: Dict[SeverityLevel, str] = {
    "healthy": "+",
    "reminder": "~",
    "warning": "!",
    "critical": "#",
    "none": " ",
}

_LEGEND_ORDER: Tuple[SeverityLevel, ...] = ("healthy", "reminder", "warning", "critical")

_CURSES_COLORS: Dict[SeverityLevel, int] = {
    "healthy": curses.COLOR_GREEN,
    "reminder": curses.COLOR_BLUE,
    "warning": curses.COLOR_YELLOW,
    "critical": curses.COLOR_RED,
}
_PAIR_BASE = 10
_PAIRS: Dict[SeverityLevel, int] = {}


def color_for(level: SeverityLevel) -> str:
    return SEVERITY_COLORS[level]


def legend() -> List[Tuple[str, str]]:
    return [(SEVERITY_LABELS[level], SEVERITY_COLORS[level]) for level in _LEGEND_ORDER]


def init_severity_pairs() -> None:
    """Register one curses pair per severity; no-op on monochrome terminals."""
    _PAIRS.clear()
    if not curses.has_colors():
        return
    for offset, level in enumerate(_LEGEND_ORDER):
        pair_id = _PAIR_BASE + offset
        try:
            curses.init_pair(pair_id, curses.COLOR_BLACK, _CURSES_COLORS[level])
        except curses.error:
            _PAIRS.clear()
            return
        _PAIRS[level] = pair_id


def severity_attr(level: SeverityLevel) -> int:
    pair_id = _PAIRS.get(level)
    if pair_id is None:
        return 0
    return curses.color_pair(pair_id)


__all__ = [
    "NEUTRAL_COLOR",
    "SEVERITY_COLORS",
    "SEVERITY_LABELS",
    "SEVERITY_GLYPHS",
    "color_for",
    "legend",
    "init_severity_pairs",
    "severity_attr",
]
