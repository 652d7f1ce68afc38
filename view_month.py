#!/usr/bin/env python3
"""Month grid rendering: title, person filter, colored days and legend."""

from __future__ import annotations

import curses
from datetime import date
from typing import Dict, List, Optional

from palette import SEVERITY_GLYPHS, SEVERITY_LABELS, legend, severity_attr
from projections import (
    DayCell,
    filter_options,
    month_cells,
    month_title,
    month_weeks,
    weekday_headers,
)
from state import AppState
from ui_base import put

_CELL_W = 6
_TODAY_MARK = "*"


def _cell_text(cell: DayCell) -> str:
    mark = _TODAY_MARK if cell.is_today else " "
    return f"{cell.day:2d}{SEVERITY_GLYPHS[cell.severity]}{mark}"


class MonthView:
    def __init__(self, state: AppState, *, first_weekday: int = 0, today: Optional[date] = None):
        self.state = state
        self.first_weekday = first_weekday
        self.cells: Dict[int, DayCell] = {
            cell.day: cell for cell in month_cells(state, today)
        }
        self.weeks = month_weeks(state, first_weekday)

    def render(self, stdscr: "curses.window", y: int, x: int, h: int, w: int) -> int:  # type: ignore[name-defined]
        if h <= 0 or w <= 0:
            return 0
        bottom = y + h
        row = y

        put(stdscr, row, x, f"{month_title(self.state)}   (H/L: month)", w, curses.A_BOLD)
        row += 1
        if row < bottom:
            self._draw_filters(stdscr, row, x, w)
            row += 2

        if row < bottom:
            for idx, name in enumerate(weekday_headers(self.first_weekday)):
                put(stdscr, row, x + idx * _CELL_W, name.rjust(_CELL_W - 2), _CELL_W, curses.A_DIM)
            row += 1

        for week in self.weeks:
            if row >= bottom:
                break
            for idx, day in enumerate(week):
                if day is None:
                    continue
                cell = self.cells[day]
                attr = severity_attr(cell.severity)
                if cell.is_today:
                    attr |= curses.A_BOLD
                if cell.is_selected:
                    attr |= curses.A_REVERSE
                put(stdscr, row, x + idx * _CELL_W, f" {_cell_text(cell)}", _CELL_W - 1, attr)
            row += 1

        row += 1
        if row < bottom:
            self._draw_legend(stdscr, row, x, w)
            row += 1
        return row - y

    def _draw_filters(self, stdscr: "curses.window", y: int, x: int, w: int) -> None:  # type: ignore[name-defined]
        col = x
        for option in filter_options(self.state):
            label = f" {option.label} "
            if col + len(label) > x + w:
                break
            attr = curses.A_REVERSE if option.active else 0
            put(stdscr, y, col, label, len(label), attr)
            col += len(label) + 1

    def _draw_legend(self, stdscr: "curses.window", y: int, x: int, w: int) -> None:  # type: ignore[name-defined]
        col = x
        for level, glyph in SEVERITY_GLYPHS.items():
            label = SEVERITY_LABELS[level]
            if not label:
                continue
            chunk = f" {glyph} "
            put(stdscr, y, col, chunk, len(chunk), severity_attr(level))
            col += len(chunk)
            put(stdscr, y, col, f" {label}  ", len(label) + 3, curses.A_DIM)
            col += len(label) + 3
            if col >= x + w:
                break

    def text_lines(self) -> List[str]:
        lines = [month_title(self.state)]
        chips = [
            f"[{option.label}]" if option.active else option.label
            for option in filter_options(self.state)
        ]
        lines.append("Filter: " + "  ".join(chips))
        lines.append("")
        lines.append(
            "".join(name.center(_CELL_W) for name in weekday_headers(self.first_weekday)).rstrip()
        )
        for week in self.weeks:
            parts = []
            for day in week:
                if day is None:
                    parts.append(" " * _CELL_W)
                    continue
                cell = self.cells[day]
                left, right = ("[", "]") if cell.is_selected else (" ", " ")
                parts.append(f"{left}{_cell_text(cell)}{right}")
            lines.append("".join(parts).rstrip())
        lines.append("")
        glyph_by_label = {SEVERITY_LABELS[level]: glyph for level, glyph in SEVERITY_GLYPHS.items()}
        entries = [f"{glyph_by_label[label]} {label}" for label, _ in legend()]
        entries.append(f"{_TODAY_MARK} Today")
        lines.append("Legend: " + "  ".join(entries))
        return lines


__all__ = ["MonthView"]
