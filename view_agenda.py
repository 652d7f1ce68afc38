#!/usr/bin/env python3
"""Agenda list rendering for the selected day."""

from __future__ import annotations

import curses
from typing import List, Sequence

from palette import SEVERITY_LABELS, severity_attr
from projections import NO_AGENDA_MESSAGE, AgendaRow, agenda_rows, selected_date_label
from state import AppState
from ui_base import put

_MIN_OWNER_WIDTH = 5
_MAX_OWNER_WIDTH = 16
_MIN_TITLE_WIDTH = 6
_MAX_TITLE_WIDTH = 48
_MIN_TIME_WIDTH = 4
_MAX_TIME_WIDTH = 10
_MIN_STATUS_WIDTH = 6
_MAX_STATUS_WIDTH = 8
_GAP_WIDTH = 2


def _row_values(row: AgendaRow) -> Sequence[str]:
    return (row.owner, row.title, row.time, SEVERITY_LABELS[row.status])


class AgendaView:
    COLUMN_COUNT = 4
    _HEADERS: Sequence[str] = ("Owner", "Title", "Time", "Status")
    _MIN_WIDTHS: Sequence[int] = (
        _MIN_OWNER_WIDTH,
        _MIN_TITLE_WIDTH,
        _MIN_TIME_WIDTH,
        _MIN_STATUS_WIDTH,
    )
    _MAX_WIDTHS: Sequence[int] = (
        _MAX_OWNER_WIDTH,
        _MAX_TITLE_WIDTH,
        _MAX_TIME_WIDTH,
        _MAX_STATUS_WIDTH,
    )

    def __init__(self, state: AppState):
        self.state = state
        self.rows = agenda_rows(state)

    def title(self) -> str:
        return f"Agenda - {selected_date_label(self.state)}"

    def column_widths(self, usable_w: int) -> List[int]:
        widths: List[int] = []
        for idx in range(self.COLUMN_COUNT):
            data_len = max((len(_row_values(row)[idx]) for row in self.rows), default=0)
            header_len = len(self._HEADERS[idx])
            widths.append(
                max(self._MIN_WIDTHS[idx], min(self._MAX_WIDTHS[idx], max(header_len, data_len)))
            )

        total_width = sum(widths) + (self.COLUMN_COUNT - 1) * _GAP_WIDTH
        # Shrink the widest column first, never below its minimum.
        while total_width > usable_w and any(
            cur > mn for cur, mn in zip(widths, self._MIN_WIDTHS)
        ):
            largest_idx = max(range(self.COLUMN_COUNT), key=lambda idx: widths[idx] - self._MIN_WIDTHS[idx])
            widths[largest_idx] -= 1
            total_width -= 1
        return widths

    def render(self, stdscr: "curses.window", y: int, x: int, h: int, w: int) -> None:  # type: ignore[name-defined]
        if h <= 0 or w <= 0:
            return
        bottom = y + h
        put(stdscr, y, x, self.title(), w, curses.A_BOLD)
        row_y = y + 1
        if row_y >= bottom:
            return

        if not self.rows:
            put(stdscr, row_y, x, NO_AGENDA_MESSAGE, w, curses.A_DIM)
            return

        widths = self.column_widths(w)
        starts: List[int] = []
        current_x = x
        for width in widths:
            starts.append(current_x)
            current_x += width + _GAP_WIDTH

        for idx, header in enumerate(self._HEADERS):
            put(stdscr, row_y, starts[idx], header, widths[idx], curses.A_UNDERLINE)
        row_y += 1

        for row in self.rows:
            if row_y >= bottom:
                break
            values = _row_values(row)
            for idx, value in enumerate(values):
                attr = severity_attr(row.status) if idx == 3 else 0
                put(stdscr, row_y, starts[idx], value[: widths[idx]], widths[idx], attr)
            row_y += 1

    def text_lines(self) -> List[str]:
        lines = [self.title()]
        if not self.rows:
            lines.append(NO_AGENDA_MESSAGE)
            return lines
        widths = [
            max(len(self._HEADERS[idx]), max(len(_row_values(row)[idx]) for row in self.rows))
            for idx in range(self.COLUMN_COUNT)
        ]
        gap = " " * _GAP_WIDTH

        def _line(values: Sequence[str]) -> str:
            return gap.join(value.ljust(widths[idx]) for idx, value in enumerate(values)).rstrip()

        lines.append(_line(self._HEADERS))
        for row in self.rows:
            lines.append(_line(_row_values(row)))
        return lines


__all__ = ["AgendaView"]
