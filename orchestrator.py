#!/usr/bin/env python3
"""Orchestrator for famcal."""
from __future__ import annotations

import curses
import logging
from dataclasses import replace
from typing import Optional

from actions import (
    cycle_filter,
    go_to_today,
    move_selection,
    set_filter,
    shift_month,
    submit_draft,
    update_draft,
)
from config import Config, load_config
from editor import EditorError, edit_draft_via_editor
from help_content import HELP_LINES
from keys import (
    DAY_MOVES,
    KEY_CAP_Q,
    KEY_ESC,
    KEY_HELP,
    KEY_I,
    KEY_Q,
    KEY_TAB,
    KEY_TODAY,
    KEY_ZERO,
    MONTH_MOVES,
)
from models import ValidationError
from palette import init_severity_pairs
from state import AppState, initial_state
from ui_base import draw_centered_box, draw_footer, draw_header
from view_agenda import AgendaView
from view_month import MonthView

logger = logging.getLogger(__name__)

INCOMPLETE_DRAFT_NOTICE = "draft incomplete: title and owner required"
FOOTER_KEYS = "q: quit  ?: help  hjkl: day  H/L: month  Tab: person  0: all  i: add  t: today"


class Orchestrator:
    """Owns the curses lifecycle and routes keys to state actions."""

    def __init__(self, config: Optional[Config] = None, state: Optional[AppState] = None) -> None:
        self.config = config or load_config()
        self.state = state or initial_state()
        self.notice = ""

    def run(self) -> int:
        try:
            curses.wrapper(self._curses_main)
        except curses.error as exc:
            logger.error("Curses failure: %s", exc)
            return 1
        return 0

    def _curses_main(self, stdscr: "curses.window") -> None:  # type: ignore[name-defined]
        curses.curs_set(0)
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
        init_severity_pairs()
        stdscr.keypad(True)

        self._draw(stdscr)

        while True:
            ch = stdscr.getch()
            if ch in (-1, curses.ERR):
                continue
            if ch in (KEY_Q, KEY_CAP_Q) and self.state.overlay == "none":
                break

            if self.handle_key(ch, stdscr):
                self._draw(stdscr)

    # Rendering
    def _draw(self, stdscr: "curses.window") -> None:  # type: ignore[name-defined]
        stdscr.erase()
        h, w = stdscr.getmaxyx()
        draw_header(stdscr, "famcal - family health calendar")

        month = MonthView(self.state, first_weekday=self.config.first_weekday)
        used = month.render(stdscr, 2, 0, max(0, h - 3), w)
        agenda_top = 2 + used + 1
        AgendaView(self.state).render(stdscr, agenda_top, 0, max(0, h - 1 - agenda_top), w)

        footer = FOOTER_KEYS
        if self.notice:
            footer = f"{self.notice}   |   {FOOTER_KEYS}"
        draw_footer(stdscr, footer)

        if self.state.overlay != "none":
            self._render_overlay(stdscr)

        stdscr.refresh()

    def _render_overlay(self, stdscr: "curses.window") -> None:  # type: ignore[name-defined]
        if self.state.overlay == "help":
            draw_centered_box(stdscr, HELP_LINES)
        elif self.state.overlay in ("error", "message"):
            draw_centered_box(stdscr, [self.state.overlay_message, "", "Press any key to dismiss"])

    def _show_overlay(self, message: str, kind: str = "error") -> None:
        self.state = replace(
            self.state,
            overlay="error" if kind == "error" else "message",
            overlay_message=message,
        )

    # Key handling
    def handle_key(self, ch: int, stdscr: "curses.window | None" = None) -> bool:  # type: ignore[name-defined]
        """Apply one key press to the state; return True when a redraw is needed."""
        if self.state.overlay == "help":
            if ch in (KEY_ESC, KEY_HELP, KEY_Q, KEY_CAP_Q):
                self.state = replace(self.state, overlay="none")
            return True
        if self.state.overlay in ("error", "message"):
            self.state = replace(self.state, overlay="none", overlay_message="")
            return True

        if ch == KEY_HELP:
            self.state = replace(self.state, overlay="help")
            return True
        if ch == KEY_ESC:
            self.notice = ""
            return True
        if ch == KEY_TODAY:
            self.state = go_to_today(self.state)
            return True
        if ch in DAY_MOVES:
            self.state = move_selection(self.state, DAY_MOVES[ch])
            return True
        if ch in MONTH_MOVES:
            self.state = shift_month(self.state, MONTH_MOVES[ch])
            return True
        if ch == KEY_TAB:
            self.state = cycle_filter(self.state, +1)
            return True
        if ch == KEY_ZERO:
            self.state = set_filter(self.state, None)
            return True
        if ch == KEY_I:
            return self._add_agenda(stdscr)
        return False

    # Adding
    def _add_agenda(self, stdscr: "curses.window | None") -> bool:  # type: ignore[name-defined]
        state = self.state
        if state.draft.owner_id is None and state.filter_person_id is not None:
            state = update_draft(state, owner_id=state.filter_person_id)

        # Exit curses before launching editor
        if stdscr is not None:
            curses.endwin()
        try:
            draft = edit_draft_via_editor(self.config.editor, state)
        except (EditorError, ValidationError) as exc:
            self.state = state
            self._show_overlay(str(exc), kind="error")
            return True
        finally:
            if stdscr is not None:
                stdscr.clear()
                curses.curs_set(0)

        result = submit_draft(replace(state, draft=draft))
        self.state = result.state
        self.notice = result.message if result.success else INCOMPLETE_DRAFT_NOTICE
        return True


__all__ = ["Orchestrator", "INCOMPLETE_DRAFT_NOTICE"]
