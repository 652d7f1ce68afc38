"""Help and cheatsheet content for the famcal TUI."""

from __future__ import annotations

HELP_LINES: tuple[str, ...] = (
    "famcal help",
    "",
    "Colors: worst status of the day for the people in view",
    "  Critical > Warning > Reminder > Healthy",
    "",
    "q            quit",
    "?            toggle this help",
    "t            jump to today",
    "h/l          previous/next day",
    "j/k          next/previous week",
    "H/L          previous/next month",
    "Tab          cycle person filter",
    "0            show everyone",
    "i            add agenda for the selected day",
    "",
    "The add form opens $EDITOR on a JSON draft:",
    '  {"title", "time", "status", "owner"}',
    "Title and owner are required.",
    "",
    "Esc to dismiss",
)

__all__ = ["HELP_LINES"]
