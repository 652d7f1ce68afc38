#!/usr/bin/env python3
"""Key constants and mappings."""
from __future__ import annotations

# Key constants
KEY_Q = ord("q")
KEY_CAP_Q = ord("Q")
KEY_HELP = ord("?")
KEY_TODAY = ord("t")
KEY_ESC = 27
KEY_I = ord("i")
KEY_TAB = 9
KEY_ZERO = ord("0")

KEY_H = ord("h")
KEY_J = ord("j")
KEY_K = ord("k")
KEY_L = ord("l")

KEY_CAP_H = ord("H")
KEY_CAP_L = ord("L")

# Day movement in the grid, in days.
DAY_MOVES = {
    KEY_H: -1,
    KEY_L: +1,
    KEY_J: +7,
    KEY_K: -7,
}

MONTH_MOVES = {
    KEY_CAP_H: -1,
    KEY_CAP_L: +1,
}


__all__ = [
    "KEY_Q",
    "KEY_CAP_Q",
    "KEY_HELP",
    "KEY_TODAY",
    "KEY_ESC",
    "KEY_I",
    "KEY_TAB",
    "KEY_ZERO",
    "KEY_H",
    "KEY_J",
    "KEY_K",
    "KEY_L",
    "KEY_CAP_H",
    "KEY_CAP_L",
    "DAY_MOVES",
    "MONTH_MOVES",
]
