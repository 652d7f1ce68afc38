#!/usr/bin/env python3
"""Thin entrypoint for famcal."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from datetime import date
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import List, Optional, Sequence

from actions import select_day, set_filter, shift_month
from config import Config, configure_logging, load_config
from models import ValidationError
from orchestrator import Orchestrator
from state import AppState, initial_state, resolve_person
from store import ExportError, export_agenda
from view_agenda import AgendaView
from view_month import MonthView

logger = logging.getLogger(__name__)

try:
    __version__ = version("famcal")
except PackageNotFoundError:  # pragma: no cover - source checkout
    __version__ = "0.0.0"


@dataclass
class CliFlags:
    month_offset: Optional[int] = None
    day: Optional[int] = None
    person: Optional[str] = None
    export_path: Optional[Path] = None
    show_version: bool = False
    show_help: bool = False

    @property
    def print_mode(self) -> bool:
        return any(v is not None for v in (self.month_offset, self.day, self.person))


def _print_help() -> None:
    print(
        "famcal - family health calendar\n\n"
        "Usage:\n"
        "  famcal                 Launch curses UI\n"
        "  famcal -h              Show this help\n"
        "  famcal -v              Show installed version\n"
        "  famcal [-m <offset>] [-d <day>] [-p <person>]\n"
        "                         Print the month grid and agenda\n"
        "  famcal -e <path>       Export the agenda to a Parquet file\n"
    )


def _int_value(flag: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise ValidationError(f"{flag} expects an integer, got '{raw}'") from exc


def parse_args(argv: Sequence[str]) -> CliFlags:
    flags = CliFlags()
    idx = 0
    while idx < len(argv):
        arg = argv[idx]
        if arg == "-h":
            flags.show_help = True
            idx += 1
            continue
        if arg == "-v":
            flags.show_version = True
            idx += 1
            continue
        if arg in ("-m", "-d", "-p", "-e"):
            idx += 1
            if idx >= len(argv):
                raise ValidationError(f"{arg} requires an argument")
            value = argv[idx]
            if arg == "-m":
                flags.month_offset = _int_value(arg, value)
            elif arg == "-d":
                flags.day = _int_value(arg, value)
            elif arg == "-p":
                flags.person = value
            else:
                flags.export_path = Path(value).expanduser()
            idx += 1
            continue
        raise ValidationError(f"Unknown flag '{arg}'")
    return flags


def build_print_state(flags: CliFlags, today: Optional[date] = None) -> AppState:
    state = initial_state(today)
    if flags.month_offset:
        state = shift_month(state, flags.month_offset)
    if flags.day is not None:
        state = select_day(state, flags.day)
    if flags.person is not None:
        person = resolve_person(state, flags.person)
        if person is None:
            raise ValidationError(f"Unknown person '{flags.person}'")
        state = set_filter(state, person.id)
    return state


def render_text(state: AppState, config: Config, today: Optional[date] = None) -> List[str]:
    lines = MonthView(state, first_weekday=config.first_weekday, today=today).text_lines()
    lines.append("")
    lines.extend(AgendaView(state).text_lines())
    return lines


def main(argv: Optional[List[str]] = None, *, today: Optional[date] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        flags = parse_args(argv)
    except ValidationError as exc:
        print(str(exc))
        return 1

    if flags.show_version:
        print(__version__)
        return 0

    if flags.show_help:
        _print_help()
        return 0

    config = load_config()
    configure_logging(config)

    if flags.export_path is not None:
        state = initial_state(today)
        try:
            rows = export_agenda(flags.export_path, state.agenda, state.people)
        except ExportError as exc:
            print(str(exc))
            return 1
        print(f"Exported {rows} agenda rows to {flags.export_path}")
        return 0

    if flags.print_mode:
        try:
            state = build_print_state(flags, today)
        except ValidationError as exc:
            print(str(exc))
            return 1
        print("\n".join(render_text(state, config, today)))
        return 0

    # Make ESC detection snappy inside curses.
    os.environ.setdefault("ESCDELAY", "25")
    logger.info("Starting famcal %s", __version__)
    return Orchestrator(config=config, state=initial_state(today)).run()


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    run()
