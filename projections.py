#!/usr/bin/env python3
"""Read-only projections from app state to displayed values."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence, Tuple

from models import AgendaItem, Person, SeverityLevel, worst_severity
from palette import color_for
from state import AppState, find_person
from store import agenda_on, health_on

NO_AGENDA_MESSAGE = "No agenda for this date."
ALL_LABEL = "All"


@dataclass(frozen=True)
class DayCell:
    day: int
    date: date
    severity: SeverityLevel
    color: str
    is_today: bool
    is_selected: bool


@dataclass(frozen=True)
class AgendaRow:
    owner: str
    title: str
    time: str
    status: SeverityLevel


@dataclass(frozen=True)
class FilterOption:
    label: str
    person_id: Optional[str]
    active: bool


def add_months(value: date, delta_months: int) -> date:
    year = value.year + ((value.month - 1 + delta_months) // 12)
    month = (value.month - 1 + delta_months) % 12 + 1
    # Clamp day to end of target month
    _, max_day = calendar.monthrange(year, month)
    return date(year, month, min(value.day, max_day))


def displayed_month(state: AppState) -> date:
    """First day of the month currently on screen."""
    return add_months(state.base_date, state.month_offset).replace(day=1)


def days_in_month(state: AppState) -> int:
    shown = displayed_month(state)
    return calendar.monthrange(shown.year, shown.month)[1]


def month_title(state: AppState) -> str:
    shown = displayed_month(state)
    return f"{calendar.month_name[shown.month]} {shown.year}"


def selected_date_label(state: AppState) -> str:
    sel = state.selected_date
    return f"{sel.day} {calendar.month_name[sel.month]} {sel.year}"


def is_today(state: AppState, day: int, today: Optional[date] = None) -> bool:
    today = today or date.today()
    shown = displayed_month(state)
    return (shown.year, shown.month, day) == (today.year, today.month, today.day)


def persons_in_scope(state: AppState) -> Sequence[Person]:
    if state.filter_person_id is None:
        return state.people
    person = find_person(state, state.filter_person_id)
    return (person,) if person is not None else ()


def severity_for_day(state: AppState, day: date) -> SeverityLevel:
    candidates: List[SeverityLevel] = []
    for person in persons_in_scope(state):
        baseline = health_on(state.health, person.id, day)
        if baseline is not None:
            candidates.append(baseline)
        candidates.extend(item.status for item in agenda_on(state.agenda, person.id, day))
    return worst_severity(candidates)


def color_for_day(state: AppState, day: date) -> str:
    return color_for(severity_for_day(state, day))


def current_agenda(state: AppState) -> List[AgendaItem]:
    items: List[AgendaItem] = []
    for person in persons_in_scope(state):
        items.extend(agenda_on(state.agenda, person.id, state.selected_date))
    return items


def agenda_rows(state: AppState) -> List[AgendaRow]:
    return [
        AgendaRow(
            owner=item.owner,
            title=item.title,
            time=item.time,
            status=item.status,
        )
        for item in current_agenda(state)
    ]


def month_cells(state: AppState, today: Optional[date] = None) -> List[DayCell]:
    shown = displayed_month(state)
    cells: List[DayCell] = []
    for day in range(1, days_in_month(state) + 1):
        current = shown.replace(day=day)
        severity = severity_for_day(state, current)
        cells.append(
            DayCell(
                day=day,
                date=current,
                severity=severity,
                color=color_for(severity),
                is_today=is_today(state, day, today),
                is_selected=current == state.selected_date,
            )
        )
    return cells


def month_weeks(state: AppState, first_weekday: int = 0) -> List[List[Optional[int]]]:
    """Day numbers laid out by week; ``None`` pads days of adjacent months."""
    shown = displayed_month(state)
    cal = calendar.Calendar(firstweekday=first_weekday)
    return [
        [day or None for day in week]
        for week in cal.monthdayscalendar(shown.year, shown.month)
    ]


def filter_options(state: AppState) -> List[FilterOption]:
    options = [FilterOption(ALL_LABEL, None, state.filter_person_id is None)]
    for person in state.people:
        options.append(
            FilterOption(person.name, person.id, state.filter_person_id == person.id)
        )
    return options


def can_submit(people: Sequence[Person], title: str, owner_id: Optional[str]) -> bool:
    if not title or not title.strip():
        return False
    return any(person.id == owner_id for person in people)


def weekday_headers(first_weekday: int = 0) -> Tuple[str, ...]:
    return tuple(
        calendar.day_abbr[(first_weekday + idx) % 7] for idx in range(7)
    )


__all__ = [
    "DayCell",
    "AgendaRow",
    "FilterOption",
    "NO_AGENDA_MESSAGE",
    "ALL_LABEL",
    "add_months",
    "displayed_month",
    "days_in_month",
    "month_title",
    "selected_date_label",
    "is_today",
    "persons_in_scope",
    "severity_for_day",
    "color_for_day",
    "current_agenda",
    "agenda_rows",
    "month_cells",
    "month_weeks",
    "filter_options",
    "can_submit",
    "weekday_headers",
]
