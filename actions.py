#!/usr/bin/env python3
"""State transitions for the calendar screen.

Every function here takes an ``AppState`` and hands back a new one; the
input state and the stores it references are never modified in place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Optional

from models import AgendaItem, SeverityLevel, ValidationError, normalize_severity
from projections import can_submit, days_in_month, displayed_month
from state import AgendaDraft, AppState, find_person
from store import append_agenda

logger = logging.getLogger(__name__)


@dataclass
class ActionResult:
    success: bool
    message: str
    state: AppState


def shift_month(state: AppState, delta: int) -> AppState:
    return replace(state, month_offset=state.month_offset + delta)


def go_to_today(state: AppState, today: Optional[date] = None) -> AppState:
    today = today or date.today()
    return replace(state, base_date=today, month_offset=0, selected_date=today)


def select_day(state: AppState, day: int) -> AppState:
    last_day = days_in_month(state)
    if not 1 <= day <= last_day:
        raise ValidationError(f"Day {day} is outside 1..{last_day}")
    return replace(state, selected_date=displayed_month(state).replace(day=day))


def move_selection(state: AppState, delta_days: int) -> AppState:
    """Move the selected day by ``delta_days``, staying inside the displayed month."""
    shown = displayed_month(state)
    last_day = days_in_month(state)
    start = state.selected_date
    if (start.year, start.month) != (shown.year, shown.month):
        # Coming from another month: land on the near edge of this one.
        return select_day(state, 1 if delta_days >= 0 else last_day)
    target = start + timedelta(days=delta_days)
    if target < shown:
        day = 1
    elif target > shown.replace(day=last_day):
        day = last_day
    else:
        day = target.day
    return select_day(state, day)


def set_filter(state: AppState, person_id: Optional[str]) -> AppState:
    if person_id is not None and find_person(state, person_id) is None:
        raise ValidationError(f"Unknown person '{person_id}'")
    return replace(state, filter_person_id=person_id)


def cycle_filter(state: AppState, step: int = 1) -> AppState:
    """Walk All -> each person in roster order -> All."""
    choices = [None] + [person.id for person in state.people]
    try:
        idx = choices.index(state.filter_person_id)
    except ValueError:
        idx = 0
    return set_filter(state, choices[(idx + step) % len(choices)])


def update_draft(state: AppState, **fields: object) -> AppState:
    if "status" in fields:
        fields["status"] = normalize_severity(fields["status"])
    unknown = set(fields) - {"title", "time", "status", "owner_id"}
    if unknown:
        raise ValidationError(f"Unknown draft field(s): {', '.join(sorted(unknown))}")
    return replace(state, draft=replace(state.draft, **fields))


def add_agenda(
    state: AppState,
    title: str,
    time: str,
    status: SeverityLevel | str,
    owner_id: Optional[str],
) -> ActionResult:
    """Append a new agenda item for the selected date.

    A blank title or an unknown owner blocks the submission: the result is
    unsuccessful and carries the untouched input state.
    """
    owner = find_person(state, owner_id)
    if owner is None or not can_submit(state.people, title, owner_id):
        logger.debug("Blocked agenda submission (title=%r, owner=%r)", title, owner_id)
        return ActionResult(False, "Title and owner are required", state)

    item = AgendaItem(
        title=title.strip(),
        time=time.strip(),
        status=normalize_severity(status),
        owner=owner.name,
        owner_id=owner.id,
    )
    agenda = append_agenda(state.agenda, state.selected_date, item)
    logger.info(
        "Added agenda '%s' for %s on %s", item.title, owner.name, state.selected_date
    )
    updated = replace(state, agenda=agenda, draft=AgendaDraft())
    return ActionResult(True, f"Added '{item.title}' for {owner.name}", updated)


def submit_draft(state: AppState) -> ActionResult:
    draft = state.draft
    return add_agenda(state, draft.title, draft.time, draft.status, draft.owner_id)


__all__ = [
    "ActionResult",
    "shift_month",
    "go_to_today",
    "select_day",
    "move_selection",
    "set_filter",
    "cycle_filter",
    "update_draft",
    "add_agenda",
    "submit_draft",
]
