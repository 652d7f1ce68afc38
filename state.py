#!/usr/bin/env python3
"""App state container for famcal."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal, Optional, Sequence

from models import (
    Person,
    SeverityLevel,
    agenda_item_to_jsonable,
    person_to_jsonable,
)
from sample_data import PEOPLE, build_agenda_store, build_health_store
from store import AgendaStore, HealthStore

OverlayKind = Literal["none", "help", "error", "message"]

DEFAULT_DRAFT_TIME = "09:00 AM"
DEFAULT_DRAFT_STATUS: SeverityLevel = "reminder"


@dataclass(frozen=True)
class AgendaDraft:
    title: str = ""
    time: str = DEFAULT_DRAFT_TIME
    status: SeverityLevel = DEFAULT_DRAFT_STATUS
    owner_id: Optional[str] = None


@dataclass(frozen=True)
class AppState:
    base_date: date = field(default_factory=lambda: date.today())
    month_offset: int = 0
    selected_date: date = field(default_factory=lambda: date.today())
    filter_person_id: Optional[str] = None

    people: Sequence[Person] = PEOPLE
    health: HealthStore = field(default_factory=dict)
    agenda: AgendaStore = field(default_factory=dict)

    draft: AgendaDraft = field(default_factory=AgendaDraft)

    overlay: OverlayKind = "none"
    overlay_message: str = ""


def initial_state(today: Optional[date] = None, people: Sequence[Person] = PEOPLE) -> AppState:
    """Fresh session state with the sample data placed on ``today``'s month."""
    today = today or date.today()
    return AppState(
        base_date=today,
        selected_date=today,
        people=tuple(people),
        health=build_health_store(today),
        agenda=build_agenda_store(today, people),
    )


def find_person(state: AppState, person_id: Optional[str]) -> Optional[Person]:
    if person_id is None:
        return None
    for person in state.people:
        if person.id == person_id:
            return person
    return None


def resolve_person(state: AppState, ref: str) -> Optional[Person]:
    """Look a person up by id, falling back to a case-insensitive name match."""
    needle = ref.strip()
    person = find_person(state, needle)
    if person is not None:
        return person
    lowered = needle.lower()
    for candidate in state.people:
        if candidate.name.lower() == lowered:
            return candidate
    return None


def state_to_jsonable(state: AppState) -> dict:
    return {
        "base_date": state.base_date.isoformat(),
        "month_offset": state.month_offset,
        "selected_date": state.selected_date.isoformat(),
        "filter_person_id": state.filter_person_id,
        "draft": {
            "title": state.draft.title,
            "time": state.draft.time,
            "status": state.draft.status,
            "owner_id": state.draft.owner_id,
        },
        "people": [person_to_jsonable(p) for p in state.people],
        "health": {
            person_id: {d.isoformat(): level for d, level in sorted(by_day.items())}
            for person_id, by_day in state.health.items()
        },
        "agenda": {
            person_id: {
                d.isoformat(): [agenda_item_to_jsonable(item) for item in items]
                for d, items in sorted(by_day.items())
            }
            for person_id, by_day in state.agenda.items()
        },
    }


__all__ = [
    "AppState",
    "AgendaDraft",
    "OverlayKind",
    "DEFAULT_DRAFT_TIME",
    "DEFAULT_DRAFT_STATUS",
    "initial_state",
    "find_person",
    "resolve_person",
    "state_to_jsonable",
]
