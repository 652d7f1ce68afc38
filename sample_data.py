#!/usr/bin/env python3
"""Built-in family roster and day-of-month sample tables."""

from __future__ import annotations

import calendar
from datetime import date
from typing import Dict, List, Sequence, Tuple

from models import AgendaItem, Person, SeverityLevel
from store import AgendaStore, HealthStore

PEOPLE: Sequence[Person] = (
    Person(
        id="grandma-siti",
        name="Grandma Siti",
        role="Grandmother",
        heart_rate_text="76 bpm",
        status="healthy",
    ),
    Person(
        id="grandpa-budi",
        name="Grandpa Budi",
        role="Grandfather",
        heart_rate_text="82 bpm",
        status="warning",
    ),
    Person(
        id="uncle-rudi",
        name="Uncle Rudi",
        role="Uncle",
        heart_rate_text="95 bpm",
        status="critical",
    ),
    Person(
        id="aunt-lina",
        name="Aunt Lina",
        role="Aunt",
        heart_rate_text="72 bpm",
        status="reminder",
    ),
)

HEALTH_BY_DAY: Dict[str, Dict[int, SeverityLevel]] = {
    "grandma-siti": {1: "healthy", 2: "reminder", 5: "warning", 10: "critical", 15: "healthy"},
    "grandpa-budi": {3: "healthy", 6: "warning", 9: "reminder", 13: "critical"},
    "uncle-rudi": {4: "critical", 8: "reminder", 11: "warning", 20: "healthy"},
}

# (title, time, status) per day.
AGENDA_BY_DAY: Dict[str, Dict[int, List[Tuple[str, str, SeverityLevel]]]] = {
    "grandma-siti": {
        1: [("Check blood pressure", "08:00 AM", "healthy")],
        2: [("Take regular medication", "10:00 AM", "reminder")],
        5: [("Doctor's appointment", "09:00 AM", "warning")],
        10: [("Lab test", "01:00 PM", "critical")],
    },
    "grandpa-budi": {
        3: [("Leg therapy", "09:00 AM", "warning")],
        9: [("Take vitamins", "07:30 AM", "reminder")],
    },
    "uncle-rudi": {
        4: [("Doctor consultation", "02:00 PM", "critical")],
        8: [("Light exercise", "07:00 AM", "reminder")],
    },
    "aunt-lina": {
        2: [("Morning yoga", "06:30 AM", "healthy")],
        21: [("Medical check-up", "10:00 AM", "critical")],
    },
}


def _day_in_month(reference: date, day: int) -> date | None:
    _, max_day = calendar.monthrange(reference.year, reference.month)
    if not 1 <= day <= max_day:
        return None
    return reference.replace(day=day)


def build_health_store(reference: date) -> HealthStore:
    """Place the day-of-month health table onto the month of ``reference``."""
    out: HealthStore = {}
    for person_id, by_day in HEALTH_BY_DAY.items():
        for day, status in by_day.items():
            target = _day_in_month(reference, day)
            if target is None:
                continue
            out.setdefault(person_id, {})[target] = status
    return out


def build_agenda_store(reference: date, people: Sequence[Person] = PEOPLE) -> AgendaStore:
    names = {person.id: person.name for person in people}
    out: AgendaStore = {}
    for person_id, by_day in AGENDA_BY_DAY.items():
        owner = names.get(person_id)
        if owner is None:
            continue
        for day, rows in by_day.items():
            target = _day_in_month(reference, day)
            if target is None:
                continue
            items = out.setdefault(person_id, {}).setdefault(target, [])
            for title, time_text, status in rows:
                items.append(
                    AgendaItem(
                        title=title,
                        time=time_text,
                        status=status,
                        owner=owner,
                        owner_id=person_id,
                    )
                )
    return out


__all__ = [
    "PEOPLE",
    "HEALTH_BY_DAY",
    "AGENDA_BY_DAY",
    "build_health_store",
    "build_agenda_store",
]
