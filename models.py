#!/usr/bin/env python3
"""Core models and validation helpers for famcal."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Dict, Literal, Optional, Sequence

SeverityLevel = Literal["healthy", "reminder", "warning", "critical", "none"]

# Lowest to highest.
SEVERITY_ORDER: Sequence[SeverityLevel] = (
    "none",
    "healthy",
    "reminder",
    "warning",
    "critical",
)
SEVERITY_ALIASES: Dict[str, SeverityLevel] = {
    "low": "healthy",
    "medium": "reminder",
    "high": "warning",
}
NO_SEVERITY: SeverityLevel = "none"


class ValidationError(Exception):
    pass


@dataclass(frozen=True)
class Person:
    id: str
    name: str
    role: str
    heart_rate_text: str
    status: SeverityLevel
    avatar_url: Optional[str] = None


@dataclass(frozen=True)
class AgendaItem:
    title: str
    time: str
    status: SeverityLevel
    owner: str
    owner_id: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


def normalize_severity(raw: object) -> SeverityLevel:
    if raw is None:
        raise ValidationError("Missing severity")
    value = str(raw).strip().lower()
    value = SEVERITY_ALIASES.get(value, value)
    if value not in SEVERITY_ORDER:
        valid = ", ".join(SEVERITY_ORDER)
        raise ValidationError(f"Invalid severity '{raw}'. Expected one of: {valid}")
    return value  # type: ignore[return-value]


def severity_rank(level: SeverityLevel) -> int:
    return SEVERITY_ORDER.index(level)


def worst_severity(levels: Sequence[SeverityLevel]) -> SeverityLevel:
    """Return the highest-ranked level present, or ``none`` when empty."""
    worst: SeverityLevel = NO_SEVERITY
    for level in levels:
        if severity_rank(level) > severity_rank(worst):
            worst = level
    return worst


def agenda_item_to_jsonable(item: AgendaItem) -> dict:
    return {
        "id": item.id,
        "title": item.title,
        "time": item.time,
        "status": item.status,
        "owner": item.owner,
        "owner_id": item.owner_id,
    }


def person_to_jsonable(person: Person) -> dict:
    return {
        "id": person.id,
        "name": person.name,
        "role": person.role,
        "avatar_url": person.avatar_url,
        "heart_rate_text": person.heart_rate_text,
        "status": person.status,
    }


__all__ = [
    "AgendaItem",
    "Person",
    "SeverityLevel",
    "SEVERITY_ORDER",
    "SEVERITY_ALIASES",
    "NO_SEVERITY",
    "ValidationError",
    "normalize_severity",
    "severity_rank",
    "worst_severity",
    "agenda_item_to_jsonable",
    "person_to_jsonable",
]
