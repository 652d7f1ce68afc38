#!/usr/bin/env python3
"""In-memory agenda/health stores and the PyArrow agenda export."""
from __future__ import annotations

import logging
import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pyarrow as pa
import pyarrow.parquet as pq

from models import AgendaItem, Person, SeverityLevel

logger = logging.getLogger(__name__)

HealthStore = Dict[str, Dict[date, SeverityLevel]]
AgendaStore = Dict[str, Dict[date, List[AgendaItem]]]


EXPORT_SCHEMA = pa.schema(
    [
        ("date", pa.date32()),
        ("owner_id", pa.string()),
        ("owner", pa.string()),
        ("title", pa.string()),
        ("time", pa.string()),
        ("status", pa.string()),
    ]
)


class ExportError(Exception):
    pass


def health_on(store: HealthStore, person_id: str, day: date) -> Optional[SeverityLevel]:
    return store.get(person_id, {}).get(day)


def agenda_on(store: AgendaStore, person_id: str, day: date) -> List[AgendaItem]:
    return list(store.get(person_id, {}).get(day, []))


def append_agenda(store: AgendaStore, day: date, item: AgendaItem) -> AgendaStore:
    """Return a copy of ``store`` with ``item`` appended under its owner and day.

    Only the touched owner/day containers are copied; ``store`` is left as is.
    """
    updated: AgendaStore = dict(store)
    by_day = dict(updated.get(item.owner_id, {}))
    by_day[day] = list(by_day.get(day, [])) + [item]
    updated[item.owner_id] = by_day
    return updated


def _agenda_to_table(store: AgendaStore, people: Sequence[Person]) -> pa.Table:
    days = sorted({d for by_day in store.values() for d in by_day})
    columns: Dict[str, list] = {name: [] for name in EXPORT_SCHEMA.names}
    for day in days:
        for person in people:
            for item in store.get(person.id, {}).get(day, []):
                columns["date"].append(day)
                columns["owner_id"].append(item.owner_id)
                columns["owner"].append(item.owner)
                columns["title"].append(item.title)
                columns["time"].append(item.time)
                columns["status"].append(item.status)
    return pa.Table.from_pydict(columns, schema=EXPORT_SCHEMA)


def _write_atomic(path: Path, table: pa.Table) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(dir=str(path.parent), delete=False) as tmp:
        tmp_path = Path(tmp.name)
    try:
        pq.write_table(table, tmp_path)
        tmp_path.replace(path)
    finally:
        if tmp_path.exists():
            try:
                os.remove(tmp_path)
            except OSError:
                pass


def export_agenda(path: Path, store: AgendaStore, people: Sequence[Person]) -> int:
    """Write a Parquet snapshot of the agenda store and return the row count."""
    try:
        table = _agenda_to_table(store, people)
        _write_atomic(path, table)
    except (OSError, pa.ArrowException) as exc:
        raise ExportError(f"Failed to export agenda to {path}: {exc}") from exc
    logger.info("Exported %d agenda rows to %s", table.num_rows, path)
    return table.num_rows


__all__ = [
    "AgendaStore",
    "HealthStore",
    "EXPORT_SCHEMA",
    "ExportError",
    "health_on",
    "agenda_on",
    "append_agenda",
    "export_agenda",
]
