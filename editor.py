#!/usr/bin/env python3
"""External editor flow for the add-agenda draft."""

from __future__ import annotations

import json
import shlex
import subprocess
import tempfile
from pathlib import Path
from typing import Any, Dict

from models import ValidationError, normalize_severity
from state import AgendaDraft, AppState, find_person, resolve_person


class EditorError(Exception):
    pass


def draft_to_jsonable(state: AppState) -> dict:
    owner = find_person(state, state.draft.owner_id)
    return {
        "title": state.draft.title,
        "time": state.draft.time,
        "status": state.draft.status,
        "owner": owner.name if owner is not None else "",
    }


def parse_draft_payload(state: AppState, data: Any) -> AgendaDraft:
    """Turn edited JSON into a draft.

    An owner that matches nobody is kept as ``None`` so the submission is
    blocked rather than rejected.
    """
    if not isinstance(data, dict):
        raise ValidationError("Draft must be a JSON object")

    def _trim(value: object) -> str:
        if value is None:
            return ""
        return str(value).strip()

    owner_ref = _trim(data.get("owner"))
    owner = resolve_person(state, owner_ref) if owner_ref else None
    status = normalize_severity(data.get("status") or state.draft.status)

    return AgendaDraft(
        title=_trim(data.get("title")),
        time=_trim(data.get("time")) or state.draft.time,
        status=status,
        owner_id=owner.id if owner is not None else None,
    )


def edit_draft_via_editor(editor_cmd: str, state: AppState) -> AgendaDraft:
    """Launch external editor on the current draft and return the edited draft.

    Raises EditorError when the editor fails or leaves an unreadable draft, and
    ValidationError when a field (e.g. status) is not acceptable.
    """
    payload: Dict[str, Any] = draft_to_jsonable(state)
    with tempfile.NamedTemporaryFile(mode="w+", suffix=".json", delete=False) as tmp:
        tmp_path = Path(tmp.name)
        json.dump(payload, tmp, indent=2)
        tmp.flush()
    try:
        cmd = shlex.split(editor_cmd) + [str(tmp_path)]
        try:
            proc = subprocess.run(cmd, check=False)
        except OSError as exc:
            raise EditorError(f"Could not start editor '{editor_cmd}': {exc}") from exc
        if proc.returncode != 0:
            raise EditorError("Editor cancelled or failed")
        try:
            data = json.loads(tmp_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise EditorError(f"Invalid JSON: {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise EditorError(f"Could not read edited draft: {exc}") from exc
        return parse_draft_payload(state, data)
    finally:
        try:
            tmp_path.unlink()
        except OSError:
            pass


__all__ = [
    "edit_draft_via_editor",
    "parse_draft_payload",
    "draft_to_jsonable",
    "EditorError",
]
