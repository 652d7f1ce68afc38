from datetime import date

import pytest

from actions import update_draft
from editor import EditorError, draft_to_jsonable, edit_draft_via_editor, parse_draft_payload
from models import ValidationError
from state import DEFAULT_DRAFT_TIME, initial_state

TODAY = date(2026, 10, 17)


def test_draft_payload_resolves_owner_by_name_or_id() -> None:
    state = initial_state(TODAY)

    by_name = parse_draft_payload(state, {"title": " Checkup ", "owner": "grandma siti", "status": "critical"})
    by_id = parse_draft_payload(state, {"title": "Checkup", "owner": "uncle-rudi"})

    assert by_name.owner_id == "grandma-siti"
    assert by_name.title == "Checkup"
    assert by_name.status == "critical"
    assert by_id.owner_id == "uncle-rudi"
    assert by_id.time == DEFAULT_DRAFT_TIME
    assert by_id.status == "reminder"


def test_draft_payload_keeps_unknown_owner_empty() -> None:
    draft = parse_draft_payload(initial_state(TODAY), {"title": "Checkup", "owner": "Cousin Ani"})
    assert draft.owner_id is None


def test_draft_payload_rejects_bad_input() -> None:
    state = initial_state(TODAY)
    with pytest.raises(ValidationError):
        parse_draft_payload(state, ["not", "an", "object"])
    with pytest.raises(ValidationError):
        parse_draft_payload(state, {"title": "x", "status": "urgent"})


def test_draft_to_jsonable_shows_owner_name() -> None:
    state = update_draft(initial_state(TODAY), owner_id="aunt-lina", title="Yoga")
    assert draft_to_jsonable(state) == {
        "title": "Yoga",
        "time": DEFAULT_DRAFT_TIME,
        "status": "reminder",
        "owner": "Aunt Lina",
    }


def test_edit_draft_reads_editor_output(fake_editor) -> None:
    cmd = fake_editor({"title": "Medical check-up", "time": "10:00 AM", "status": "high", "owner": "Aunt Lina"})

    draft = edit_draft_via_editor(cmd, initial_state(TODAY))

    assert draft.title == "Medical check-up"
    assert draft.status == "warning"
    assert draft.owner_id == "aunt-lina"


def test_edit_draft_unchanged_file_returns_same_draft() -> None:
    state = update_draft(initial_state(TODAY), title="Yoga", owner_id="aunt-lina")
    assert edit_draft_via_editor("true", state) == state.draft


def test_edit_draft_reports_editor_failures(tmp_path) -> None:
    state = initial_state(TODAY)
    with pytest.raises(EditorError):
        edit_draft_via_editor("false", state)
    with pytest.raises(EditorError):
        edit_draft_via_editor(str(tmp_path / "no-such-editor"), state)


def test_edit_draft_reports_invalid_json(tmp_path) -> None:
    script = tmp_path / "broken.sh"
    script.write_text("#!/bin/sh\necho '{broken' > \"$1\"\n")
    with pytest.raises(EditorError):
        edit_draft_via_editor(f"sh {script}", initial_state(TODAY))
