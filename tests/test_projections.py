import json
from datetime import date
from dataclasses import replace

from models import AgendaItem
from palette import NEUTRAL_COLOR, SEVERITY_COLORS, legend
from projections import (
    AgendaRow,
    add_months,
    agenda_rows,
    can_submit,
    color_for_day,
    current_agenda,
    days_in_month,
    filter_options,
    is_today,
    month_cells,
    month_title,
    month_weeks,
    selected_date_label,
    severity_for_day,
)
from sample_data import PEOPLE
from state import AppState, initial_state, state_to_jsonable

TODAY = date(2026, 10, 17)


def _state(**overrides) -> AppState:
    return replace(initial_state(TODAY), **overrides)


def _item(title: str, status: str, owner_id: str = "grandma-siti", owner: str = "Grandma Siti") -> AgendaItem:
    return AgendaItem(title=title, time="09:00 AM", status=status, owner=owner, owner_id=owner_id)  # type: ignore[arg-type]


def test_empty_day_is_neutral_filtered_and_unfiltered() -> None:
    quiet = date(2026, 10, 7)
    state = _state()

    assert severity_for_day(state, quiet) == "none"
    assert color_for_day(state, quiet) == NEUTRAL_COLOR
    for person in PEOPLE:
        filtered = replace(state, filter_person_id=person.id)
        assert color_for_day(filtered, quiet) == NEUTRAL_COLOR


def test_warning_beats_reminder() -> None:
    day = date(2026, 10, 7)
    state = _state(
        health={"grandma-siti": {day: "reminder"}},
        agenda={"grandpa-budi": {day: [_item("Therapy", "warning", "grandpa-budi", "Grandpa Budi")]}},
    )

    assert severity_for_day(state, day) == "warning"
    assert color_for_day(state, day) == SEVERITY_COLORS["warning"]


def test_critical_item_forces_critical() -> None:
    day = date(2026, 10, 15)
    state = _state()
    assert severity_for_day(state, day) == "healthy"

    agenda = dict(state.agenda)
    agenda["grandma-siti"] = {**agenda["grandma-siti"], day: [_item("ER visit", "critical")]}
    forced = replace(state, agenda=agenda)

    assert severity_for_day(forced, day) == "critical"
    assert severity_for_day(replace(forced, filter_person_id="grandma-siti"), day) == "critical"


def test_filtered_color_includes_agenda_items() -> None:
    # Aunt Lina has no health entries; her critical check-up alone colors the day.
    state = _state(filter_person_id="aunt-lina")

    assert severity_for_day(state, date(2026, 10, 21)) == "critical"
    assert severity_for_day(state, date(2026, 10, 10)) == "none"


def test_filter_scopes_severity_to_person() -> None:
    day = date(2026, 10, 4)
    assert severity_for_day(_state(), day) == "critical"
    assert severity_for_day(_state(filter_person_id="grandma-siti"), day) == "none"


def test_current_agenda_concatenates_in_roster_order() -> None:
    state = _state(selected_date=date(2026, 10, 2))

    titles = [(item.owner, item.title) for item in current_agenda(state)]
    assert titles == [
        ("Grandma Siti", "Take regular medication"),
        ("Aunt Lina", "Morning yoga"),
    ]


def test_filter_never_leaks_other_owners() -> None:
    for person in PEOPLE:
        for day in range(1, 32):
            state = _state(filter_person_id=person.id, selected_date=date(2026, 10, day))
            assert all(item.owner_id == person.id for item in current_agenda(state))


def test_empty_agenda_is_empty_list() -> None:
    assert current_agenda(_state(selected_date=date(2026, 10, 30))) == []


def test_agenda_rows_expose_display_fields() -> None:
    rows = agenda_rows(_state(selected_date=date(2026, 10, 2), filter_person_id="aunt-lina"))

    assert rows == [AgendaRow(owner="Aunt Lina", title="Morning yoga", time="06:30 AM", status="healthy")]


def test_month_title_and_length_follow_offset() -> None:
    assert month_title(_state()) == "October 2026"
    assert month_title(_state(month_offset=3)) == "January 2027"
    assert days_in_month(_state(month_offset=4)) == 28
    assert month_title(_state(month_offset=-22)) == "December 2024"


def test_add_months_clamps_to_month_end() -> None:
    assert add_months(date(2026, 1, 31), 1) == date(2026, 2, 28)
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2026, 10, 17), 120) == date(2036, 10, 17)


def test_is_today_compares_full_date() -> None:
    assert is_today(_state(), 17, today=TODAY)
    assert not is_today(_state(), 18, today=TODAY)
    assert not is_today(_state(month_offset=12), 17, today=TODAY)


def test_month_cells_flags() -> None:
    cells = month_cells(_state(), today=TODAY)

    assert len(cells) == 31
    assert [c.day for c in cells if c.is_today] == [17]
    assert [c.day for c in cells if c.is_selected] == [17]
    assert cells[9].severity == "critical"
    assert cells[9].color == SEVERITY_COLORS["critical"]


def test_other_months_show_no_sample_data() -> None:
    cells = month_cells(_state(month_offset=1), today=TODAY)
    assert {c.severity for c in cells} == {"none"}
    assert not any(c.is_selected for c in cells)


def test_month_weeks_pad_adjacent_days() -> None:
    weeks = month_weeks(_state())
    assert weeks[0] == [None, None, None, 1, 2, 3, 4]
    assert weeks[-1] == [26, 27, 28, 29, 30, 31, None]

    sunday_first = month_weeks(_state(), first_weekday=6)
    assert sunday_first[0] == [None, None, None, None, 1, 2, 3]


def test_labels_and_filters() -> None:
    state = _state(filter_person_id="uncle-rudi")

    assert selected_date_label(state) == "17 October 2026"
    options = filter_options(state)
    assert options[0].label == "All" and options[0].person_id is None
    assert [o.person_id for o in options if o.active] == ["uncle-rudi"]
    assert [label for label, _ in legend()] == ["Healthy", "Reminder", "Warning", "Critical"]


def test_can_submit_requires_title_and_known_owner() -> None:
    assert can_submit(PEOPLE, "Checkup", "aunt-lina")
    assert not can_submit(PEOPLE, "", "aunt-lina")
    assert not can_submit(PEOPLE, "   ", "aunt-lina")
    assert not can_submit(PEOPLE, "Checkup", None)
    assert not can_submit(PEOPLE, "Checkup", "cousin-ani")


def test_state_serializes_to_json() -> None:
    payload = state_to_jsonable(_state())

    encoded = json.loads(json.dumps(payload))
    assert encoded["selected_date"] == "2026-10-17"
    assert encoded["health"]["grandma-siti"]["2026-10-10"] == "critical"
    assert encoded["agenda"]["aunt-lina"]["2026-10-21"][0]["title"] == "Medical check-up"
