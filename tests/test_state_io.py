"""Tests for study_assistant.tools.state_io."""
import json
from datetime import date, timedelta
from pathlib import Path

from study_assistant.models.subject import Subject
from study_assistant.tools.state_io import (
    default_state,
    find_subject,
    load_or_default,
    load_state,
    save_state,
)

TODAY = date(2024, 1, 1)


def test_load_state_missing_file(tmp_path: Path) -> None:
    assert load_state(tmp_path / "missing.json") is None


def test_load_state_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text("{not json")
    assert load_state(path) is None


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "state.json"
    state = default_state(TODAY)
    save_state(state, path)

    loaded = load_state(path)
    assert loaded is not None
    assert loaded.updated_at is not None
    assert [s.name for s in loaded.subjects] == ["Algorithms", "Machine Learning", "Systems"]
    assert loaded.preferences.allowed_weekdays == {1, 2, 3, 4, 5}
    assert not path.with_suffix(".tmp").exists()


def test_load_legacy_camel_case_state(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text(json.dumps({
        "subjects": [{"id": 1, "name": "Algorithms", "examDate": "2024-01-22", "hours": 12,
                      "difficulty": 3, "notes": "DP", "done": 2}],
        "preferences": {"hoursPerDay": 3, "daysOfWeek": [1, 2]},
        "chat": [{"role": "bot", "text": "Hi!"}],
    }))

    state = load_state(path)
    assert state is not None
    assert state.subjects[0].hours_logged == 2.0
    assert state.preferences.daily_capacity_hours == 3.0
    assert state.chat[0].role == "assistant"


def test_default_state_sample_subjects() -> None:
    state = default_state(TODAY)
    algorithms = state.subjects[0]
    assert algorithms.exam_date == TODAY + timedelta(days=21)
    assert algorithms.total_hours == 12
    assert algorithms.difficulty == 3
    assert state.chat[0].role == "assistant"


def test_load_or_default_uses_samples(tmp_path: Path) -> None:
    state = load_or_default(tmp_path / "missing.json", TODAY)
    assert len(state.subjects) == 3


def test_find_subject_by_name_or_id() -> None:
    state = default_state(TODAY)
    systems = state.subjects[2]
    assert find_subject(state, "systems") is systems
    assert find_subject(state, systems.id) is systems
    assert find_subject(state, "History") is None


def test_save_state_leaves_caller_model_untouched(tmp_path: Path) -> None:
    state = default_state(TODAY)
    before = state.model_dump()
    save_state(state, tmp_path / "state.json")

    assert state.updated_at is None
    assert state.model_dump() == before
    assert load_state(tmp_path / "state.json").updated_at is not None
