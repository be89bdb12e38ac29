"""Tests for the study_assistant CLIs."""
from datetime import date
from pathlib import Path

import pytest

from study_assistant.cli import ask, log_hours, show_plan, show_progress
from study_assistant.tools.state_io import default_state, load_state, save_state

TODAY = date(2024, 1, 1)


@pytest.fixture
def state_path(tmp_path: Path) -> Path:
    path = tmp_path / "state.json"
    save_state(default_state(TODAY), path)
    return path


def test_show_plan_exports_json(state_path: Path, tmp_path: Path) -> None:
    out_path = tmp_path / "plan.json"
    show_plan.main(["--state", str(state_path), "--today", "2024-01-01", "--days", "7",
                    "--export", str(out_path)])
    assert '"2024-01-01"' in out_path.read_text()


def test_show_progress_runs(state_path: Path) -> None:
    show_progress.main(["--state", str(state_path), "--today", "2024-01-01"])


def test_log_hours_updates_state(state_path: Path) -> None:
    log_hours.main(["Systems", "1.5", "--state", str(state_path)])
    log_hours.main(["systems", "-0.5", "--state", str(state_path)])

    state = load_state(state_path)
    assert state.subjects[2].hours_logged == 1.0


def test_log_hours_unknown_subject(state_path: Path) -> None:
    with pytest.raises(SystemExit):
        log_hours.main(["History", "1", "--state", str(state_path)])


def test_ask_appends_history(state_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.setattr(ask, "load_dotenv", lambda: None)
    ask.main(["quiz", "graphs", "--state", str(state_path)])

    state = load_state(state_path)
    assert [m.role for m in state.chat[-2:]] == ["user", "assistant"]
    assert state.chat[-1].text.startswith("1) Define graphs")


def test_show_plan_warns_about_shared_names(tmp_path: Path, capsys) -> None:
    state = default_state(TODAY)
    twin = state.subjects[2].model_copy(update={"id": "twin", "total_hours": 500})
    state.subjects.append(twin)
    path = tmp_path / "state.json"
    save_state(state, path)

    show_plan.main(["--state", str(path), "--today", "2024-01-01", "--days", "3"])

    out = capsys.readouterr().out
    assert "Several subjects are named 'Systems'" in out
    assert "could not be scheduled" in out
