"""Study state I/O: load, save, and default contents."""
import json
import logging
import os
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from study_assistant.models.state import ChatMessage, StudyState
from study_assistant.models.subject import Preferences, Subject
from study_assistant.tools.tutor import USAGE_HINT

logger = logging.getLogger(__name__)

DEFAULT_STATE_PATH = Path("storage/state/study_state.json")


def state_path_from_env() -> Path:
    """Location of the state file, overridable with STUDY_STATE_PATH."""
    return Path(os.getenv("STUDY_STATE_PATH", str(DEFAULT_STATE_PATH)))


def load_state(state_path: Path) -> Optional[StudyState]:
    """Load state from JSON file. Returns None if not found or invalid."""
    if not state_path.exists():
        return None

    try:
        data = json.loads(state_path.read_text())
        return StudyState(**data)
    except (OSError, ValueError, TypeError, ValidationError) as e:
        logger.warning(f"Could not read study state {state_path}: {e}")
        return None


def save_state(state: StudyState, state_path: Path) -> None:
    """Save state to JSON file atomically (write temp then replace)."""
    state_path.parent.mkdir(parents=True, exist_ok=True)
    stamped = state.model_copy(update={"updated_at": datetime.now(timezone.utc).isoformat()})

    temp_path = state_path.with_suffix(".tmp")
    temp_path.write_text(stamped.model_dump_json(indent=2))

    temp_path.replace(state_path)


def default_state(today: date) -> StudyState:
    """Starter state with three sample subjects and a greeting."""
    subjects = [
        Subject(name="Algorithms", exam_date=today + timedelta(days=21),
                total_hours=12, difficulty=3, notes="DP + Graphs"),
        Subject(name="Machine Learning", exam_date=today + timedelta(days=28),
                total_hours=16, difficulty=2, notes="Transformers + Eval"),
        Subject(name="Systems", exam_date=today + timedelta(days=35),
                total_hours=10, difficulty=2, notes="Concurrency"),
    ]
    return StudyState(
        subjects=subjects,
        preferences=Preferences(),
        chat=[ChatMessage(role="assistant", text=f"Hi! {USAGE_HINT}")],
    )


def load_or_default(state_path: Path, today: date) -> StudyState:
    """Load saved state, falling back to the starter state."""
    state = load_state(state_path)
    if state is None:
        logger.info(f"No saved state at {state_path}, using sample subjects")
        return default_state(today)
    return state


def find_subject(state: StudyState, name_or_id: str) -> Optional[Subject]:
    """Find a subject by id, or by case-insensitive name."""
    needle = name_or_id.strip().lower()
    for subject in state.subjects:
        if subject.id == name_or_id or subject.name.lower() == needle:
            return subject
    return None
