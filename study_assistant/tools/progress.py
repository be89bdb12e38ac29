"""Track logged study hours against each subject's workload."""
from typing import Iterable

from study_assistant.models.subject import Subject
from study_assistant.tools.planner import round2


def percent_complete(subjects: Iterable[Subject]) -> int:
    """Overall completion across all subjects, 0-100."""
    subjects = list(subjects)
    total = sum(s.total_hours for s in subjects)
    done = sum(s.hours_logged for s in subjects)
    if not total:
        return 0
    return round(done / total * 100)


def subject_percent(subject: Subject) -> int:
    """Completion of one subject, capped at 100."""
    total = subject.total_hours or 1
    return min(100, round(subject.hours_logged / total * 100))


def log_hours(subject: Subject, delta: float) -> Subject:
    """
    Return a copy of subject with `delta` hours added to hours_logged.

    Negative deltas undo logged time. The result is clamped to
    [0, total_hours] and rounded to 2 decimals.
    """
    logged = round2(subject.hours_logged + delta)
    logged = max(0.0, min(subject.total_hours, logged))
    return subject.model_copy(update={"hours_logged": logged})
