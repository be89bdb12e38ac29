"""Generate day-by-day study plans from subjects and preferences."""
import json
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal, localcontext
from pathlib import Path
from typing import Iterable, Mapping, Optional

from study_assistant.models.plan import DayPlan, Plan, PlanEntry, PlannerSettings
from study_assistant.models.subject import Preferences, Subject

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")
_QUANTIZE_PRECISION = 400  # digits needed to quantize any finite float to cents


@dataclass
class _WorkItem:
    """Per-run scratch copy of a schedulable subject."""
    name: str
    exam_date: date
    remaining: float
    difficulty: int


def round2(value: float) -> float:
    """Round half-up to 2 decimals on the exact binary value."""
    with localcontext() as ctx:
        ctx.prec = _QUANTIZE_PRECISION
        return float(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def days_between(start: date, end: date) -> int:
    """Whole days from start to end, never negative."""
    return max(0, (end - start).days)


def weekday_number(day: date) -> int:
    """Weekday with 0=Sunday .. 6=Saturday."""
    return day.isoweekday() % 7


def generate_plan(
    subjects: Iterable[Subject | Mapping],
    preferences: Optional[Preferences | Mapping],
    today: date,
    settings: Optional[PlannerSettings] = None,
) -> Plan:
    """
    Allocate study hours per subject for each day starting at `today`.

    Subjects closest to their exam are served first each day, harder ones
    first among equally urgent subjects. A subject's daily target is its
    remaining hours spread evenly over the days left until the exam, boosted
    by difficulty and floored at `min_daily_target`; the day's capacity caps
    what is actually handed out.

    Unschedulable subjects (no name, no positive hours, no exam date) are
    skipped silently. Subjects whose exam has already passed get their whole
    remaining workload front-loaded.

    Args:
        subjects: Subject models or raw mappings (validated permissively)
        preferences: Preferences, a raw mapping, or None for defaults
        today: First day of the plan
        settings: Planner constants (defaults if omitted)

    Returns:
        dict of date -> list[PlanEntry]; dates without study are absent
    """
    settings = settings or PlannerSettings()
    prefs = _as_preferences(preferences)

    items = []
    for subject in subjects:
        subject = _as_subject(subject)
        if not subject.is_schedulable:
            logger.debug(f"Skipping unschedulable subject {subject.name!r} ({subject.id})")
            continue
        items.append(_WorkItem(
            name=subject.name,
            exam_date=subject.exam_date,
            remaining=subject.total_hours,
            difficulty=subject.difficulty,
        ))
    items.sort(key=lambda item: item.exam_date)

    plan: Plan = {}
    for offset in range(settings.horizon_days):
        if all(item.remaining <= 0 for item in items):
            break

        current = today + timedelta(days=offset)
        if weekday_number(current) not in prefs.allowed_weekdays:
            continue

        capacity = prefs.daily_capacity_hours

        # Urgency shifts as the simulated calendar advances, so re-rank daily
        items.sort(key=lambda item: ((item.exam_date - current).days, -item.difficulty))

        entries = []
        for item in items:
            if capacity <= 0 or item.remaining <= 0:
                continue

            days_left = max(1, days_between(current, item.exam_date))
            boost = 1 + (item.difficulty - 1) * settings.difficulty_boost
            target = min(
                item.remaining,
                max(settings.min_daily_target, item.remaining / days_left * boost),
            )
            allocation = min(capacity, round2(target))
            if allocation <= settings.min_allocation:
                continue

            entries.append(PlanEntry(subject_name=item.name, hours=round2(allocation)))
            item.remaining = round2(item.remaining - allocation)
            capacity = round2(capacity - allocation)

        if entries:
            plan[current] = entries

    unfinished = [item.name for item in items if item.remaining > 0]
    if unfinished:
        logger.debug(f"Horizon of {settings.horizon_days} days left work unscheduled for: {unfinished}")
    logger.debug(f"Planned {len(plan)} study days for {len(items)} subjects")
    return plan


def upcoming_days(plan: Plan, today: date, days: int = 14) -> list[DayPlan]:
    """Rows for the next `days` days; dates missing from the plan are empty."""
    rows = []
    for offset in range(days):
        current = today + timedelta(days=offset)
        entries = plan.get(current, [])
        rows.append(DayPlan(
            day=current,
            entries=entries,
            total_hours=round2(sum(entry.hours for entry in entries)),
        ))
    return rows


def allocated_hours(plan: Plan) -> dict[str, float]:
    """Total planned hours per subject name."""
    totals: dict[str, float] = {}
    for entries in plan.values():
        for entry in entries:
            totals[entry.subject_name] = totals.get(entry.subject_name, 0.0) + entry.hours
    return {name: round2(hours) for name, hours in totals.items()}


def unscheduled_hours(subjects: Iterable[Subject | Mapping], plan: Plan) -> dict[str, float]:
    """
    Hours the plan could not fit, per subject name.

    Plan entries only carry the name, so schedulable subjects sharing a name
    are compared against the plan as one group.
    """
    wanted: dict[str, float] = {}
    for subject in subjects:
        subject = _as_subject(subject)
        if subject.is_schedulable:
            wanted[subject.name] = wanted.get(subject.name, 0.0) + subject.total_hours

    planned = allocated_hours(plan)
    missing = {}
    for name, hours in wanted.items():
        gap = round2(hours - planned.get(name, 0.0))
        if gap > 0.01:
            missing[name] = gap
    return missing


def duplicate_names(subjects: Iterable[Subject | Mapping]) -> list[str]:
    """Names used by more than one schedulable subject."""
    seen: set[str] = set()
    duplicates = []
    for subject in subjects:
        subject = _as_subject(subject)
        if not subject.is_schedulable:
            continue
        if subject.name in seen and subject.name not in duplicates:
            duplicates.append(subject.name)
        seen.add(subject.name)
    return duplicates


def save_plan(plan: Plan, out_path: Path) -> None:
    """Write plan to JSON keyed by ISO date."""
    data = {
        day.isoformat(): [entry.model_dump() for entry in entries]
        for day, entries in sorted(plan.items())
    }
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(data, indent=2))


def _as_subject(subject: Subject | Mapping) -> Subject:
    if isinstance(subject, Subject):
        return subject
    return Subject.model_validate(subject)


def _as_preferences(preferences: Optional[Preferences | Mapping]) -> Preferences:
    if preferences is None:
        return Preferences()
    if isinstance(preferences, Preferences):
        return preferences
    return Preferences.model_validate(preferences)
