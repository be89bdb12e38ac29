"""Study plan models."""
import logging
import os
from datetime import date

from pydantic import BaseModel, Field

from study_assistant.models.subject import to_number

logger = logging.getLogger(__name__)


class PlanEntry(BaseModel):
    """Recommended study hours for one subject on one date."""
    subject_name: str
    hours: float  # > min_allocation, 2 decimals


# date -> ordered entries; a date without study has no key at all
Plan = dict[date, list[PlanEntry]]


class DayPlan(BaseModel):
    """One row of the "next N days" view."""
    day: date
    entries: list[PlanEntry] = Field(default_factory=list)
    total_hours: float = 0.0


class PlannerSettings(BaseModel):
    """Empirical constants used by the plan generator."""
    horizon_days: int = 120
    min_daily_target: float = 0.5  # floor for a subject's daily target
    min_allocation: float = 0.01  # allocations at or below this are noise
    difficulty_boost: float = 0.3  # extra share per difficulty level above 1

    @classmethod
    def from_env(cls) -> "PlannerSettings":
        """Build settings from STUDY_PLAN_* environment variables."""
        overrides = {}
        env_names = {
            "horizon_days": "STUDY_PLAN_HORIZON_DAYS",
            "min_daily_target": "STUDY_PLAN_MIN_DAILY_TARGET",
            "min_allocation": "STUDY_PLAN_MIN_ALLOCATION",
            "difficulty_boost": "STUDY_PLAN_DIFFICULTY_BOOST",
        }
        for field_name, env_name in env_names.items():
            raw = os.getenv(env_name)
            if raw is None or not raw.strip():
                continue
            value = to_number(raw, None)
            if value is None:
                logger.warning(f"Ignoring {env_name}={raw!r}: not a finite number")
                continue
            overrides[field_name] = int(value) if field_name == "horizon_days" else value
        return cls(**overrides)
