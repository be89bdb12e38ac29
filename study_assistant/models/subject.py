"""Subject and study preference records."""
import math
import uuid
from datetime import date, datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

DEFAULT_DIFFICULTY = 2
DEFAULT_DAILY_CAPACITY = 2.0
DEFAULT_WEEKDAYS = frozenset({1, 2, 3, 4, 5})  # Mon-Fri, 0=Sunday


def to_number(value, default: float | None) -> float | None:
    """Permissive float conversion. Returns default for anything unusable."""
    if value is None or isinstance(value, str) and not value.strip():
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(result) or math.isinf(result):
        return default
    return result


class Subject(BaseModel):
    """A trackable unit of study with a deadline and a workload."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = ""
    exam_date: date | None = Field(
        default=None, validation_alias=AliasChoices("exam_date", "examDate")
    )
    total_hours: float = Field(
        default=0.0, validation_alias=AliasChoices("total_hours", "totalHours", "hours")
    )
    difficulty: int = DEFAULT_DIFFICULTY
    hours_logged: float = Field(
        default=0.0, validation_alias=AliasChoices("hours_logged", "hoursLogged", "done")
    )
    notes: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v) -> str:
        """Numeric ids from older state files become strings."""
        if v is None or v == "":
            return str(uuid.uuid4())
        return str(v)

    @field_validator("name", "notes", mode="before")
    @classmethod
    def coerce_text(cls, v) -> str:
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("exam_date", mode="before")
    @classmethod
    def parse_exam_date(cls, v) -> date | None:
        """Accept date, datetime, or ISO string. Anything else means 'not set'."""
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, date):
            return v
        if isinstance(v, str) and v.strip():
            try:
                return date.fromisoformat(v.strip()[:10])
            except ValueError:
                return None
        return None

    @field_validator("total_hours", "hours_logged", mode="before")
    @classmethod
    def coerce_hours(cls, v) -> float:
        return to_number(v, 0.0)

    @field_validator("difficulty", mode="before")
    @classmethod
    def clamp_difficulty(cls, v) -> int:
        """Clamp into [1, 3]; absent or non-numeric becomes 2."""
        value = to_number(v, DEFAULT_DIFFICULTY)
        return int(min(3, max(1, round(value))))

    @property
    def is_schedulable(self) -> bool:
        return bool(self.name) and self.total_hours > 0 and self.exam_date is not None


class Preferences(BaseModel):
    """Daily study capacity and the weekdays the user is willing to study."""
    model_config = ConfigDict(populate_by_name=True)

    daily_capacity_hours: float = Field(
        default=DEFAULT_DAILY_CAPACITY,
        validation_alias=AliasChoices("daily_capacity_hours", "dailyCapacityHours", "hoursPerDay"),
    )
    allowed_weekdays: set[int] = Field(
        default_factory=lambda: set(DEFAULT_WEEKDAYS),
        validation_alias=AliasChoices("allowed_weekdays", "allowedWeekdays", "daysOfWeek"),
    )

    @field_validator("daily_capacity_hours", mode="before")
    @classmethod
    def coerce_capacity(cls, v) -> float:
        if v is None:
            return DEFAULT_DAILY_CAPACITY
        return max(0.0, to_number(v, 0.0))

    @field_validator("allowed_weekdays", mode="before")
    @classmethod
    def parse_weekdays(cls, v) -> set[int]:
        """
        Keep integers in 0..6 (0=Sunday) and drop everything else.

        None means "use the default"; an explicitly empty collection stays
        empty. A comma separated string such as "1,2,3" is also accepted.
        """
        if v is None:
            return set(DEFAULT_WEEKDAYS)
        if isinstance(v, str):
            v = v.split(",")
        elif isinstance(v, (int, float)):
            v = [v]

        weekdays = set()
        for item in v:
            value = to_number(item, -1.0)
            if value.is_integer() and 0 <= value <= 6:
                weekdays.add(int(value))
        return weekdays
