"""Common dataclasses, enumerations and validation errors used across the screenaware package."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

# Closed category set; order is the display order used by every breakdown.
CATEGORIES: Tuple[str, ...] = (
    "work",
    "social",
    "entertainment",
    "communication",
    "gaming",
    "other",
)

CATEGORY_LABELS: Dict[str, str] = {
    "work": "Work/Study",
    "social": "Social Media",
    "entertainment": "Entertainment",
    "communication": "Communication",
    "gaming": "Gaming",
    "other": "Other",
}

PRODUCTIVE_CATEGORY = "work"


class ValidationError(ValueError):
    """Raised when user input is rejected at the record-input boundary."""


class InvalidCategoryError(ValidationError):
    def __init__(self, category: object) -> None:
        super().__init__(
            f"Invalid category {category!r}; expected one of {', '.join(CATEGORIES)}"
        )
        self.category = category


class ZeroDurationError(ValidationError):
    def __init__(self, duration_minutes: object) -> None:
        super().__init__(f"Duration must be a positive number of minutes, got {duration_minutes!r}")
        self.duration_minutes = duration_minutes


class InvalidGoalError(ValidationError):
    def __init__(self, hours: object) -> None:
        super().__init__(f"Daily goal must be a whole number of hours between 1 and 24, got {hours!r}")
        self.hours = hours


def category_label(category: str) -> str:
    """Return the display name for a category (falls back to the raw value)."""
    return CATEGORY_LABELS.get(category, category)


def validate_category(category: object) -> str:
    if not isinstance(category, str) or category not in CATEGORY_LABELS:
        raise InvalidCategoryError(category)
    return category


def validate_duration(duration_minutes: object) -> int:
    # bool is an int subclass; True minutes is not a duration
    if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, int):
        raise ZeroDurationError(duration_minutes)
    if duration_minutes <= 0:
        raise ZeroDurationError(duration_minutes)
    return duration_minutes


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class ActivityRecord:
    """One logged interval of categorized device use."""

    category: str
    duration_minutes: int
    description: str
    recorded_at: str

    @classmethod
    def create(
        cls,
        category: object,
        duration_minutes: object,
        description: Optional[str] = None,
        recorded_at: Optional[str] = None,
    ) -> "ActivityRecord":
        """Validate raw input and build a record, defaulting the description to the category label."""
        category = validate_category(category)
        duration = validate_duration(duration_minutes)
        if description is not None and not isinstance(description, str):
            raise ValidationError(f"Description must be text, got {type(description).__name__}")
        text = (description or "").strip() or category_label(category)
        return cls(
            category=category,
            duration_minutes=duration,
            description=text,
            recorded_at=recorded_at if recorded_at is not None else utc_now_iso(),
        )

    @property
    def label(self) -> str:
        return category_label(self.category)

    def to_dict(self) -> Dict:
        return {
            "type": self.category,
            "duration": self.duration_minutes,
            "description": self.description,
            "timestamp": self.recorded_at,
        }

    @classmethod
    def from_dict(cls, payload: Dict) -> "ActivityRecord":
        """Rebuild a stored record; raises ValidationError on malformed entries."""
        if not isinstance(payload, dict):
            raise ValidationError(f"Activity entry must be an object, got {type(payload).__name__}")
        return cls.create(
            payload.get("type"),
            payload.get("duration"),
            description=payload.get("description"),
            recorded_at=str(payload.get("timestamp") or ""),
        )


DailyLog = Dict[str, List[ActivityRecord]]


@dataclass(frozen=True)
class QuizQuestion:
    """Static multiple-choice question."""

    prompt: str
    options: Tuple[str, ...]
    correct_index: int
    explanation: str = ""

    def __post_init__(self) -> None:
        if len(self.options) < 2:
            raise ValueError(f"Question {self.prompt!r} needs at least two options")
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(
                f"Question {self.prompt!r} has correct_index {self.correct_index} outside 0..{len(self.options) - 1}"
            )


@dataclass
class QuizResult:
    """Finalized, persisted outcome of a quiz attempt."""

    score: int
    total: int
    percentage: float
    completed_at: str
    answers: List[Optional[int]] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "score": self.score,
            "total": self.total,
            "percentage": self.percentage,
            "date": self.completed_at,
            "answers": list(self.answers),
        }

    @classmethod
    def from_dict(cls, payload: Dict) -> "QuizResult":
        answers = payload.get("answers") or []
        return cls(
            score=int(payload["score"]),
            total=int(payload["total"]),
            percentage=float(payload["percentage"]),
            completed_at=str(payload.get("date") or ""),
            answers=[None if a is None else int(a) for a in answers],
        )


@dataclass(frozen=True)
class Insight:
    """Advisory message derived from aggregated metrics."""

    severity: str  # "warning" | "success" | "info"
    icon: str
    title: str
    message: str


def format_duration(minutes: int) -> str:
    """Format minutes as ``"1h 5m"`` or ``"45m"`` when under an hour."""
    hours, mins = divmod(int(minutes), 60)
    return f"{hours}h {mins}m" if hours > 0 else f"{mins}m"
