"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
Task collections arrive as loosely-typed JSON. Pydantic validators coerce
bad numbers and unknown enum values to safe defaults instead of rejecting
the record, so every Task in memory already satisfies its invariants.
"""

import math
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def new_task_id() -> str:
    """Generate a fresh unique task identifier"""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Status(str, Enum):
    TODO = "Todo"
    IN_PROGRESS = "In Progress"
    DONE = "Done"


class PerformanceGrade(str, Enum):
    """Qualitative bucket for average ROI, ordered worst to best"""
    NEEDS_IMPROVEMENT = "Needs Improvement"
    GOOD = "Good"
    EXCELLENT = "Excellent"


def _coerce_number(value: Any) -> Optional[float]:
    """Best-effort numeric conversion; None when not a finite number"""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _match_enum(enum_cls, value: Any, default):
    """Look up an enum member by value, ignoring case and surrounding spaces"""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        wanted = value.strip().lower()
        for member in enum_cls:
            if member.value.lower() == wanted:
                return member
    return default


class Task(BaseModel):
    """
    A tracked unit of work with its revenue and hours spent.

    JSON payloads use camelCase (``timeTaken``, ``createdAt``); Python code
    uses the snake_case attribute names. Both are accepted on input.
    """
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str = Field(default_factory=new_task_id)
    title: str = "Untitled Task"
    revenue: float = 0.0
    time_taken: float = Field(default=1.0, alias="timeTaken")
    priority: Priority = Priority.MEDIUM
    status: Status = Status.TODO
    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now, alias="createdAt")
    completed_at: Optional[datetime] = Field(default=None, alias="completedAt")

    @field_validator("id", mode="before")
    @classmethod
    def _id_or_generate(cls, value: Any) -> str:
        if value is None or str(value).strip() == "":
            return new_task_id()
        return str(value)

    @field_validator("title", mode="before")
    @classmethod
    def _title_or_default(cls, value: Any) -> str:
        if value is None or str(value).strip() == "":
            return "Untitled Task"
        return str(value)

    @field_validator("revenue", mode="before")
    @classmethod
    def _revenue_non_negative(cls, value: Any) -> float:
        number = _coerce_number(value)
        if number is None or number < 0:
            return 0.0
        return number

    @field_validator("time_taken", mode="before")
    @classmethod
    def _time_taken_at_least_one(cls, value: Any) -> float:
        number = _coerce_number(value)
        if number is None or number <= 0:
            return 1.0
        return max(number, 1.0)

    @field_validator("priority", mode="before")
    @classmethod
    def _known_priority(cls, value: Any) -> Priority:
        return _match_enum(Priority, value, Priority.MEDIUM)

    @field_validator("status", mode="before")
    @classmethod
    def _known_status(cls, value: Any) -> Status:
        return _match_enum(Status, value, Status.TODO)

    @field_validator("notes", mode="before")
    @classmethod
    def _notes_as_text(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)

    @field_validator("completed_at", mode="before")
    @classmethod
    def _blank_completed_at(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    @field_validator("created_at", "completed_at")
    @classmethod
    def _assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Naive timestamps would not compare against aware ones when sorting
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def to_payload(self) -> dict:
        """Serialize with the camelCase names used by JSON sources"""
        return self.model_dump(mode="json", by_alias=True)


class DerivedTask(Task):
    """Task augmented with its computed ROI"""
    roi: float = 0.0


class Metrics(BaseModel):
    """Aggregate figures shown in the metrics bar"""
    total_revenue: float = 0.0
    total_time_taken: float = 0.0
    time_efficiency_pct: float = 0.0
    revenue_per_hour: float = 0.0
    average_roi: float = 0.0
    performance_grade: PerformanceGrade = PerformanceGrade.NEEDS_IMPROVEMENT


class UserPreferences(BaseModel):
    """
    User configuration and preferences.

    Loaded from settings.yaml; see taskglitch.infra.config.
    """
    model_config = ConfigDict(from_attributes=True)

    user_name: str = Field(default="Guest", description="Name shown in the welcome line")
    theme: str = Field(default="auto", description="Theme: 'light', 'dark', or 'auto' (follows system)")
    language: str = Field(default="auto", description="UI language: 'en', 'de', or 'auto' (detect from system)")
    font_scale: float = Field(default=1.0, ge=0.5, le=2.0, description="Font scale factor (0.5 to 2.0)")
