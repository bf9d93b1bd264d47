"""Data models for employee matching."""

from collections.abc import Iterable
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator


class Availability(str, Enum):
    """Availability states of an employee."""
    AVAILABLE = "Available"
    BUSY = "Busy"
    ON_LEAVE = "On Leave"


def _clean_labels(value: Any) -> list[str]:
    """Keep the non-blank string labels of any collection, text unchanged."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return []
    return [item for item in value if isinstance(item, str) and item.strip()]


class EmployeeProfile(BaseModel):
    """An employee as seen by the matching engine (read-only)."""
    employee_id: int
    name: str = ""
    skills: list[str] = []
    availability: Optional[Availability] = None
    department: Optional[str] = None
    active: bool = True

    @field_validator("skills", mode="before")
    @classmethod
    def _normalize_skills(cls, value: Any) -> list[str]:
        return _clean_labels(value)

    @field_validator("availability", mode="before")
    @classmethod
    def _normalize_availability(cls, value: Any) -> Optional[str]:
        # Unknown values are treated like a missing field
        if isinstance(value, Availability):
            return value.value
        if not isinstance(value, str):
            return None
        valid = {a.value for a in Availability}
        return value if value in valid else None


class TaskDescriptor(BaseModel):
    """A task to staff: what it needs and which team owns it."""
    task_name: str = ""
    team: Optional[str] = None
    estimated_hours: float = 0  # informational, not used in scoring
    required_skills: list[str] = []

    @field_validator("required_skills", mode="before")
    @classmethod
    def _normalize_required_skills(cls, value: Any) -> list[str]:
        return _clean_labels(value)


class MatchResult(BaseModel):
    """Score of one employee against one task, with reasoning."""
    employee_id: int
    score: int = Field(ge=0, le=100)
    reason: str = ""
