"""Data models for workflow generation."""

from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict
from staffing.matching.models import MatchResult, TaskDescriptor


class RequestType(str, Enum):
    """Types of client requests with a workflow template."""
    WEB_DEV = "web_dev"
    APP_DEV = "app_dev"
    PROTOTYPE = "prototype"
    RESEARCH = "research"


class InvalidRequestTypeError(ValueError):
    """Raised when a request type has no workflow template."""

    def __init__(self, request_type):
        self.request_type = request_type
        self.choices = [t.value for t in RequestType]
        super().__init__(
            f"Invalid request type for workflow generation: {request_type!r} "
            f"(expected one of {self.choices})"
        )


class TaskTemplate(BaseModel):
    """A templated task - literal data, never computed."""
    model_config = ConfigDict(frozen=True)

    task_name: str
    team: str
    estimated_hours: float
    required_skills: tuple[str, ...]

    def to_descriptor(self) -> TaskDescriptor:
        return TaskDescriptor(
            task_name=self.task_name,
            team=self.team,
            estimated_hours=self.estimated_hours,
            required_skills=list(self.required_skills)
        )


class WorkflowTemplate(BaseModel):
    """Task breakdown for one request type."""
    model_config = ConfigDict(frozen=True)

    request_type: RequestType
    estimated_duration: float
    task_breakdown: tuple[TaskTemplate, ...]


class TaskBreakdownEntry(TaskDescriptor):
    """A workflow task with its suggested employees attached."""
    suggested_employees: List[MatchResult] = []


class WorkflowPlan(BaseModel):
    """Full task breakdown with suggestions, ready to persist on a request."""
    estimated_duration: float
    task_breakdown: List[TaskBreakdownEntry]
