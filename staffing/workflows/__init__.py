"""Workflow generation - template task breakdowns with employee suggestions."""

from staffing.workflows.generator import generate_workflow_with_suggestions, refresh_suggestions
from staffing.workflows.models import (
    RequestType,
    InvalidRequestTypeError,
    TaskBreakdownEntry,
    WorkflowPlan,
)
from staffing.workflows.templates import TEMPLATES, get_template

__all__ = [
    "generate_workflow_with_suggestions",
    "refresh_suggestions",
    "RequestType",
    "InvalidRequestTypeError",
    "TaskBreakdownEntry",
    "WorkflowPlan",
    "TEMPLATES",
    "get_template",
]
