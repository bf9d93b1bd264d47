"""Matching engine - scores and ranks employees for tasks."""

from staffing.matching.models import Availability, EmployeeProfile, TaskDescriptor, MatchResult
from staffing.matching.scoring import calculate_match_score
from staffing.matching.selector import suggest_employees_for_task

__all__ = [
    "Availability",
    "EmployeeProfile",
    "TaskDescriptor",
    "MatchResult",
    "calculate_match_score",
    "suggest_employees_for_task",
]
