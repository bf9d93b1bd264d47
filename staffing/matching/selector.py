"""
Employee suggestion ranking.

Scores every active employee against a task and keeps the best matches.
The directory passed in must provide two coroutines:

- get_active_employees() -> list[EmployeeProfile]
- count_pending_tasks(employee_id) -> int
"""

import asyncio
import logging
from typing import List
from staffing.config import MAX_SUGGESTIONS
from staffing.matching.models import EmployeeProfile, MatchResult, TaskDescriptor
from staffing.matching.scoring import calculate_match_score

logger = logging.getLogger(__name__)


async def score_employee(
    employee: EmployeeProfile,
    task: TaskDescriptor,
    directory
) -> MatchResult:
    """Fetch the employee's live workload and score them against the task."""
    pending = await directory.count_pending_tasks(employee.employee_id)
    match = calculate_match_score(employee, task, pending)
    logger.debug(f"Scored employee {employee.employee_id} for '{task.task_name}': {match.score}")
    return match


async def suggest_employees_for_task(
    task: TaskDescriptor,
    directory,
    limit: int = MAX_SUGGESTIONS
) -> List[MatchResult]:
    """
    Suggest the best employees for a task.

    All employees are scored concurrently; the final order comes from a
    stable sort on score, so equal scores keep the directory's order.
    Directory errors propagate to the caller.

    Args:
        task: Task to staff
        directory: Source of active employees and pending-task counts
        limit: Maximum number of suggestions to return

    Returns:
        Up to `limit` MatchResults, highest score first
    """
    employees = await directory.get_active_employees()
    employees = [e for e in employees if e.active]

    if not employees:
        logger.warning(f"No active employees to suggest for '{task.task_name}'")
        return []

    matches = await asyncio.gather(
        *(score_employee(employee, task, directory) for employee in employees)
    )

    ranked = sorted(matches, key=lambda m: m.score, reverse=True)[:limit]
    logger.info(
        f"Suggested {len(ranked)} of {len(employees)} employees for '{task.task_name}'"
    )
    return ranked
