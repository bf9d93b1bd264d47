"""
Scoring system for employee matching.

Calculates a 0-100 match score for one (employee, task) pair from:
- Skill match (0-50 points)
- Current workload (5-20 points)
- Availability (0-20 points)
- Department/team affinity (0-10 points)
"""

import math
from typing import Optional
from staffing.matching.models import Availability, EmployeeProfile, MatchResult, TaskDescriptor

SKILL_WEIGHT = 50
DEPARTMENT_BONUS = 10

AVAILABILITY_SCORES = {
    Availability.AVAILABLE: (20, "Currently available"),
    Availability.BUSY: (8, "Busy but can be assigned"),
    Availability.ON_LEAVE: (0, "On leave"),
}


def labels_overlap(a: str, b: str) -> bool:
    """Case-insensitive substring test in either direction ("JS" ~ "JavaScript")."""
    a_lower = a.lower()
    b_lower = b.lower()
    return a_lower in b_lower or b_lower in a_lower


def matching_skills(employee_skills: list[str], required_skills: list[str]) -> list[str]:
    """Return the required skills covered by at least one employee skill, in task order."""
    return [
        skill for skill in required_skills
        if any(labels_overlap(emp_skill, skill) for emp_skill in employee_skills)
    ]


def workload_points(pending_task_count: int) -> tuple[int, str]:
    """Tiered workload score: fewer pending tasks = more points."""
    if pending_task_count <= 0:
        return 20, "No pending tasks"
    if pending_task_count <= 2:
        plural = "s" if pending_task_count > 1 else ""
        return 15, f"{pending_task_count} pending task{plural}"
    if pending_task_count <= 5:
        return 10, f"{pending_task_count} pending tasks"
    return 5, f"{pending_task_count} pending tasks (heavy workload)"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _department_matches(department: Optional[str], team: Optional[str]) -> bool:
    if not team or not department:
        return False
    return labels_overlap(department, team)


def calculate_match_score(
    employee: EmployeeProfile,
    task: TaskDescriptor,
    pending_task_count: int
) -> MatchResult:
    """
    Calculate how well an employee fits a task.

    Reason fragments are appended in a fixed order (skills, workload,
    availability, department) and only when the stage qualifies.

    Args:
        employee: Employee to score
        task: Task descriptor with required skills and owning team
        pending_task_count: Tasks currently pending for this employee

    Returns:
        MatchResult with an integer score in [0, 100] and a reason string
    """
    score = 0.0
    reasons = []

    # Skills (0-50 points)
    required = task.required_skills
    if required:
        matched = matching_skills(employee.skills, required)
        score += (len(matched) / len(required)) * SKILL_WEIGHT
        if matched:
            reasons.append(
                f"Has {len(matched)}/{len(required)} required skills: {', '.join(matched)}"
            )

    # Workload (5-20 points)
    points, reason = workload_points(pending_task_count)
    score += points
    reasons.append(reason)

    # Availability (0-20 points)
    if employee.availability is not None:
        points, reason = AVAILABILITY_SCORES[employee.availability]
        score += points
        reasons.append(reason)

    # Department/team affinity (bonus)
    if _department_matches(employee.department, task.team):
        score += DEPARTMENT_BONUS
        reasons.append(f"From {employee.department} department")

    return MatchResult(
        employee_id=employee.employee_id,
        score=min(_round_half_up(score), 100),
        reason=", ".join(reasons)
    )
