"""
Employee directory backed by the database.

Supplies the matching engine with active employees and their pending-task
counts. Queries are synchronous and run in worker threads, each with its
own session, so concurrent lookups never share a Session and never block
the event loop.

Pending counts are read once per directory (one query over unfinished
tasks) and shared by every lookup made through it; create a directory per
request to see current workload.
"""

import asyncio
from collections import Counter
from typing import Dict, List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker
from staffing.config import PENDING_STATUSES
from staffing.db.models import Employee, Task
from staffing.matching.models import EmployeeProfile


def to_profile(employee: Employee) -> EmployeeProfile:
    """Convert a database row into the matching engine's view."""
    return EmployeeProfile(
        employee_id=employee.employee_id,
        name=employee.name or "",
        skills=employee.skills,
        availability=employee.availability,
        department=employee.department,
        active=bool(employee.active)
    )


def load_active_employees(db: Session) -> List[EmployeeProfile]:
    """Active employees ordered by employee_id."""
    rows = db.query(Employee).filter(
        Employee.active.is_(True)
    ).order_by(Employee.employee_id).all()
    return [to_profile(row) for row in rows]


def load_pending_counts(db: Session) -> Dict[int, int]:
    """
    Count unfinished tasks per employee in a single query.

    An employee listed under `assigned_to`, the legacy `assignedTo`, or both
    counts once per task.
    """
    rows = db.execute(
        select(Task.assigned_to, Task.assigned_to_legacy).where(
            Task.status.in_(PENDING_STATUSES)
        )
    ).all()

    counts = Counter()
    for assigned_to, legacy in rows:
        counts.update(set(assigned_to or []) | set(legacy or []))
    return dict(counts)


class EmployeeDirectory:
    """Read-only async view over employees and tasks."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory
        self._pending_counts: Optional[asyncio.Task] = None

    def _run(self, query):
        with self.session_factory() as db:
            return query(db)

    async def get_active_employees(self) -> List[EmployeeProfile]:
        return await asyncio.to_thread(self._run, load_active_employees)

    async def count_pending_tasks(self, employee_id: int) -> int:
        """Pending tasks for one employee; the first call loads counts for everyone."""
        if self._pending_counts is None:
            self._pending_counts = asyncio.ensure_future(
                asyncio.to_thread(self._run, load_pending_counts)
            )
        counts = await self._pending_counts
        return counts.get(employee_id, 0)
