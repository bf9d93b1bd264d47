"""
Database initialization script.

Create the tables, optionally loading development data:
    python -m staffing.db.init_db [path/to/seed.json]

The seed file holds {"employees": [...], "tasks": [...]} with keys named
after the table columns (tasks may use the legacy "assignedTo" key).
"""

import json
import logging
import sys
from pathlib import Path
from sqlalchemy.orm import Session
from staffing.config import setup_logging
from staffing.db.database import init_db, get_session
from staffing.db.models import Employee, Task

logger = logging.getLogger(__name__)

_EMPLOYEE_FIELDS = ("employee_id", "name", "email", "role", "department", "skills", "availability", "active")


def _employee_from_dict(data: dict) -> Employee:
    return Employee(**{k: data[k] for k in _EMPLOYEE_FIELDS if k in data})


def _task_from_dict(data: dict) -> Task:
    return Task(
        task_id=data["task_id"],
        task_name=data["task_name"],
        status=data.get("status", "Pending"),
        assigned_to=data.get("assigned_to") or [],
        assigned_to_legacy=data.get("assignedTo") or []
    )


def seed_from_json(path: Path, db: Session) -> tuple[int, int]:
    """Insert employees and tasks from a JSON file. Returns (employees, tasks) added."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    employees = [_employee_from_dict(e) for e in data.get("employees", [])]
    tasks = [_task_from_dict(t) for t in data.get("tasks", [])]

    db.add_all(employees)
    db.add_all(tasks)
    db.commit()
    logger.info(f"Seeded {len(employees)} employees and {len(tasks)} tasks from {path}")
    return len(employees), len(tasks)


if __name__ == "__main__":
    setup_logging()
    print("Initializing database...")
    init_db()
    if len(sys.argv) > 1:
        session = get_session()
        try:
            seed_from_json(Path(sys.argv[1]), session)
        finally:
            session.close()
    print("Database initialization complete!")
