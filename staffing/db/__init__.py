"""Database package for employee and task records."""

from staffing.db.database import SessionLocal, init_db, get_session
from staffing.db.directory import EmployeeDirectory
from staffing.db.models import Base, Employee, Task

__all__ = [
    "SessionLocal",
    "init_db",
    "get_session",
    "EmployeeDirectory",
    "Base",
    "Employee",
    "Task",
]
