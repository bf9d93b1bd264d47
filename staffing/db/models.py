"""
Database models for employees and tasks.

Tasks record assignees in two list columns: `assigned_to` and the legacy
`assignedTo`. Readers must check both.
"""

from sqlalchemy import Column, Integer, String, Boolean, DateTime, JSON
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class Employee(Base):
    """An employee record."""
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True)
    employee_id = Column(Integer, unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=True)
    role = Column(String(255), nullable=True)
    department = Column(String(255), nullable=True)
    skills = Column(JSON, nullable=True, default=list)  # list of skill labels
    availability = Column(String(50), nullable=False, default="Available")  # 'Available', 'Busy', 'On Leave'
    active = Column(Boolean, nullable=False, default=True, index=True)


class Task(Base):
    """A task record with its assignees."""
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    task_id = Column(Integer, unique=True, nullable=False, index=True)
    task_name = Column(String(500), nullable=False)
    status = Column(String(50), nullable=False, default="Pending", index=True)
    assigned_to = Column(JSON, nullable=True, default=list)  # employee_id values
    assigned_to_legacy = Column("assignedTo", JSON, nullable=True, default=list)
    created_at = Column(DateTime, default=func.now(), nullable=False)
