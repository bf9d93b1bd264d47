"""Shared test fixtures."""

import asyncio

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from staffing.db.models import Base
from staffing.matching.models import EmployeeProfile


class FakeDirectory:
    """In-memory employee directory with optional per-employee latency."""

    def __init__(self, employees, pending=None, delays=None, fail_with=None):
        self.employees = list(employees)
        self.pending = pending or {}
        self.delays = delays or {}
        self.fail_with = fail_with
        self.employee_calls = 0
        self.pending_calls = []

    async def get_active_employees(self):
        self.employee_calls += 1
        await asyncio.sleep(0)
        if self.fail_with is not None:
            raise self.fail_with
        # Returned as-is so tests can check the ranker's own active filter
        return list(self.employees)

    async def count_pending_tasks(self, employee_id):
        self.pending_calls.append(employee_id)
        await asyncio.sleep(self.delays.get(employee_id, 0))
        return self.pending.get(employee_id, 0)


def make_employee(employee_id, skills=None, availability="Available", department="Development", active=True):
    return EmployeeProfile(
        employee_id=employee_id,
        name=f"Employee {employee_id}",
        skills=skills if skills is not None else [],
        availability=availability,
        department=department,
        active=active,
    )


@pytest.fixture
def team():
    """A small mixed team."""
    return [
        make_employee(1, ["React", "JavaScript", "CSS"], "Available", "Development"),
        make_employee(2, ["Figma", "UI/UX", "Wireframing"], "Busy", "Design"),
        make_employee(3, ["Research", "Documentation", "Business Analysis"], "Available", "Research"),
        make_employee(4, ["Node.js", "Express", "MongoDB"], "On Leave", "Development"),
        make_employee(5, ["Testing", "QA", "Jest"], "Available", "Testing"),
    ]


@pytest.fixture
def directory(team):
    return FakeDirectory(team)


@pytest.fixture
def sql_engine():
    """Fresh in-memory SQLite database shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sql_engine):
    return sessionmaker(bind=sql_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()
