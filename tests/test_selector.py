"""Tests for staffing/matching/selector.py — suggestion ranking."""

import pytest

from staffing.matching.models import TaskDescriptor
from staffing.matching.selector import suggest_employees_for_task
from tests.conftest import FakeDirectory, make_employee

FRONTEND = TaskDescriptor(
    task_name="Frontend Development",
    team="development",
    estimated_hours=120,
    required_skills=["React", "JavaScript", "HTML", "CSS", "TypeScript"],
)


class TestSuggestEmployees:
    @pytest.mark.asyncio
    async def test_returns_top_three_descending(self, directory):
        results = await suggest_employees_for_task(FRONTEND, directory)

        assert len(results) == 3
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)
        assert results[0].employee_id == 1

    @pytest.mark.asyncio
    async def test_fewer_than_three_employees(self):
        directory = FakeDirectory([make_employee(1, ["React"])])

        results = await suggest_employees_for_task(FRONTEND, directory)

        assert [r.employee_id for r in results] == [1]

    @pytest.mark.asyncio
    async def test_no_employees(self):
        assert await suggest_employees_for_task(FRONTEND, FakeDirectory([])) == []

    @pytest.mark.asyncio
    async def test_ties_keep_directory_order(self):
        """Equal scores stay in fetch order even when later lookups finish first."""
        employees = [make_employee(i, ["React"]) for i in range(1, 6)]
        delays = {1: 0.05, 2: 0.04, 3: 0.03, 4: 0.02, 5: 0.01}
        directory = FakeDirectory(employees, delays=delays)

        results = await suggest_employees_for_task(FRONTEND, directory)

        assert [r.employee_id for r in results] == [1, 2, 3]
        assert len({r.score for r in results}) == 1

    @pytest.mark.asyncio
    async def test_workload_breaks_otherwise_equal_candidates(self):
        employees = [make_employee(1, ["React"]), make_employee(2, ["React"])]
        directory = FakeDirectory(employees, pending={1: 6, 2: 0})

        results = await suggest_employees_for_task(FRONTEND, directory)

        assert [r.employee_id for r in results] == [2, 1]
        assert results[0].score - results[1].score == 15
        assert "heavy workload" in results[1].reason

    @pytest.mark.asyncio
    async def test_inactive_employees_ignored(self):
        employees = [
            make_employee(1, ["React", "JavaScript", "HTML", "CSS", "TypeScript"], active=False),
            make_employee(2, []),
        ]
        directory = FakeDirectory(employees)

        results = await suggest_employees_for_task(FRONTEND, directory)

        assert [r.employee_id for r in results] == [2]
        assert directory.pending_calls == [2]

    @pytest.mark.asyncio
    async def test_pending_count_fetched_per_employee(self, directory, team):
        await suggest_employees_for_task(FRONTEND, directory)

        assert sorted(directory.pending_calls) == [e.employee_id for e in team]

    @pytest.mark.asyncio
    async def test_custom_limit(self, directory):
        results = await suggest_employees_for_task(FRONTEND, directory, limit=1)
        assert len(results) == 1

    @pytest.mark.asyncio
    async def test_directory_failure_propagates(self, team):
        directory = FakeDirectory(team, fail_with=ConnectionError("employee store unreachable"))

        with pytest.raises(ConnectionError, match="unreachable"):
            await suggest_employees_for_task(FRONTEND, directory)
        assert directory.pending_calls == []
