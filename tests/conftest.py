"""Pytest configuration and fixtures for site-schedule-mcp tests."""

from datetime import date, timedelta

import pytest

from site_schedule_mcp import Dependency, DependencyType, ScheduleTask, _parse_tasks

BASE_DAY = date(2026, 3, 1)


@pytest.fixture
def day():
    """Day number → calendar date, counted from a fixed base date."""

    def _day(n: int) -> date:
        return BASE_DAY + timedelta(days=n)

    return _day


@pytest.fixture
def make_task(day):
    """Factory for tasks whose dates are given as day numbers."""

    def _make(task_id: str, start: int, end: int, *deps: Dependency, **extra) -> ScheduleTask:
        return ScheduleTask(
            id=task_id,
            name=extra.pop("name", task_id.upper()),
            start_date=day(start),
            end_date=day(end),
            dependencies=list(deps),
            **extra,
        )

    return _make


@pytest.fixture
def dep():
    """Factory for dependency edges: dep("a"), dep("a", "SS", 2)."""

    def _dep(task_id: str, kind: str = "FS", lag: int = 0) -> Dependency:
        return Dependency(task_id=task_id, type=DependencyType(kind), lag=lag)

    return _dep


@pytest.fixture
def project_dicts():
    """Earthworks schedule as the project stores it (camelCase keys)."""
    return [
        {
            "id": "st-001",
            "name": "Site Clearing",
            "startDate": "2025-12-17",
            "endDate": "2025-12-24",
            "progress": 100,
            "status": "Completed",
            "dependencies": [],
            "assignedTo": ["u5"],
            "isCritical": True,
        },
        {
            "id": "st-002",
            "name": "Excavation Work",
            "startDate": "2025-12-20",
            "endDate": "2026-01-10",
            "progress": 85,
            "status": "On Track",
            "dependencies": [{"taskId": "st-001", "type": "FS", "lag": 0}],
            "assignedTo": ["u3"],
            "isCritical": True,
        },
        {
            "id": "st-003",
            "name": "GSB Laying",
            "startDate": "2026-01-05",
            "endDate": "2026-01-25",
            "progress": 40,
            "status": "On Track",
            "dependencies": [{"taskId": "st-002", "type": "FS", "lag": 0}],
            "assignedTo": ["u3"],
            "isCritical": True,
            "boqItemId": "boq-114",
        },
    ]


@pytest.fixture
def project_tasks(project_dicts):
    """The earthworks schedule parsed into ScheduleTask models."""
    return _parse_tasks(project_dicts)
