"""Parser helpers for schedule data exchanged with the host application."""

from collections.abc import Sequence
from typing import Any

from site_schedule_mcp.models.task import ScheduleTask


def _parse_task(task_dict: dict[str, Any]) -> ScheduleTask:
    """
    Parse a task dictionary into a ScheduleTask.

    Args:
        task_dict: Task as stored by the project (camelCase or snake_case keys)

    Returns:
        ScheduleTask instance with validated data
    """
    return ScheduleTask.model_validate(task_dict)


def _parse_tasks(tasks: list[dict[str, Any]]) -> list[ScheduleTask]:
    """Parse a project's task list."""
    return [ScheduleTask.model_validate(t) for t in tasks]


def _dump_tasks(tasks: Sequence[ScheduleTask]) -> list[dict[str, Any]]:
    """Serialize tasks with the camelCase keys the project stores."""
    return [t.to_wire() for t in tasks]


def _changed_tasks(
    before: Sequence[ScheduleTask],
    after: Sequence[ScheduleTask],
) -> list[tuple[ScheduleTask, ScheduleTask]]:
    """
    Pair up tasks whose dates or progress differ between two versions of a schedule.

    Tasks are matched by id; tasks present on only one side are skipped.

    Returns:
        List of (old, new) pairs in the order of `after`
    """
    old_by_id = {t.id: t for t in before}
    pairs: list[tuple[ScheduleTask, ScheduleTask]] = []
    for new in after:
        old = old_by_id.get(new.id)
        if old is None:
            continue
        if (old.start_date, old.end_date, old.progress) != (new.start_date, new.end_date, new.progress):
            pairs.append((old, new))
    return pairs
