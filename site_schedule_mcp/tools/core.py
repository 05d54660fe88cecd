"""Core MCP tool definitions for schedule resolution and activity edits."""

import json
from collections.abc import Sequence

from mcp.types import ToolAnnotations

from site_schedule_mcp.config import settings
from site_schedule_mcp.engine.resolver import find_violations, resolve_with_report
from site_schedule_mcp.enums import ResponseFormat
from site_schedule_mcp.models.inputs import (
    CheckInput,
    DeleteTaskInput,
    ResolveInput,
    SaveTaskInput,
    SummaryInput,
)
from site_schedule_mcp.models.outputs import ResolveReport
from site_schedule_mcp.models.task import ScheduleTask
from site_schedule_mcp.server import mcp
from site_schedule_mcp.utils.formatters import (
    _format_changes,
    _format_report_markdown,
    _format_summary_markdown,
    _format_tasks_concise,
    _format_violation,
    _format_violations_markdown,
)
from site_schedule_mcp.utils.parsers import _changed_tasks, _dump_tasks
from site_schedule_mcp.view import apply_draft, filter_tasks, summarize


def _report_response(
    before: Sequence[ScheduleTask],
    report: ResolveReport,
    response_format: ResponseFormat,
    title: str,
) -> str:
    """Render a ResolveReport in the requested format."""
    changes = _format_changes(_changed_tasks(before, report.tasks))

    if response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "rounds": report.rounds,
                "settled": report.settled,
                "consistent": report.consistent,
                "changes": changes,
                "unsatisfied": [v.model_dump(mode="json") for v in report.unsatisfied],
                "tasks": _dump_tasks(report.tasks),
            },
            indent=2,
        )

    if response_format == ResponseFormat.CONCISE:
        status = "settled" if report.settled else "round cap"
        lines = [_format_tasks_concise(report.tasks, f"{title.lower()} ({status}, {len(changes)} moved)")]
        lines.extend(f"! {_format_violation(v)}" for v in report.unsatisfied)
        return "\n".join(lines)

    return _format_report_markdown(report, changes, title)


@mcp.tool(
    name="schedule_resolve",
    annotations=ToolAnnotations(
        title="Resolve Schedule",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def schedule_resolve(params: ResolveInput) -> str:
    """
    Push activity dates so every dependency (FS/SS/FF/SF with lag) is honored.

    USE THIS WHEN:
    - A project's task list was edited and must be made consistent again
    - Importing a schedule whose dates may contradict its dependencies

    DO NOT USE WHEN:
    - You only want to know what is violated → use schedule_check instead
    - You are editing one activity → use schedule_save_task (it resolves too)

    Dependencies only ever delay a successor. Cyclic dependency sets are not
    rejected: resolution stops after the round cap and the remaining
    violations are listed.

    Args:
        params: ResolveInput containing tasks, optional max_rounds and response_format

    Returns:
        Resolve outcome, moved activities, unsatisfied dependencies and the
        new task list (JSON output carries tasks ready to persist)
    """
    report = resolve_with_report(params.tasks, params.max_rounds or settings.max_rounds)
    return _report_response(params.tasks, report, params.response_format, "Resolved Schedule")


@mcp.tool(
    name="schedule_check",
    annotations=ToolAnnotations(
        title="Check Dependencies",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def schedule_check(params: CheckInput) -> str:
    """
    List dependencies the schedule violates, without changing any dates.

    Edges pointing at activities that are not in the list are ignored.

    Args:
        params: CheckInput containing tasks and response_format

    Returns:
        One entry per violated dependency with the required and actual dates
    """
    violations = find_violations(params.tasks)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {"count": len(violations), "unsatisfied": [v.model_dump(mode="json") for v in violations]},
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        if not violations:
            return "0 unsatisfied"
        return "\n".join([f"{len(violations)} unsatisfied", *(_format_violation(v) for v in violations)])

    return _format_violations_markdown(violations)


@mcp.tool(
    name="schedule_save_task",
    annotations=ToolAnnotations(
        title="Save Activity",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def schedule_save_task(params: SaveTaskInput) -> str:
    """
    Add a new activity or edit an existing one, then resolve the schedule.

    USE THIS WHEN:
    - Creating an activity (leave task.id empty; an id like "task-<ms>" is assigned)
    - Changing an activity's name, dates, progress, status or dependencies

    Args:
        params: SaveTaskInput containing the current tasks and the activity form values

    Returns:
        Resolved schedule including the saved activity, or an error if task.id is unknown
    """
    draft = params.task
    if draft.id is not None and not any(t.id == draft.id for t in params.tasks):
        return f"Error: Task '{draft.id}' not found in schedule"

    updated = apply_draft(params.tasks, draft)
    report = resolve_with_report(updated, settings.max_rounds)
    title = "Activity Updated" if draft.id else "Activity Added"
    return _report_response(params.tasks, report, params.response_format, title)


@mcp.tool(
    name="schedule_delete_task",
    annotations=ToolAnnotations(
        title="Delete Activity",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def schedule_delete_task(params: DeleteTaskInput) -> str:
    """
    Remove an activity and resolve the remaining schedule.

    Dependencies that pointed at the removed activity stay on their
    successors and simply stop constraining them.

    Args:
        params: DeleteTaskInput containing tasks and the task_id to delete

    Returns:
        Resolved remaining schedule, or an error if the id is unknown
    """
    if not any(t.id == params.task_id for t in params.tasks):
        return f"Error: Task '{params.task_id}' not found in schedule"

    remaining = [t for t in params.tasks if t.id != params.task_id]
    report = resolve_with_report(remaining, settings.max_rounds)
    return _report_response(remaining, report, params.response_format, f"Deleted {params.task_id}")


@mcp.tool(
    name="schedule_summary",
    annotations=ToolAnnotations(
        title="Schedule Overview",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def schedule_summary(params: SummaryInput) -> str:
    """
    Status counts and the activity list ordered by start date.

    Args:
        params: SummaryInput containing tasks, an optional name query and response_format

    Returns:
        Totals per status plus the (filtered) activities
    """
    summary = summarize(params.tasks)
    tasks = filter_tasks(params.tasks, params.query)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {"summary": summary.model_dump(), "count": len(tasks), "tasks": _dump_tasks(tasks)},
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        header = (
            f"total {summary.total} | completed {summary.completed} | delayed {summary.delayed} | "
            f"on track {summary.on_track} | not started {summary.not_started}"
        )
        return "\n".join([header, _format_tasks_concise(tasks, params.query)])

    return _format_summary_markdown(summary, tasks, params.query)
