"""Formatting utilities for schedule output."""

from collections.abc import Sequence

from site_schedule_mcp.engine.timeline import Timeline
from site_schedule_mcp.models.outputs import ResolveReport, ScheduleSummary, UnsatisfiedDependency
from site_schedule_mcp.models.task import Dependency, ScheduleTask


def _format_dependency(dep: Dependency) -> str:
    """Compact edge label, e.g. "FS st-001" or "SS st-004 +2d"."""
    if dep.lag:
        return f"{dep.type.value} {dep.task_id} {dep.lag:+d}d"
    return f"{dep.type.value} {dep.task_id}"


def _format_task_concise(task: ScheduleTask) -> str:
    """
    Format a single task in one line.

    Output: "st-002: Excavation Work 2025-12-20..2026-01-10 (85%, On Track, after FS st-001)"
    """
    name = task.name[:50] if task.name else "Untitled"
    meta = [f"{task.progress}%", task.status.value]
    if task.is_critical:
        meta.append("critical")
    if task.dependencies:
        meta.append("after " + ", ".join(_format_dependency(d) for d in task.dependencies))
    return f"{task.id}: {name} {task.start_date.isoformat()}..{task.end_date.isoformat()} ({', '.join(meta)})"


def _format_tasks_concise(tasks: Sequence[ScheduleTask], title: str | None = None) -> str:
    """
    Format a list of tasks one per line under a count header.

    Output:
    3 task(s) | resolved
    st-001: Site Clearing 2025-12-17..2025-12-24 (100%, Completed)
    """
    if not tasks:
        return "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{len(tasks)} task(s) | {title}"
    return "\n".join([header, *(_format_task_concise(t) for t in tasks)])


def _format_task_markdown(task: ScheduleTask) -> str:
    """Format a single task as markdown."""
    lines = []

    flag = " (critical)" if task.is_critical else ""
    lines.append(f"### [{task.id}] {task.name or 'Untitled'}{flag}")

    details = [
        f"**Dates**: {task.start_date.isoformat()} → {task.end_date.isoformat()}",
        f"**Duration**: {task.duration_days + 1} day(s)",
        f"**Progress**: {task.progress}%",
        f"**Status**: {task.status.value}",
    ]
    if task.boq_item_id:
        details.append(f"**BOQ item**: {task.boq_item_id}")
    lines.append(" | ".join(details))

    if task.dependencies:
        lines.append("**Depends on:**")
        for dep in task.dependencies:
            lines.append(f"  - {_format_dependency(dep)}")

    return "\n".join(lines)


def _format_tasks_markdown(tasks: Sequence[ScheduleTask], title: str = "Schedule") -> str:
    """Format a list of tasks as markdown."""
    if not tasks:
        return f"# {title}\n\nNo activities found."

    lines = [f"# {title}", f"*{len(tasks)} activit{'y' if len(tasks) == 1 else 'ies'}*", ""]
    for task in tasks:
        lines.append(_format_task_markdown(task))
        lines.append("")

    return "\n".join(lines)


def _format_violation(violation: UnsatisfiedDependency) -> str:
    """Output: "st-003 start 2026-01-05 < 2026-01-11 (FS st-002, 6 day(s) short)"."""
    lag = f" {violation.lag:+d}d" if violation.lag else ""
    return (
        f"{violation.task_id} {violation.boundary.value} {violation.actual.isoformat()} < "
        f"{violation.required.isoformat()} ({violation.type.value} {violation.predecessor_id}{lag}, "
        f"{violation.slip_days} day(s) short)"
    )


def _format_violations_markdown(violations: Sequence[UnsatisfiedDependency]) -> str:
    if not violations:
        return "# Dependency Check\n\nAll dependencies are satisfied."
    noun = "dependency" if len(violations) == 1 else "dependencies"
    lines = ["# Dependency Check", f"*{len(violations)} unsatisfied {noun}*", ""]
    lines.extend(f"- {_format_violation(v)}" for v in violations)
    return "\n".join(lines)


def _format_changes(pairs: Sequence[tuple[ScheduleTask, ScheduleTask]]) -> list[str]:
    """One line per task whose dates or progress moved."""
    lines = []
    for old, new in pairs:
        parts = []
        if old.start_date != new.start_date:
            parts.append(f"start {old.start_date.isoformat()} → {new.start_date.isoformat()}")
        if old.end_date != new.end_date:
            parts.append(f"end {old.end_date.isoformat()} → {new.end_date.isoformat()}")
        if old.progress != new.progress:
            parts.append(f"progress {old.progress}% → {new.progress}%")
        lines.append(f"{new.id}: {', '.join(parts)}")
    return lines


def _format_report_markdown(report: ResolveReport, changes: list[str], title: str = "Resolved Schedule") -> str:
    """Format a resolve report: outcome, moved activities, leftover violations, full schedule."""
    if report.settled:
        outcome = f"Settled after {report.rounds} round(s)."
    else:
        outcome = f"Stopped at the {report.rounds}-round cap without settling."

    lines = [f"# {title}", outcome, ""]

    if changes:
        lines.append("## Moved")
        lines.extend(f"- {c}" for c in changes)
        lines.append("")

    if report.unsatisfied:
        lines.append("## Unsatisfied dependencies")
        lines.extend(f"- {_format_violation(v)}" for v in report.unsatisfied)
        lines.append("")

    for task in report.tasks:
        lines.append(_format_task_markdown(task))
        lines.append("")

    return "\n".join(lines)


def _format_timeline_markdown(timeline: Timeline, tasks: Sequence[ScheduleTask], today_offset: float) -> str:
    """Coordinate frame plus one row per bar."""
    lines = [
        "# Timeline",
        f"**Origin**: {timeline.origin.isoformat()} | **End**: {timeline.end.isoformat()} | "
        f"**Span**: {timeline.span_days} day(s) | **Day width**: {timeline.day_width}px | "
        f"**Canvas**: {timeline.width:g}px | **Today**: {today_offset:g}px",
        "",
    ]
    if not tasks:
        lines.append("No activities to place.")
        return "\n".join(lines)

    lines.append("| Task | x | width | progress |")
    lines.append("|---|---|---|---|")
    for task in tasks:
        bar = timeline.bar(task)
        lines.append(f"| {task.id} | {bar.x:g} | {bar.width:g} | {bar.progress_width:g} |")
    return "\n".join(lines)


def _format_summary_markdown(summary: ScheduleSummary, tasks: Sequence[ScheduleTask], query: str | None) -> str:
    lines = [
        "# Schedule Overview",
        f"**Total**: {summary.total} | **Completed**: {summary.completed} | **Delayed**: {summary.delayed} | "
        f"**On Track**: {summary.on_track} | **Not Started**: {summary.not_started}",
        "",
    ]
    title = f"Activities matching '{query}'" if query else "Activities"
    lines.append(_format_tasks_markdown(tasks, title).replace("# ", "## ", 1))
    return "\n".join(lines)
