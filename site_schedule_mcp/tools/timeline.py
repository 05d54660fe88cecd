"""MCP tools for the Gantt timeline: coordinate frames, hit testing and drag gestures."""

import json

from mcp.types import ToolAnnotations

from site_schedule_mcp.config import settings
from site_schedule_mcp.engine.gestures import begin_gesture, end_gesture, update_gesture
from site_schedule_mcp.engine.resolver import find_violations
from site_schedule_mcp.engine.timeline import Timeline
from site_schedule_mcp.enums import ResponseFormat
from site_schedule_mcp.models.inputs import DragInput, HitTestInput, TimelineInput
from site_schedule_mcp.server import mcp
from site_schedule_mcp.utils.formatters import (
    _format_changes,
    _format_tasks_concise,
    _format_tasks_markdown,
    _format_timeline_markdown,
)
from site_schedule_mcp.utils.parsers import _changed_tasks, _dump_tasks


@mcp.tool(
    name="schedule_timeline",
    annotations=ToolAnnotations(
        title="Timeline Coordinates",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def schedule_timeline(params: TimelineInput) -> str:
    """
    Derive the Gantt coordinate frame for a task list at a zoom level.

    The frame starts 10 days before the earliest activity and ends 30 days
    after the latest one. Zoom presets: month = 10px/day, week = 40px/day,
    day = 100px/day. Offsets are pixels from the frame origin.

    Args:
        params: TimelineInput containing tasks, zoom, optional today and include_ticks

    Returns:
        Origin, span, canvas width, the today marker and one bar per activity
        (plus per-day header ticks when requested)
    """
    timeline = Timeline.for_tasks(params.tasks, params.zoom or settings.default_zoom, today=params.today)
    today_offset = timeline.today_offset(params.today)

    if params.response_format == ResponseFormat.JSON:
        data = {
            "origin": timeline.origin.isoformat(),
            "end": timeline.end.isoformat(),
            "day_width": timeline.day_width,
            "span_days": timeline.span_days,
            "width": timeline.width,
            "today_offset": today_offset,
            "bars": [timeline.bar(t).model_dump() for t in params.tasks],
        }
        if params.include_ticks:
            data["ticks"] = [tick.model_dump(mode="json") for tick in timeline.ticks()]
        return json.dumps(data, indent=2)

    if params.response_format == ResponseFormat.CONCISE:
        lines = [f"origin {timeline.origin.isoformat()} | {timeline.day_width}px/day | {timeline.span_days} days"]
        for task in params.tasks:
            bar = timeline.bar(task)
            lines.append(f"{task.id}: x={bar.x:g} w={bar.width:g}")
        return "\n".join(lines)

    text = _format_timeline_markdown(timeline, params.tasks, today_offset)
    if params.include_ticks:
        labels = [
            f"- {tick.offset:g}px {tick.day.isoformat()}" + (f" {tick.month_label}" if tick.month_label else "")
            for tick in timeline.ticks()
        ]
        text += "\n\n## Ticks\n" + "\n".join(labels)
    return text


@mcp.tool(
    name="schedule_hit_test",
    annotations=ToolAnnotations(
        title="Bar Hit Test",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def schedule_hit_test(params: HitTestInput) -> str:
    """
    Tell which gesture a press at a pointer offset would start on a task bar.

    The 10px at each end of a bar resize it, the rest moves it. The progress
    handle is a separate control and is not reported here.

    Args:
        params: HitTestInput containing tasks, task_id, offset and zoom

    Returns:
        "move", "resize_start", "resize_end", or "none"
    """
    task = next((t for t in params.tasks if t.id == params.task_id), None)
    if task is None:
        return f"Error: Task '{params.task_id}' not found in schedule"

    timeline = Timeline.for_tasks(params.tasks, params.zoom or settings.default_zoom)
    mode = timeline.hit_region(task, params.offset)
    return mode.value if mode else "none"


@mcp.tool(
    name="schedule_drag",
    annotations=ToolAnnotations(
        title="Drag Activity",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def schedule_drag(params: DragInput) -> str:
    """
    Replay one press-drag-release gesture on an activity bar.

    Every pointer offset is applied in order exactly like a live drag: the
    activity is moved, resized or its progress set, and the whole schedule is
    re-resolved on each frame. Resizes that would cross the opposite edge are
    ignored for that frame.

    USE THIS WHEN:
    - Bridging a UI drag into schedule changes
    - Previewing what dragging an activity by N pixels does to its dependents

    Args:
        params: DragInput containing tasks, task_id, mode, anchor_offset,
            pointer_offsets, zoom and editable

    Returns:
        The schedule after the last frame (JSON output carries tasks ready to persist)
    """
    if not params.editable:
        return "Error: Schedule is read-only for this user"

    timeline = Timeline.for_tasks(params.tasks, params.zoom or settings.default_zoom)

    session = begin_gesture(params.tasks, params.task_id, params.mode, params.anchor_offset, timeline)
    if session is None:
        return f"Error: Task '{params.task_id}' not found in schedule"

    tasks = list(params.tasks)
    for offset in params.pointer_offsets:
        tasks = update_gesture(session, tasks, offset, settings.max_rounds)
    end_gesture(session)

    changes = _format_changes(_changed_tasks(params.tasks, tasks))
    violations = find_violations(tasks)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "frames": len(params.pointer_offsets),
                "changes": changes,
                "unsatisfied": [v.model_dump(mode="json") for v in violations],
                "tasks": _dump_tasks(tasks),
            },
            indent=2,
        )

    title = f"{params.mode.value} {params.task_id}"
    if params.response_format == ResponseFormat.CONCISE:
        return _format_tasks_concise(tasks, f"{title} ({len(changes)} moved)")

    lines = [f"# Drag: {title}", f"*{len(params.pointer_offsets)} frame(s)*", ""]
    if changes:
        lines.append("## Moved")
        lines.extend(f"- {c}" for c in changes)
    else:
        lines.append("No activity moved.")
    lines.append("")
    lines.append(_format_tasks_markdown(tasks, "Schedule"))
    return "\n".join(lines)
