"""Press-drag-release gestures on Gantt bars.

A gesture is an explicit session value owned by the host's event loop: the
host creates it on press, passes it back on every pointer move, and drops it
on release. Nothing here subscribes to input events.
"""

import logging
from collections.abc import Sequence
from datetime import date, timedelta

from pydantic import BaseModel, ConfigDict

from site_schedule_mcp.engine.resolver import MAX_ROUNDS, resolve_with_report
from site_schedule_mcp.engine.timeline import Timeline, round_half_up
from site_schedule_mcp.enums import GestureMode
from site_schedule_mcp.models.task import ScheduleTask

logger = logging.getLogger(__name__)


class GestureOrigin(BaseModel):
    """Task values captured when the gesture started."""

    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date
    progress: int


class GestureSession(BaseModel):
    """One in-progress gesture against a single task."""

    model_config = ConfigDict(frozen=True)

    task_id: str
    mode: GestureMode
    anchor_offset: float
    original: GestureOrigin
    timeline: Timeline


def _find(tasks: Sequence[ScheduleTask], task_id: str) -> ScheduleTask | None:
    return next((t for t in tasks if t.id == task_id), None)


def begin_gesture(
    tasks: Sequence[ScheduleTask],
    task_id: str,
    mode: GestureMode,
    anchor_offset: float,
    timeline: Timeline,
    *,
    editable: bool = True,
) -> GestureSession | None:
    """
    Start a gesture on a task bar.

    Args:
        tasks: Current schedule
        task_id: Task whose bar was pressed
        mode: Which handle was pressed
        anchor_offset: Pointer offset at press time, in timeline pixels
        timeline: Frame the pointer offsets of this gesture are measured in
        editable: Edit permission of the acting user

    Returns:
        A new GestureSession, or None when editing is not allowed or the
        task does not exist
    """
    if not editable:
        return None
    task = _find(tasks, task_id)
    if task is None:
        logger.info("Gesture ignored: task %s not in schedule", task_id)
        return None
    return GestureSession(
        task_id=task_id,
        mode=mode,
        anchor_offset=anchor_offset,
        original=GestureOrigin(start_date=task.start_date, end_date=task.end_date, progress=task.progress),
        timeline=timeline,
    )


def _apply(session: GestureSession, task: ScheduleTask, pointer_offset: float) -> ScheduleTask:
    """Tentative task for one pointer position; returns `task` itself when the frame is rejected."""
    original = session.original
    delta_days = round_half_up((pointer_offset - session.anchor_offset) / session.timeline.day_width)
    delta = timedelta(days=delta_days)

    if session.mode is GestureMode.MOVE:
        return task.model_copy(
            update={"start_date": original.start_date + delta, "end_date": original.end_date + delta}
        )

    if session.mode is GestureMode.RESIZE_START:
        start = original.start_date + delta
        if start >= task.end_date:
            logger.debug("Resize of %s rejected: start %s not before end %s", task.id, start, task.end_date)
            return task
        return task.model_copy(update={"start_date": start})

    if session.mode is GestureMode.RESIZE_END:
        end = original.end_date + delta
        if end <= task.start_date:
            logger.debug("Resize of %s rejected: end %s not after start %s", task.id, end, task.start_date)
            return task
        return task.model_copy(update={"end_date": end})

    bar = session.timeline.bar(task)
    progress = round_half_up((pointer_offset - bar.x) / bar.width * 100)
    return task.model_copy(update={"progress": min(100, max(0, progress))})


def update_gesture(
    session: GestureSession,
    tasks: Sequence[ScheduleTask],
    pointer_offset: float,
    max_rounds: int = MAX_ROUNDS,
) -> list[ScheduleTask]:
    """
    Apply one pointer move and re-resolve the whole schedule.

    Args:
        session: Active gesture
        tasks: Current schedule (the previous frame's output)
        pointer_offset: Pointer position in the session's timeline frame
        max_rounds: Resolver round cap for this frame

    Returns:
        Resolved task list for this frame, ready to persist
    """
    target = _find(tasks, session.task_id)
    if target is None:
        logger.info("Gesture frame ignored: task %s no longer in schedule", session.task_id)
        return resolve_with_report(tasks, max_rounds).tasks

    tentative = _apply(session, target, pointer_offset)
    logger.debug("Gesture %s on %s at offset %.1f", session.mode.value, session.task_id, pointer_offset)
    updated = [tentative if t is target else t for t in tasks]
    return resolve_with_report(updated, max_rounds).tasks


def end_gesture(session: GestureSession) -> None:
    """Finish a gesture; the last frame already persisted is the result."""
    logger.debug("Gesture %s on %s ended", session.mode.value, session.task_id)
