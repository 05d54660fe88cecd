"""Schedule view: the collaborator-facing side of the schedule engine.

Holds one project's task list, the zoom selection and the edit gate, and
forwards gestures and form edits to the engine. Every change is resolved
and handed to `on_update`, which is where the surrounding application
persists the new task list.
"""

import logging
import time
from collections.abc import Callable, Iterable
from datetime import date

from site_schedule_mcp.engine.gestures import GestureSession, begin_gesture, end_gesture, update_gesture
from site_schedule_mcp.engine.resolver import resolve
from site_schedule_mcp.engine.timeline import Timeline
from site_schedule_mcp.enums import GestureMode, TaskStatus, UserRole, ZoomLevel
from site_schedule_mcp.models.inputs import TaskDraft
from site_schedule_mcp.models.outputs import ScheduleSummary
from site_schedule_mcp.models.task import ScheduleTask

logger = logging.getLogger(__name__)

EDIT_ROLES = frozenset({UserRole.ADMIN, UserRole.PROJECT_MANAGER, UserRole.SITE_ENGINEER})

UpdateCallback = Callable[[list[ScheduleTask]], None]


def can_edit(role: UserRole) -> bool:
    """Whether a project role may change the schedule."""
    return role in EDIT_ROLES


def new_task_id() -> str:
    return f"task-{int(time.time() * 1000)}"


def filter_tasks(tasks: Iterable[ScheduleTask], query: str | None = None) -> list[ScheduleTask]:
    """Tasks whose name contains `query` (case-insensitive), ordered by start date."""
    selected = list(tasks)
    if query:
        needle = query.lower()
        selected = [t for t in selected if needle in t.name.lower()]
    return sorted(selected, key=lambda t: t.start_date)


def summarize(tasks: Iterable[ScheduleTask]) -> ScheduleSummary:
    summary = ScheduleSummary()
    for task in tasks:
        summary.total += 1
        if task.status is TaskStatus.COMPLETED:
            summary.completed += 1
        elif task.status is TaskStatus.DELAYED:
            summary.delayed += 1
        elif task.status is TaskStatus.ON_TRACK:
            summary.on_track += 1
        else:
            summary.not_started += 1
    return summary


def apply_draft(tasks: list[ScheduleTask], draft: TaskDraft, *, task_id: str | None = None) -> list[ScheduleTask]:
    """
    Merge a form draft into a task list (without resolving).

    Args:
        tasks: Current schedule
        draft: Validated form values
        task_id: Id for a new task (generated when omitted)

    Returns:
        New task list; an unknown draft id leaves the list unchanged
    """
    fields = {name: getattr(draft, name) for name in TaskDraft.model_fields if name != "id"}
    if draft.id is not None:
        if not any(t.id == draft.id for t in tasks):
            logger.info("Edit ignored: task %s not in schedule", draft.id)
            return list(tasks)
        return [t.model_copy(update=fields) if t.id == draft.id else t for t in tasks]

    created = ScheduleTask.model_validate({"id": task_id or new_task_id(), **fields})
    return [*tasks, created]


class ScheduleView:
    """One project's schedule as seen by an interactive Gantt host."""

    def __init__(
        self,
        tasks: Iterable[ScheduleTask],
        *,
        zoom: ZoomLevel = ZoomLevel.WEEK,
        editable: bool = True,
        on_update: UpdateCallback | None = None,
        today: date | None = None,
    ):
        self._tasks = list(tasks)
        self.zoom = zoom
        self.editable = editable
        self._on_update = on_update
        self._today = today
        self._session: GestureSession | None = None

    @classmethod
    def for_role(
        cls,
        tasks: Iterable[ScheduleTask],
        role: UserRole,
        *,
        zoom: ZoomLevel = ZoomLevel.WEEK,
        on_update: UpdateCallback | None = None,
        today: date | None = None,
    ) -> "ScheduleView":
        return cls(tasks, zoom=zoom, editable=can_edit(role), on_update=on_update, today=today)

    @property
    def tasks(self) -> list[ScheduleTask]:
        return list(self._tasks)

    @property
    def timeline(self) -> Timeline:
        return Timeline.for_tasks(self._tasks, self.zoom, today=self._today)

    @property
    def session(self) -> GestureSession | None:
        return self._session

    def set_zoom(self, zoom: ZoomLevel) -> None:
        self.zoom = zoom

    def _commit(self, tasks: list[ScheduleTask]) -> list[ScheduleTask]:
        self._tasks = tasks
        if self._on_update is not None:
            self._on_update(list(tasks))
        return self.tasks

    # ------------------------------------------------------------------
    # Gestures
    # ------------------------------------------------------------------

    def press(self, task_id: str, mode: GestureMode, offset: float) -> GestureSession | None:
        """Start a gesture; ignored while another gesture is active."""
        if self._session is not None:
            logger.warning(
                "Press on %s ignored: gesture on %s still active", task_id, self._session.task_id
            )
            return None
        self._session = begin_gesture(self._tasks, task_id, mode, offset, self.timeline, editable=self.editable)
        return self._session

    def drag(self, offset: float) -> list[ScheduleTask]:
        """Feed one pointer move; persists and returns the resolved frame."""
        if self._session is None:
            return self.tasks
        return self._commit(update_gesture(self._session, self._tasks, offset))

    def release(self) -> None:
        if self._session is not None:
            end_gesture(self._session)
            self._session = None

    # ------------------------------------------------------------------
    # Form edits
    # ------------------------------------------------------------------

    def save_task(self, draft: TaskDraft) -> list[ScheduleTask]:
        """Add or edit an activity, then resolve and persist. Unknown draft ids change nothing."""
        if not self.editable:
            return self.tasks
        if draft.id is not None and not any(t.id == draft.id for t in self._tasks):
            logger.info("Edit ignored: task %s not in schedule", draft.id)
            return self.tasks
        return self._commit(resolve(apply_draft(self._tasks, draft)))

    def delete_task(self, task_id: str) -> bool:
        """Remove an activity, then resolve and persist. Returns False for unknown ids."""
        if not self.editable or not any(t.id == task_id for t in self._tasks):
            return False
        self._commit(resolve([t for t in self._tasks if t.id != task_id]))
        return True

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    def filtered(self, query: str | None = None) -> list[ScheduleTask]:
        return filter_tasks(self._tasks, query)

    def summary(self) -> ScheduleSummary:
        return summarize(self._tasks)
