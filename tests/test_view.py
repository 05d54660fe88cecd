"""Tests for the collaborator-facing schedule view."""

from datetime import date

import pytest
from pydantic import ValidationError

from site_schedule_mcp import (
    GestureMode,
    ScheduleView,
    TaskDraft,
    TaskStatus,
    UserRole,
    ZoomLevel,
    can_edit,
    resolve,
)


@pytest.fixture
def persisted():
    """Collects every task list handed to the persistence callback."""
    return []


@pytest.fixture
def view(project_tasks, persisted):
    """Editable view over the resolved earthworks schedule."""
    return ScheduleView(resolve(project_tasks), zoom=ZoomLevel.WEEK, on_update=persisted.append)


# ============================================================================
# Permissions
# ============================================================================


class TestPermissions:
    """Tests for the edit gate."""

    @pytest.mark.parametrize(
        ("role", "expected"),
        [
            (UserRole.ADMIN, True),
            (UserRole.PROJECT_MANAGER, True),
            (UserRole.SITE_ENGINEER, True),
            (UserRole.SUPERVISOR, False),
            (UserRole.LAB_TECHNICIAN, False),
        ],
    )
    def test_can_edit(self, role, expected):
        assert can_edit(role) is expected

    def test_read_only_view_ignores_edits(self, project_tasks, persisted):
        view = ScheduleView.for_role(project_tasks, UserRole.SUPERVISOR, on_update=persisted.append)
        assert view.press("st-001", GestureMode.MOVE, 0.0) is None
        assert view.drag(400.0) == project_tasks
        assert view.delete_task("st-001") is False
        draft = TaskDraft(name="Kerbing", start_date=date(2026, 2, 1), end_date=date(2026, 2, 9))
        assert view.save_task(draft) == project_tasks
        assert persisted == []

    def test_for_role_forwards_view_options(self, project_tasks, persisted):
        view = ScheduleView.for_role(
            project_tasks,
            UserRole.SITE_ENGINEER,
            zoom=ZoomLevel.DAY,
            on_update=persisted.append,
            today=date(2026, 1, 1),
        )
        assert view.editable is True
        assert view.timeline.day_width == 100
        assert view.delete_task("st-003") is True
        assert len(persisted) == 1

    def test_for_role_rejects_unknown_options(self, project_tasks):
        with pytest.raises(TypeError):
            ScheduleView.for_role(project_tasks, UserRole.ADMIN, editable=False)


# ============================================================================
# Gestures
# ============================================================================


class TestViewGestures:
    """Tests for press/drag/release through the view."""

    def test_every_frame_is_persisted(self, view, persisted):
        view.press("st-001", GestureMode.MOVE, 1000.0)
        view.drag(1040.0)
        view.drag(1080.0)
        view.release()
        assert len(persisted) == 2
        assert persisted[-1] == view.tasks
        st1, st2, st3 = view.tasks
        assert st1.start_date == date(2025, 12, 19)
        assert st2.start_date == date(2025, 12, 27)
        assert st3.start_date == date(2026, 1, 18)

    def test_second_press_is_ignored(self, view):
        first = view.press("st-001", GestureMode.MOVE, 0.0)
        assert view.press("st-002", GestureMode.MOVE, 0.0) is None
        assert view.session == first

    def test_release_clears_session(self, view, persisted):
        view.press("st-003", GestureMode.PROGRESS, 0.0)
        view.release()
        assert view.session is None
        view.drag(500.0)
        assert persisted == []

    def test_press_unknown_task(self, view):
        assert view.press("st-999", GestureMode.MOVE, 0.0) is None
        assert view.session is None

    def test_drag_without_press(self, view, persisted):
        before = view.tasks
        assert view.drag(200.0) == before
        assert persisted == []


# ============================================================================
# Form Edits
# ============================================================================


class TestViewEdits:
    """Tests for adding, editing and deleting activities."""

    def test_add_activity_is_resolved(self, view, persisted):
        draft = TaskDraft.model_validate(
            {
                "name": "Prime Coat",
                "startDate": "2026-01-01",
                "endDate": "2026-01-04",
                "dependencies": [{"taskId": "st-003", "type": "FS", "lag": 2}],
            }
        )
        tasks = view.save_task(draft)
        assert len(tasks) == 4
        added = tasks[-1]
        assert added.id.startswith("task-")
        assert added.status == TaskStatus.ON_TRACK
        assert added.start_date == date(2026, 2, 8)
        assert added.end_date == date(2026, 2, 11)
        assert persisted[-1] == tasks

    def test_edit_activity_pushes_successors(self, view):
        current = view.tasks[1]
        draft = TaskDraft(
            id=current.id,
            name=current.name,
            start_date=current.start_date,
            end_date=date(2026, 1, 20),
            progress=90,
            dependencies=current.dependencies,
        )
        st1, st2, st3 = view.save_task(draft)
        assert st2.end_date == date(2026, 1, 20)
        assert st2.progress == 90
        assert st2.model_extra == {"assignedTo": ["u3"]}
        assert st3.start_date == date(2026, 1, 21)

    def test_edit_unknown_activity_changes_nothing(self, view, persisted):
        before = view.tasks
        draft = TaskDraft(id="st-404", name="Ghost", start_date=date(2026, 1, 1), end_date=date(2026, 1, 2))
        assert view.save_task(draft) == before
        assert persisted == []

    def test_delete_activity(self, view, persisted):
        assert view.delete_task("st-002") is True
        assert [t.id for t in view.tasks] == ["st-001", "st-003"]
        assert view.tasks[1].dependencies[0].task_id == "st-002"
        assert len(persisted) == 1

    def test_delete_unknown_activity(self, view, persisted):
        assert view.delete_task("st-404") is False
        assert persisted == []


# ============================================================================
# Read Side
# ============================================================================


class TestViewReadSide:
    """Tests for timeline, filtering and summary."""

    def test_timeline_follows_zoom(self, view):
        assert view.timeline.day_width == 40
        view.set_zoom(ZoomLevel.MONTH)
        assert view.timeline.day_width == 10
        assert view.timeline.origin == date(2025, 12, 7)

    def test_filtered_is_case_insensitive_and_sorted(self, view):
        assert [t.id for t in view.filtered("LAYING")] == ["st-003"]
        assert [t.id for t in view.filtered()] == ["st-001", "st-002", "st-003"]

    def test_summary(self, view):
        summary = view.summary()
        assert (summary.total, summary.completed, summary.on_track, summary.delayed, summary.not_started) == (
            3,
            1,
            2,
            0,
            0,
        )

    def test_empty_view(self):
        view = ScheduleView([], today=date(2026, 4, 1))
        assert view.timeline.origin == date(2026, 4, 1)
        assert view.summary().total == 0


# ============================================================================
# Activity Form
# ============================================================================


class TestTaskDraft:
    """Tests for activity form validation."""

    def test_name_required(self):
        with pytest.raises(ValidationError):
            TaskDraft(start_date=date(2026, 1, 1), end_date=date(2026, 1, 2))

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            TaskDraft(name="   ", start_date=date(2026, 1, 1), end_date=date(2026, 1, 2))

    def test_dates_required(self):
        with pytest.raises(ValidationError):
            TaskDraft(name="Kerbing", start_date=date(2026, 1, 1))

    def test_defaults(self):
        values = TaskDraft.defaults(date(2026, 3, 10))
        assert values["start_date"] == date(2026, 3, 10)
        assert values["end_date"] == date(2026, 3, 17)
        assert values["progress"] == 0
        assert values["status"] == TaskStatus.ON_TRACK

    def test_defaults_become_valid_once_named(self):
        values = TaskDraft.defaults(date(2026, 3, 10)) | {"name": "Drainage"}
        assert TaskDraft(**values).name == "Drainage"
