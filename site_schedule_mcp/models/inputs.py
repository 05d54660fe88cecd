"""Input models for the site schedule MCP tools."""

from datetime import date, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from site_schedule_mcp.enums import GestureMode, ResponseFormat, TaskStatus, ZoomLevel
from site_schedule_mcp.models.task import Dependency, ScheduleTask

# ============================================================================
# Activity Form Model
# ============================================================================


class TaskDraft(BaseModel):
    """An activity as submitted by the add/edit form.

    Without an id the draft creates a new task; with one it replaces the
    editable fields of the existing task.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

    id: str | None = Field(default=None, description="Existing task id, or None to add a new activity")
    name: str = Field(..., description="Activity name (required)", min_length=1, max_length=200)
    start_date: date = Field(..., description="First day of the activity (YYYY-MM-DD)")
    end_date: date = Field(..., description="Last day of the activity, inclusive (YYYY-MM-DD)")
    progress: int = Field(default=0, description="Percent complete", ge=0, le=100)
    status: TaskStatus = Field(default=TaskStatus.ON_TRACK, description="Informational status")
    is_critical: bool = Field(default=False, description="Highlight the bar as critical")
    dependencies: list[Dependency] = Field(default_factory=list, description="Predecessor edges")
    boq_item_id: str | None = Field(default=None, description="Linked bill-of-quantities item")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Activity name cannot be empty")
        return v.strip()

    @classmethod
    def defaults(cls, today: date | None = None) -> dict[str, Any]:
        """Form values for a brand new activity: a one-week task starting today."""
        start = today or date.today()
        return {
            "name": "",
            "start_date": start,
            "end_date": start + timedelta(days=7),
            "progress": 0,
            "status": TaskStatus.ON_TRACK,
            "is_critical": False,
            "dependencies": [],
            "boq_item_id": None,
        }


# ============================================================================
# Tool Input Models
# ============================================================================


class ResolveInput(BaseModel):
    """Input model for resolving a schedule."""

    model_config = ConfigDict(str_strip_whitespace=True)

    tasks: list[ScheduleTask] = Field(..., description="Full task list of the project")
    max_rounds: int | None = Field(
        default=None, description="Round cap (defaults to the server setting)", ge=1, le=100
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise', or 'json' (tasks ready to persist)",
    )


class CheckInput(BaseModel):
    """Input model for checking dependencies without changing dates."""

    model_config = ConfigDict(str_strip_whitespace=True)

    tasks: list[ScheduleTask] = Field(..., description="Full task list of the project")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown', 'concise', or 'json'"
    )


class TimelineInput(BaseModel):
    """Input model for deriving the Gantt coordinate frame."""

    model_config = ConfigDict(str_strip_whitespace=True)

    tasks: list[ScheduleTask] = Field(default_factory=list, description="Tasks to place on the timeline")
    zoom: ZoomLevel | None = Field(default=None, description="Zoom preset: 'month', 'week', or 'day'")
    today: date | None = Field(default=None, description="Reference date for empty schedules and the today marker")
    include_ticks: bool = Field(default=False, description="Include one header tick per day")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown', 'concise', or 'json'"
    )


class HitTestInput(BaseModel):
    """Input model for resolving which handle a press lands on."""

    model_config = ConfigDict(str_strip_whitespace=True)

    tasks: list[ScheduleTask] = Field(..., description="Tasks as currently rendered")
    task_id: str = Field(..., description="Task whose row was pressed", min_length=1)
    offset: float = Field(..., description="Pointer offset in timeline pixels")
    zoom: ZoomLevel | None = Field(default=None, description="Zoom preset the chart is rendered at")


class DragInput(BaseModel):
    """Input model for replaying one press-drag-release gesture."""

    model_config = ConfigDict(str_strip_whitespace=True)

    tasks: list[ScheduleTask] = Field(..., description="Full task list before the gesture")
    task_id: str = Field(..., description="Task being dragged", min_length=1)
    mode: GestureMode = Field(..., description="'move', 'resize_start', 'resize_end', or 'progress'")
    anchor_offset: float = Field(..., description="Pointer offset at press time, in timeline pixels")
    pointer_offsets: list[float] = Field(
        ..., description="Pointer offsets of each move event, in order", min_length=1, max_length=500
    )
    zoom: ZoomLevel | None = Field(default=None, description="Zoom preset the chart is rendered at")
    editable: bool = Field(default=True, description="Whether the acting user may edit the schedule")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown', 'concise', or 'json'"
    )


class SaveTaskInput(BaseModel):
    """Input model for adding or editing an activity."""

    model_config = ConfigDict(str_strip_whitespace=True)

    tasks: list[ScheduleTask] = Field(default_factory=list, description="Full task list of the project")
    task: TaskDraft = Field(..., description="Activity form values")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown', 'concise', or 'json'"
    )


class DeleteTaskInput(BaseModel):
    """Input model for deleting an activity."""

    model_config = ConfigDict(str_strip_whitespace=True)

    tasks: list[ScheduleTask] = Field(..., description="Full task list of the project")
    task_id: str = Field(..., description="Task to delete", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown', 'concise', or 'json'"
    )


class SummaryInput(BaseModel):
    """Input model for the schedule overview."""

    model_config = ConfigDict(str_strip_whitespace=True)

    tasks: list[ScheduleTask] = Field(default_factory=list, description="Full task list of the project")
    query: str | None = Field(default=None, description="Case-insensitive filter on activity names")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown', 'concise', or 'json'"
    )

    @field_validator("query")
    @classmethod
    def drop_blank_query(cls, v: str | None) -> str | None:
        return v or None
