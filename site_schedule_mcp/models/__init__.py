"""Pydantic models for the site schedule MCP server."""

from site_schedule_mcp.models.inputs import (
    CheckInput,
    DeleteTaskInput,
    DragInput,
    HitTestInput,
    ResolveInput,
    SaveTaskInput,
    SummaryInput,
    TaskDraft,
    TimelineInput,
)
from site_schedule_mcp.models.outputs import (
    BarGeometry,
    ResolveReport,
    ScheduleSummary,
    TimelineTick,
    UnsatisfiedDependency,
)
from site_schedule_mcp.models.task import Dependency, ScheduleTask

__all__ = [
    # Schedule models
    "Dependency",
    "ScheduleTask",
    "TaskDraft",
    # Tool input models
    "ResolveInput",
    "CheckInput",
    "TimelineInput",
    "HitTestInput",
    "DragInput",
    "SaveTaskInput",
    "DeleteTaskInput",
    "SummaryInput",
    # Output models
    "ResolveReport",
    "UnsatisfiedDependency",
    "TimelineTick",
    "BarGeometry",
    "ScheduleSummary",
]
