"""
MCP Server for construction project schedules.

This server keeps a project's activities consistent with their declared
dependencies: it resolves FS/SS/FF/SF constraints with lag, maps dates to
Gantt timeline coordinates, and turns bar drags into schedule edits.
"""

# Re-export engine
from site_schedule_mcp.engine import (
    DAY_WIDTHS,
    MAX_ROUNDS,
    GestureSession,
    Timeline,
    begin_gesture,
    dependency_bound,
    end_gesture,
    find_violations,
    map_date_to_offset,
    map_offset_to_date,
    resolve,
    resolve_with_report,
    update_gesture,
)

# Re-export enums
from site_schedule_mcp.enums import (
    Boundary,
    DependencyType,
    GestureMode,
    ResponseFormat,
    TaskStatus,
    UserRole,
    ZoomLevel,
)

# Re-export models
from site_schedule_mcp.models import (
    BarGeometry,
    CheckInput,
    DeleteTaskInput,
    Dependency,
    DragInput,
    HitTestInput,
    ResolveInput,
    ResolveReport,
    SaveTaskInput,
    ScheduleSummary,
    ScheduleTask,
    SummaryInput,
    TaskDraft,
    TimelineInput,
    TimelineTick,
    UnsatisfiedDependency,
)

# Re-export MCP server instance
from site_schedule_mcp.server import mcp

# Re-export tools
from site_schedule_mcp.tools import (
    schedule_check,
    schedule_delete_task,
    schedule_drag,
    schedule_hit_test,
    schedule_resolve,
    schedule_save_task,
    schedule_summary,
    schedule_timeline,
)

# Re-export utilities (including private functions used by tests)
from site_schedule_mcp.utils import (
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    _parse_task,
    _parse_tasks,
)
from site_schedule_mcp.view import ScheduleView, can_edit

__all__ = [
    # Enums
    "ResponseFormat",
    "TaskStatus",
    "DependencyType",
    "Boundary",
    "ZoomLevel",
    "GestureMode",
    "UserRole",
    # Schedule models
    "Dependency",
    "ScheduleTask",
    "TaskDraft",
    # Input models
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
    # Engine
    "MAX_ROUNDS",
    "DAY_WIDTHS",
    "dependency_bound",
    "find_violations",
    "resolve",
    "resolve_with_report",
    "Timeline",
    "map_date_to_offset",
    "map_offset_to_date",
    "GestureSession",
    "begin_gesture",
    "update_gesture",
    "end_gesture",
    # View
    "ScheduleView",
    "can_edit",
    # Utility functions
    "_parse_task",
    "_parse_tasks",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
    # Tools
    "schedule_resolve",
    "schedule_check",
    "schedule_save_task",
    "schedule_delete_task",
    "schedule_summary",
    "schedule_timeline",
    "schedule_hit_test",
    "schedule_drag",
    # MCP server instance
    "mcp",
]
