"""Enums for the site schedule MCP server."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per task
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable, camelCase keys ready to persist


class TaskStatus(str, Enum):
    """Schedule activity status. Informational, never read by the resolver."""

    NOT_STARTED = "Not Started"
    ON_TRACK = "On Track"
    DELAYED = "Delayed"
    COMPLETED = "Completed"


class DependencyType(str, Enum):
    """Precedence relation between a predecessor and its successor."""

    FINISH_TO_START = "FS"
    START_TO_START = "SS"
    FINISH_TO_FINISH = "FF"
    START_TO_FINISH = "SF"


class Boundary(str, Enum):
    """One end of a task's date range."""

    START = "start"
    END = "end"


class ZoomLevel(str, Enum):
    """Gantt zoom presets."""

    MONTH = "month"
    WEEK = "week"
    DAY = "day"


class GestureMode(str, Enum):
    """What a press-drag-release on a task bar edits."""

    MOVE = "move"
    RESIZE_START = "resize_start"
    RESIZE_END = "resize_end"
    PROGRESS = "progress"


class UserRole(str, Enum):
    """Project roles known to the schedule view."""

    ADMIN = "Admin"
    PROJECT_MANAGER = "Project Manager"
    SITE_ENGINEER = "Site Engineer"
    SUPERVISOR = "Supervisor"
    LAB_TECHNICIAN = "Lab Technician"
