"""Utility functions for the site schedule MCP server."""

from site_schedule_mcp.utils.formatters import (
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)
from site_schedule_mcp.utils.parsers import _changed_tasks, _dump_tasks, _parse_task, _parse_tasks

__all__ = [
    "_parse_task",
    "_parse_tasks",
    "_dump_tasks",
    "_changed_tasks",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
]
