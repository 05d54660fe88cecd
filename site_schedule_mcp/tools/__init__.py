"""MCP tool definitions for the site schedule server."""

# Import all tools to register them with the MCP server
from site_schedule_mcp.tools.core import (
    schedule_check,
    schedule_delete_task,
    schedule_resolve,
    schedule_save_task,
    schedule_summary,
)
from site_schedule_mcp.tools.timeline import (
    schedule_drag,
    schedule_hit_test,
    schedule_timeline,
)

__all__ = [
    # Schedule tools
    "schedule_resolve",
    "schedule_check",
    "schedule_save_task",
    "schedule_delete_task",
    "schedule_summary",
    # Timeline tools
    "schedule_timeline",
    "schedule_hit_test",
    "schedule_drag",
]
