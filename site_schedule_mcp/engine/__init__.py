"""Schedule engine: dependency resolver, timeline mapper and gesture controller."""

from site_schedule_mcp.engine.gestures import (
    GestureOrigin,
    GestureSession,
    begin_gesture,
    end_gesture,
    update_gesture,
)
from site_schedule_mcp.engine.resolver import (
    CONSTRAINT_RULES,
    MAX_ROUNDS,
    ConstraintRule,
    dependency_bound,
    find_violations,
    resolve,
    resolve_with_report,
)
from site_schedule_mcp.engine.timeline import (
    DAY_WIDTHS,
    Timeline,
    map_date_to_offset,
    map_offset_to_date,
    round_half_up,
)

__all__ = [
    # Resolver
    "MAX_ROUNDS",
    "CONSTRAINT_RULES",
    "ConstraintRule",
    "dependency_bound",
    "find_violations",
    "resolve",
    "resolve_with_report",
    # Timeline
    "DAY_WIDTHS",
    "Timeline",
    "map_date_to_offset",
    "map_offset_to_date",
    "round_half_up",
    # Gestures
    "GestureOrigin",
    "GestureSession",
    "begin_gesture",
    "update_gesture",
    "end_gesture",
]
