"""Calendar-to-pixel mapping for the Gantt timeline."""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import date, timedelta

from pydantic import BaseModel, ConfigDict, Field

from site_schedule_mcp.enums import GestureMode, ZoomLevel
from site_schedule_mcp.models.outputs import BarGeometry, TimelineTick
from site_schedule_mcp.models.task import ScheduleTask

DAY_WIDTHS: dict[ZoomLevel, int] = {
    ZoomLevel.MONTH: 10,
    ZoomLevel.WEEK: 40,
    ZoomLevel.DAY: 100,
}

LEAD_DAYS = 10
TRAIL_DAYS = 30
EMPTY_SPAN_DAYS = 60
EDGE_HANDLE_PX = 10
DAY_LABEL_MIN_WIDTH = 20


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up, as pointer math expects."""
    return math.floor(value + 0.5)


def map_date_to_offset(day: date, origin: date, day_width: float) -> float:
    """Horizontal pixel offset of a calendar day."""
    return float((day - origin).days * day_width)


def map_offset_to_date(offset: float, origin: date, day_width: float) -> date:
    """Calendar day nearest to a horizontal pixel offset."""
    return origin + timedelta(days=round_half_up(offset / day_width))


class Timeline(BaseModel):
    """Coordinate frame of one rendering of a schedule.

    Stateless: derive a new one with `for_tasks` whenever the task list or
    zoom level changes.
    """

    model_config = ConfigDict(frozen=True)

    origin: date
    day_width: int = Field(..., gt=0)
    span_days: int = Field(..., ge=0)

    @classmethod
    def for_tasks(
        cls,
        tasks: Sequence[ScheduleTask],
        zoom: ZoomLevel = ZoomLevel.WEEK,
        today: date | None = None,
    ) -> Timeline:
        """
        Derive the visible frame for a task list.

        Args:
            tasks: Tasks to fit on the canvas
            zoom: Zoom preset selecting pixels per day
            today: Origin used when the list is empty (defaults to date.today())

        Returns:
            Timeline starting 10 days before the earliest start and running
            30 days past the latest end
        """
        day_width = DAY_WIDTHS[zoom]
        if not tasks:
            return cls(origin=today or date.today(), day_width=day_width, span_days=EMPTY_SPAN_DAYS)

        origin = min(t.start_date for t in tasks) - timedelta(days=LEAD_DAYS)
        last = max(t.end_date for t in tasks) + timedelta(days=TRAIL_DAYS)
        return cls(origin=origin, day_width=day_width, span_days=max(0, (last - origin).days))

    @property
    def end(self) -> date:
        return self.origin + timedelta(days=self.span_days)

    @property
    def width(self) -> float:
        return float(self.span_days * self.day_width)

    def date_to_offset(self, day: date) -> float:
        return map_date_to_offset(day, self.origin, self.day_width)

    def offset_to_date(self, offset: float) -> date:
        return map_offset_to_date(offset, self.origin, self.day_width)

    def today_offset(self, today: date | None = None) -> float:
        return self.date_to_offset(today or date.today())

    def ticks(self) -> list[TimelineTick]:
        """Day columns from origin through the end of the span, inclusive."""
        show_day = self.day_width > DAY_LABEL_MIN_WIDTH
        ticks: list[TimelineTick] = []
        for i in range(self.span_days + 1):
            day = self.origin + timedelta(days=i)
            month_label = None
            if i == 0 or day.day == 1:
                month_label = f"{day.strftime('%b').upper()} {day.year}"
            ticks.append(
                TimelineTick(
                    day=day,
                    offset=float(i * self.day_width),
                    day_label=str(day.day) if show_day else None,
                    month_label=month_label,
                )
            )
        return ticks

    def bar(self, task: ScheduleTask) -> BarGeometry:
        """Bar placement; the end date is inclusive so a bar is never narrower than one day."""
        x = self.date_to_offset(task.start_date)
        width = max(float(self.day_width), self.date_to_offset(task.end_date) - x + self.day_width)
        return BarGeometry(task_id=task.id, x=x, width=width, progress_width=width * task.progress / 100)

    def hit_region(self, task: ScheduleTask, offset: float) -> GestureMode | None:
        """
        Gesture a press at `offset` on the task's bar would start.

        The edge handles are EDGE_HANDLE_PX wide; on bars too narrow to hold
        both, the right handle wins. Progress has its own handle and is never
        returned here.
        """
        geometry = self.bar(task)
        if offset < geometry.x or offset > geometry.right:
            return None
        if offset >= geometry.right - EDGE_HANDLE_PX:
            return GestureMode.RESIZE_END
        if offset < geometry.x + EDGE_HANDLE_PX:
            return GestureMode.RESIZE_START
        return GestureMode.MOVE
