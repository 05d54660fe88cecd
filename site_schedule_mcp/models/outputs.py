"""Output models produced by the schedule engine and view."""

from datetime import date

from pydantic import BaseModel, Field

from site_schedule_mcp.enums import Boundary, DependencyType
from site_schedule_mcp.models.task import ScheduleTask


class UnsatisfiedDependency(BaseModel):
    """A dependency edge the returned schedule still violates."""

    task_id: str
    predecessor_id: str
    type: DependencyType
    lag: int
    boundary: Boundary
    required: date
    actual: date

    @property
    def slip_days(self) -> int:
        return (self.required - self.actual).days


class ResolveReport(BaseModel):
    """Resolved schedule plus how the round loop ended."""

    tasks: list[ScheduleTask]
    rounds: int
    settled: bool
    unsatisfied: list[UnsatisfiedDependency] = Field(default_factory=list)

    @property
    def consistent(self) -> bool:
        return not self.unsatisfied


class TimelineTick(BaseModel):
    """One day column of the Gantt header."""

    day: date
    offset: float
    day_label: str | None = None
    month_label: str | None = None


class BarGeometry(BaseModel):
    """Horizontal placement of a task bar on the timeline canvas."""

    task_id: str
    x: float
    width: float
    progress_width: float

    @property
    def right(self) -> float:
        return self.x + self.width


class ScheduleSummary(BaseModel):
    """Status counts shown above the Gantt chart."""

    total: int = 0
    completed: int = 0
    delayed: int = 0
    on_track: int = 0
    not_started: int = 0
