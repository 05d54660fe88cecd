"""Core schedule models: activities and their precedence edges."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from site_schedule_mcp.enums import Boundary, DependencyType, TaskStatus


class Dependency(BaseModel):
    """Directed precedence edge pointing at a predecessor task."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    task_id: str
    type: DependencyType = DependencyType.FINISH_TO_START
    lag: int = 0

    @field_validator("lag", mode="before")
    @classmethod
    def default_missing_lag(cls, v: object) -> object:
        # Editors store an unset lag as null or ""
        return 0 if v is None or v == "" else v


class ScheduleTask(BaseModel):
    """A schedulable activity with an inclusive date range.

    start_date <= end_date is not validated here; the resolver
    is the component that restores it.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: str = Field(..., min_length=1)
    name: str = ""
    start_date: date
    end_date: date
    progress: int = Field(default=0, ge=0, le=100)
    status: TaskStatus = TaskStatus.ON_TRACK
    is_critical: bool = False
    dependencies: list[Dependency] = Field(default_factory=list)
    boq_item_id: str | None = None

    @property
    def duration_days(self) -> int:
        return (self.end_date - self.start_date).days

    def boundary(self, which: Boundary) -> date:
        return self.start_date if which is Boundary.START else self.end_date

    def to_wire(self) -> dict:
        """Dump with the camelCase keys the surrounding application persists."""
        return self.model_dump(mode="json", by_alias=True)
