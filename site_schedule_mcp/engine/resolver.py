"""Dependency resolution for schedule task lists.

Propagates every task's predecessor constraints through the whole list until
a round leaves all dates unchanged or the round cap is hit. Propagation is
push-only: a dependency can delay a boundary, never pull it earlier. Cyclic
or conflicting graphs are not rejected; they stop improving at the cap and
the report lists whatever is still violated.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from site_schedule_mcp.enums import Boundary, DependencyType
from site_schedule_mcp.models.outputs import ResolveReport, UnsatisfiedDependency
from site_schedule_mcp.models.task import Dependency, ScheduleTask

logger = logging.getLogger(__name__)

MAX_ROUNDS = 10


@dataclass(frozen=True)
class ConstraintRule:
    """How one relation kind bounds the successor.

    The successor's `boundary` must not precede the predecessor's
    `reference` date plus lag plus `gap_days`.
    """

    boundary: Boundary
    reference: Boundary
    gap_days: int = 0


CONSTRAINT_RULES: dict[DependencyType, ConstraintRule] = {
    DependencyType.FINISH_TO_START: ConstraintRule(Boundary.START, Boundary.END, gap_days=1),
    DependencyType.START_TO_START: ConstraintRule(Boundary.START, Boundary.START),
    DependencyType.FINISH_TO_FINISH: ConstraintRule(Boundary.END, Boundary.END),
    DependencyType.START_TO_FINISH: ConstraintRule(Boundary.END, Boundary.START),
}


def dependency_bound(dependency: Dependency, predecessor: ScheduleTask) -> tuple[Boundary, date]:
    """
    Evaluate one dependency edge against its predecessor.

    Args:
        dependency: Edge declared on the successor
        predecessor: Current state of the task the edge points at

    Returns:
        Tuple of (successor boundary constrained, earliest allowed date)
    """
    rule = CONSTRAINT_RULES[dependency.type]
    earliest = predecessor.boundary(rule.reference) + timedelta(days=dependency.lag + rule.gap_days)
    return rule.boundary, earliest


def _index_by_id(tasks: Sequence[ScheduleTask]) -> dict[str, int]:
    index: dict[str, int] = {}
    for position, task in enumerate(tasks):
        # First occurrence wins for duplicated ids
        index.setdefault(task.id, position)
    return index


def _constrain_task(task: ScheduleTask, working: list[ScheduleTask], index: dict[str, int]) -> ScheduleTask:
    """Apply all of a task's dependencies; return the same object when nothing moves."""
    start, end = task.start_date, task.end_date
    duration = timedelta(days=max(0, task.duration_days))
    start_moved = end_moved = False

    for dependency in task.dependencies:
        position = index.get(dependency.task_id)
        if position is None:
            logger.debug("Task %s: predecessor %s not in schedule, edge ignored", task.id, dependency.task_id)
            continue
        boundary, earliest = dependency_bound(dependency, working[position])
        if boundary is Boundary.START and start < earliest:
            start, start_moved = earliest, True
        elif boundary is Boundary.END and end < earliest:
            end, end_moved = earliest, True

    if start_moved and not end_moved:
        end = start + duration
    elif end_moved and not start_moved and end < start:
        start = end - duration
    elif start_moved and end_moved and end < start:
        end = start + timedelta(days=1)
    elif end < start:
        # Input already violated start <= end and no edge touched it
        end = start

    if start == task.start_date and end == task.end_date:
        return task
    return task.model_copy(update={"start_date": start, "end_date": end})


def find_violations(tasks: Sequence[ScheduleTask]) -> list[UnsatisfiedDependency]:
    """
    List every dependency edge the schedule currently violates.

    Edges pointing at ids absent from the list are not violations.

    Args:
        tasks: Schedule to check; not modified

    Returns:
        One UnsatisfiedDependency per violated edge, in task order
    """
    index = _index_by_id(tasks)
    violations: list[UnsatisfiedDependency] = []
    for task in tasks:
        for dependency in task.dependencies:
            position = index.get(dependency.task_id)
            if position is None:
                continue
            boundary, earliest = dependency_bound(dependency, tasks[position])
            actual = task.boundary(boundary)
            if actual < earliest:
                violations.append(
                    UnsatisfiedDependency(
                        task_id=task.id,
                        predecessor_id=dependency.task_id,
                        type=dependency.type,
                        lag=dependency.lag,
                        boundary=boundary,
                        required=earliest,
                        actual=actual,
                    )
                )
    return violations


def resolve_with_report(tasks: Sequence[ScheduleTask], max_rounds: int = MAX_ROUNDS) -> ResolveReport:
    """
    Resolve a schedule and report how the round loop ended.

    Each round walks the list in order and evaluates every task against the
    current state of its predecessors, so updates made earlier in a round
    are visible later in the same round.

    Args:
        tasks: Full task list after an edit; not modified
        max_rounds: Round cap, the safety valve for cyclic graphs

    Returns:
        ResolveReport with the new task list, rounds run, whether a round
        settled before the cap, and the edges still violated
    """
    working = list(tasks)
    index = _index_by_id(working)
    rounds = 0
    settled = False

    while rounds < max_rounds:
        rounds += 1
        changed = False
        for position, task in enumerate(working):
            adjusted = _constrain_task(task, working, index)
            if adjusted is not task:
                working[position] = adjusted
                changed = True
        if not changed:
            settled = True
            break
        logger.debug("Resolve round %d moved dates", rounds)

    unsatisfied = find_violations(working)
    if not settled:
        logger.warning(
            "Dependency resolution stopped after %d rounds with %d unsatisfied edge(s)",
            rounds,
            len(unsatisfied),
        )

    return ResolveReport(
        tasks=working,
        rounds=rounds,
        settled=settled,
        unsatisfied=unsatisfied,
    )


def resolve(tasks: Sequence[ScheduleTask]) -> list[ScheduleTask]:
    """Return a new task list with dates pushed to honor every dependency."""
    return resolve_with_report(tasks).tasks
