"""Depth-first walk of a job plan diff down to its edited leaf fields.

Only nodes typed ``Edited`` are descended into.  Field detail is taken
solely from leaf objects (no child objects) that are themselves edited; the
fields of an object that also has children are never read, so a change the
scheduler reports at several depths is emitted once.

Visiting order is the declared order of the tree: task groups, and within a
group its objects before its tasks, then each task's objects, children
depth-first before siblings, and finally fields in declaration order.

A task that is edited but carries no objects triggers the empty task policy.
Under ``HALT_PLAN`` the whole walk stops at that point, including any later
task groups; under ``SKIP_TASK`` only that task is passed over.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, StrEnum

from jobgate.models.diff import DiffType, JobDiff, ObjectDiff, PlannedChange

Emit = Callable[[PlannedChange], None]
OnEmptyTask = Callable[[str, str], None]


class EmptyTaskPolicy(StrEnum):
    """What to do when an edited task has no object diffs."""

    HALT_PLAN = "halt"
    SKIP_TASK = "skip"


class WalkOutcome(Enum):
    """Result threaded back up through every level of the walk."""

    CONTINUE = "continue"
    HALTED = "halted"


def walk(
    diff: JobDiff,
    emit: Emit,
    empty_task_policy: EmptyTaskPolicy = EmptyTaskPolicy.HALT_PLAN,
    on_empty_task: OnEmptyTask | None = None,
) -> WalkOutcome:
    """Call *emit* once per edited leaf field in *diff*.

    *on_empty_task* is called with the group and task name of every edited
    task that carries no object diffs, before the policy is applied.  The
    walker itself never logs.

    Returns HALTED if the walk stopped early because of the empty task
    policy, CONTINUE if every task group was visited.
    """
    for group in diff.task_groups:
        if group.type is not DiffType.EDITED:
            continue

        for obj in group.objects:
            _walk_object(group.name, "", obj, emit)

        for task in group.tasks:
            if task.type is not DiffType.EDITED:
                continue
            if not task.objects:
                if on_empty_task is not None:
                    on_empty_task(group.name, task.name)
                if empty_task_policy is EmptyTaskPolicy.HALT_PLAN:
                    return WalkOutcome.HALTED
                continue
            for obj in task.objects:
                _walk_object(group.name, task.name, obj, emit)

    return WalkOutcome.CONTINUE


def _walk_object(group: str, task: str, obj: ObjectDiff, emit: Emit) -> None:
    if obj.is_leaf and obj.fields and obj.type is DiffType.EDITED:
        for f in obj.fields:
            if f.type is not DiffType.EDITED:
                continue
            emit(PlannedChange(group, task, obj.name, f.name, f.old, f.new))
        return

    for child in obj.objects:
        _walk_object(group, task, child, emit)


def collect_changes(
    diff: JobDiff,
    empty_task_policy: EmptyTaskPolicy = EmptyTaskPolicy.HALT_PLAN,
) -> list[PlannedChange]:
    """Return every change :func:`walk` would emit, in emission order."""
    changes: list[PlannedChange] = []
    walk(diff, changes.append, empty_task_policy)
    return changes
