"""Proceed / stop decision taken from the top-level type of a plan diff."""

from __future__ import annotations

from typing import Any

import structlog

from jobgate.errors import UnhandledDiffTypeError
from jobgate.models.diff import DiffType, JobDiff, PlannedChange
from jobgate.plan.messages import format_change
from jobgate.plan.walker import EmptyTaskPolicy, WalkOutcome, walk

_log = structlog.get_logger(component="plan.decision")


def decide(
    diff: JobDiff,
    log: Any = None,
    empty_task_policy: EmptyTaskPolicy = EmptyTaskPolicy.HALT_PLAN,
) -> bool:
    """Return True if the job should be registered, False otherwise.

    Added jobs proceed with a single info record.  A diff of type None stops
    the deployment with an error record.  Edited jobs proceed after one info
    record per changed field and a closing summary record.  Any other type
    is logged and raises UnhandledDiffTypeError.

    Args:
        diff:              Parsed plan diff; never mutated.
        log:               structlog-style bound logger.  Defaults to the
                           module logger.
        empty_task_policy: Passed through to the diff walker.
    """
    log = (log if log is not None else _log).bind(job_id=diff.id, diff_type=str(diff.type))

    match diff.type:
        case DiffType.ADDED:
            log.info("job is a new addition to the cluster")
            return True

        case DiffType.NONE:
            log.error("no changes detected for job")
            return False

        case DiffType.EDITED:
            emitted = 0

            def _emit(change: PlannedChange) -> None:
                nonlocal emitted
                emitted += 1
                log.info(
                    format_change(change),
                    group=change.group,
                    task=change.task,
                    object=change.object_name,
                    field=change.field_name,
                    old=change.old_value,
                    new=change.new_value,
                )

            empty_tasks: list[str] = []
            outcome = walk(
                diff,
                _emit,
                empty_task_policy,
                on_empty_task=lambda group, task: empty_tasks.append(f"{group}/{task}"),
            )
            log.info(
                "job plan indicates changes",
                changes=emitted,
                halted=outcome is WalkOutcome.HALTED,
                empty_tasks=empty_tasks,
                empty_task_policy=str(empty_task_policy),
            )
            return True

        case _:
            log.error("unhandled plan diff type")
            raise UnhandledDiffTypeError(str(diff.type))
