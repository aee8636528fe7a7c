"""Plan gate: ask Nomad for a plan, then decide whether to deploy.

Any failure to obtain the plan, and any diff type the decision cannot act
on, results in False so the caller never registers a job blind.
"""

from __future__ import annotations

from typing import Any, Protocol

import structlog

from jobgate.errors import NomadError, UnhandledDiffTypeError
from jobgate.models.diff import PlanResult
from jobgate.plan.decision import decide
from jobgate.plan.walker import EmptyTaskPolicy

_log = structlog.get_logger(component="plan.gate")


class PlanClient(Protocol):
    """Anything able to return a plan for a job payload."""

    def plan(self, job: dict[str, Any]) -> PlanResult: ...


def run_plan(
    client: PlanClient,
    job: dict[str, Any],
    log: Any = None,
    empty_task_policy: EmptyTaskPolicy = EmptyTaskPolicy.HALT_PLAN,
) -> bool:
    """Plan *job* through *client* and return whether to proceed."""
    log = log if log is not None else _log
    log.debug("triggering nomad plan", job_id=job.get("ID", ""))

    try:
        result = client.plan(job)
    except NomadError as exc:
        log.error("unable to run a job plan", error=str(exc), status_code=exc.status_code)
        return False

    if result.warnings:
        log.warning("nomad plan returned warnings", job_id=result.diff.id, warnings=result.warnings)

    try:
        return decide(result.diff, log=log, empty_task_policy=empty_task_policy)
    except UnhandledDiffTypeError as exc:
        log.error("refusing to deploy", job_id=result.diff.id, error=str(exc))
        return False
