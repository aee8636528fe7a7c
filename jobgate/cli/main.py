"""Click command group for jobgate.

Commands:
    plan -- Plan a job against Nomad and exit 0 only if it should be deployed.
    show -- Print the field changes of a saved plan response, offline.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from jobgate import __version__
from jobgate.config import load_config
from jobgate.models.diff import DiffType, PlanResult
from jobgate.nomad.client import NomadClient
from jobgate.observability.logging import get_logger, setup_logging
from jobgate.plan.gate import run_plan
from jobgate.plan.messages import format_change
from jobgate.plan.walker import EmptyTaskPolicy, collect_changes

_POLICY_CHOICE = click.Choice([p.value for p in EmptyTaskPolicy])


def _read_json(path: Path) -> dict[str, Any]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise click.BadParameter(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise click.BadParameter(f"{path} must contain a JSON object")
    return payload


@click.group()
@click.version_option(version=__version__, prog_name="jobgate")
def cli() -> None:
    """Gate Nomad job deployments on their plan diff."""


@cli.command()
@click.argument("job_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--address", default=None, help="Nomad address (overrides JOBGATE_NOMAD_ADDR).")
@click.option("--token", default=None, help="Nomad ACL token (overrides JOBGATE_NOMAD_TOKEN).")
@click.option("--policy", type=_POLICY_CHOICE, default=None, help="Handling of edited tasks with no object diffs.")
@click.option("--log-level", type=click.Choice(["debug", "info", "warning", "error"]), default=None)
@click.option("--console", is_flag=True, help="Human-readable log output instead of JSON.")
@click.pass_context
def plan(
    ctx: click.Context,
    job_file: Path,
    address: str | None,
    token: str | None,
    policy: str | None,
    log_level: str | None,
    console: bool,
) -> None:
    """Plan JOB_FILE and exit 0 if the deployment should proceed, 1 otherwise."""
    try:
        config = load_config()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    if address:
        config.nomad.address = address
    if token:
        config.nomad.token = token
    if policy:
        config.plan.empty_task_policy = policy
    if log_level:
        config.log.level = log_level

    setup_logging(config.log.level, json=not console)
    log = get_logger("cli")

    payload = _read_json(job_file)
    job = payload.get("Job", payload)
    if not isinstance(job, dict) or not job.get("ID"):
        raise click.BadParameter(f"{job_file} does not contain a job with an ID")

    with NomadClient.from_config(config.nomad) as client:
        proceed = run_plan(
            client,
            job,
            log=log,
            empty_task_policy=EmptyTaskPolicy(config.plan.empty_task_policy),
        )
    ctx.exit(0 if proceed else 1)


@cli.command()
@click.argument("diff_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--policy", type=_POLICY_CHOICE, default=EmptyTaskPolicy.HALT_PLAN.value, show_default=True)
def show(diff_file: Path, policy: str) -> None:
    """Print one line per changed field in a saved plan response DIFF_FILE."""
    setup_logging("warning", json=False)
    result = PlanResult.from_api(_read_json(diff_file))

    if result.diff.type is DiffType.ADDED:
        click.echo("job is a new addition to the cluster")
        return
    if result.diff.type is not DiffType.EDITED:
        click.echo(f"no field changes (diff type {result.diff.type})")
        return

    for change in collect_changes(result.diff, EmptyTaskPolicy(policy)):
        click.echo(format_change(change))
