"""Human-readable rendering of planned field changes."""

from __future__ import annotations

from jobgate.models.diff import PlannedChange


def format_change(change: PlannedChange) -> str:
    """Render *change* as a single log line.

    Context is prefixed group first, then task; absent context is omitted::

        group cache and task redis plan indicates change of resources:cpu from 500 to 1000
    """
    prefix = ""
    if change.group:
        prefix = f"group {change.group} "
    if change.task:
        prefix += f"and task {change.task} "

    return (
        f"{prefix}plan indicates change of {change.object_name}:{change.field_name} "
        f"from {change.old_value} to {change.new_value}"
    )
