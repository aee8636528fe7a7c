"""Plan gate for jobgate.

Decides whether a Nomad job should be registered, based on the diff the
scheduler computes in a dry-run plan, and reports every edited field.

Submodules:
    decision -- Top-level proceed / stop decision on a JobDiff.
    walker   -- Depth-first extraction of edited leaf fields.
    messages -- One-line rendering of a PlannedChange.
    gate     -- Fetch a plan through a client, then decide.
"""

from jobgate.plan.decision import decide
from jobgate.plan.gate import run_plan
from jobgate.plan.messages import format_change
from jobgate.plan.walker import EmptyTaskPolicy, WalkOutcome, collect_changes, walk

__all__ = [
    "EmptyTaskPolicy",
    "WalkOutcome",
    "collect_changes",
    "decide",
    "format_change",
    "run_plan",
    "walk",
]
