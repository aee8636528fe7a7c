"""Core data structures for jobgate."""

from jobgate.models.config import JobgateConfig
from jobgate.models.diff import (
    DiffType,
    FieldDiff,
    JobDiff,
    ObjectDiff,
    PlannedChange,
    PlanResult,
    TaskDiff,
    TaskGroupDiff,
)

__all__ = [
    "DiffType",
    "FieldDiff",
    "JobDiff",
    "JobgateConfig",
    "ObjectDiff",
    "PlanResult",
    "PlannedChange",
    "TaskDiff",
    "TaskGroupDiff",
]
