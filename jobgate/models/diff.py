"""Read-only views over a Nomad job plan diff.

The scheduler returns the diff as nested JSON.  These frozen dataclasses
mirror the parts of that tree the plan gate reads; children are held in
tuples so a parsed diff can be walked any number of times without change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class DiffType(StrEnum):
    """Classification the scheduler assigns to every node of a diff."""

    ADDED = "Added"
    DELETED = "Deleted"
    EDITED = "Edited"
    NONE = "None"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: object) -> DiffType:
        """Map a raw ``Type`` value to a member; unrecognized values become UNKNOWN."""
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return cls.UNKNOWN
        return cls.UNKNOWN


def _str(value: object) -> str:
    return "" if value is None else str(value)


def _items(payload: dict[str, Any], key: str) -> list[dict[str, Any]]:
    return payload.get(key) or []


@dataclass(frozen=True)
class FieldDiff:
    """A single changed (or unchanged) scalar field."""

    name: str
    type: DiffType
    old: str = ""
    new: str = ""

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> FieldDiff:
        return cls(
            name=_str(payload.get("Name")),
            type=DiffType.parse(payload.get("Type")),
            old=_str(payload.get("Old")),
            new=_str(payload.get("New")),
        )


@dataclass(frozen=True)
class ObjectDiff:
    """A nested block of a job (resources, update strategy, ...).

    Objects may hold further objects to any depth; only a node with no child
    objects is considered a leaf.
    """

    name: str
    type: DiffType
    objects: tuple[ObjectDiff, ...] = ()
    fields: tuple[FieldDiff, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.objects

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> ObjectDiff:
        return cls(
            name=_str(payload.get("Name")),
            type=DiffType.parse(payload.get("Type")),
            objects=tuple(cls.from_api(o) for o in _items(payload, "Objects")),
            fields=tuple(FieldDiff.from_api(f) for f in _items(payload, "Fields")),
        )


@dataclass(frozen=True)
class TaskDiff:
    """Diff of one task inside a task group."""

    name: str
    type: DiffType
    objects: tuple[ObjectDiff, ...] = ()

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> TaskDiff:
        return cls(
            name=_str(payload.get("Name")),
            type=DiffType.parse(payload.get("Type")),
            objects=tuple(ObjectDiff.from_api(o) for o in _items(payload, "Objects")),
        )


@dataclass(frozen=True)
class TaskGroupDiff:
    """Diff of one task group: group-level objects followed by its tasks."""

    name: str
    type: DiffType
    objects: tuple[ObjectDiff, ...] = ()
    tasks: tuple[TaskDiff, ...] = ()

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> TaskGroupDiff:
        return cls(
            name=_str(payload.get("Name")),
            type=DiffType.parse(payload.get("Type")),
            objects=tuple(ObjectDiff.from_api(o) for o in _items(payload, "Objects")),
            tasks=tuple(TaskDiff.from_api(t) for t in _items(payload, "Tasks")),
        )


@dataclass(frozen=True)
class JobDiff:
    """Root of a plan diff."""

    type: DiffType
    task_groups: tuple[TaskGroupDiff, ...] = ()
    id: str = ""

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> JobDiff:
        return cls(
            id=_str(payload.get("ID")),
            type=DiffType.parse(payload.get("Type")),
            task_groups=tuple(TaskGroupDiff.from_api(tg) for tg in _items(payload, "TaskGroups")),
        )


@dataclass(frozen=True)
class PlannedChange:
    """One field-level change found while walking a diff.

    ``group`` and ``task`` are empty strings when that context is absent.
    """

    group: str
    task: str
    object_name: str
    field_name: str
    old_value: str
    new_value: str


@dataclass(frozen=True)
class PlanResult:
    """Parsed response of a job plan request."""

    diff: JobDiff
    warnings: str = ""
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> PlanResult:
        """Build from a plan response, or from a bare diff object."""
        if "Diff" in payload:
            diff_payload = payload.get("Diff") or {}
        else:
            diff_payload = payload
        return cls(
            diff=JobDiff.from_api(diff_payload),
            warnings=_str(payload.get("Warnings")),
            raw=payload,
        )
