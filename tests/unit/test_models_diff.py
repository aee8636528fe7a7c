"""Tests for parsing Nomad plan responses into diff views."""

from __future__ import annotations

import dataclasses

import pytest

from jobgate.models.diff import DiffType, JobDiff, ObjectDiff, PlanResult

# Trimmed from a real `nomad job plan -diff` API response.
_PLAN_RESPONSE: dict = {
    "Index": 0,
    "Warnings": "Group \"cache\" has warnings: 1 error occurred",
    "Diff": {
        "ID": "example",
        "Type": "Edited",
        "Fields": None,
        "Objects": None,
        "TaskGroups": [
            {
                "Name": "cache",
                "Type": "Edited",
                "Fields": [{"Name": "Count", "Type": "Edited", "Old": "1", "New": "3", "Annotations": None}],
                "Objects": None,
                "Updates": {"create/destroy update": 1},
                "Tasks": [
                    {
                        "Name": "redis",
                        "Type": "Edited",
                        "Annotations": ["forces create/destroy update"],
                        "Fields": None,
                        "Objects": [
                            {
                                "Name": "Resources",
                                "Type": "Edited",
                                "Fields": [
                                    {"Name": "CPU", "Type": "Edited", "Old": "500", "New": "1000"},
                                    {"Name": "MemoryMB", "Type": "None", "Old": "256", "New": "256"},
                                ],
                                "Objects": None,
                            }
                        ],
                    }
                ],
            }
        ],
    },
}


class TestDiffType:
    @pytest.mark.parametrize("raw", ["Added", "Deleted", "Edited", "None"])
    def test_known_values(self, raw: str) -> None:
        assert DiffType.parse(raw).value == raw

    @pytest.mark.parametrize("raw", ["Renamed", "", "edited", None, 3])
    def test_unrecognized_values_map_to_unknown(self, raw: object) -> None:
        assert DiffType.parse(raw) is DiffType.UNKNOWN


class TestFromApi:
    def test_plan_response_is_parsed(self) -> None:
        result = PlanResult.from_api(_PLAN_RESPONSE)
        assert result.warnings.startswith("Group")
        diff = result.diff
        assert diff.id == "example"
        assert diff.type is DiffType.EDITED
        group = diff.task_groups[0]
        assert group.name == "cache"
        assert group.objects == ()
        task = group.tasks[0]
        assert task.name == "redis"
        resources = task.objects[0]
        assert resources.is_leaf
        assert [(f.name, f.type, f.old, f.new) for f in resources.fields] == [
            ("CPU", DiffType.EDITED, "500", "1000"),
            ("MemoryMB", DiffType.NONE, "256", "256"),
        ]

    def test_bare_diff_is_accepted(self) -> None:
        result = PlanResult.from_api(_PLAN_RESPONSE["Diff"])
        assert result.diff == PlanResult.from_api(_PLAN_RESPONSE).diff
        assert result.warnings == ""

    def test_null_diff_parses_as_unknown(self) -> None:
        result = PlanResult.from_api({"Diff": None})
        assert result.diff.type is DiffType.UNKNOWN
        assert result.diff.task_groups == ()

    def test_null_field_values_become_empty_strings(self) -> None:
        obj = ObjectDiff.from_api(
            {"Name": "Env", "Type": "Edited", "Fields": [{"Name": "DEBUG", "Type": "Added", "Old": None, "New": "1"}]}
        )
        assert obj.fields[0].old == ""
        assert obj.fields[0].new == "1"

    def test_views_are_frozen(self) -> None:
        diff = JobDiff.from_api(_PLAN_RESPONSE["Diff"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            diff.type = DiffType.NONE  # type: ignore[misc]
