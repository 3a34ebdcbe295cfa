from github_projects_mcp.core.filtering import (
    SPECIAL_FIELD_DATA_TYPES,
    filter_special_types,
)
from github_projects_mcp.core.models import ItemFieldValue, ProjectField


def _fields(*types):
    return [ProjectField(id=i, name=f"f{i}", data_type=t) for i, t in enumerate(types)]


def test_special_types_removed_order_preserved():
    records = _fields("text", "labels", "number", "assignees", "single_select")
    kept = filter_special_types(records)
    assert [r.data_type for r in kept] == ["text", "number", "single_select"]
    assert [r.id for r in kept] == [0, 2, 4]


def test_filter_is_idempotent():
    records = _fields("title", "date", "milestone", "iteration")
    once = filter_special_types(records)
    assert filter_special_types(once) == once


def test_empty_input():
    assert filter_special_types([]) == []


def test_input_not_mutated():
    records = _fields("labels", "text")
    filter_special_types(records)
    assert len(records) == 2


def test_every_special_type_dropped():
    assert filter_special_types(_fields(*sorted(SPECIAL_FIELD_DATA_TYPES))) == []


def test_matching_is_case_insensitive_and_tolerates_missing_type():
    values = [
        ItemFieldValue(id=1, data_type="Labels"),
        ItemFieldValue(id=2, data_type=None),
        ItemFieldValue(id=3, data_type="TEXT"),
    ]
    assert [v.id for v in filter_special_types(values)] == [2, 3]
