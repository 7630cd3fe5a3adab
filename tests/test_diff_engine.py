from dataclasses import dataclass
import math

from assertpack.core.config import EngineConfig
from assertpack.diff import (
    MISSING_TEXT,
    TOO_DEEP_TEXT,
    diff_values,
    render_diff_entries,
    render_diff_line,
    summarize_entry,
)


@dataclass
class _Person:
    Name: str
    Age: int


def test_diff_of_value_with_itself_is_empty() -> None:
    values = [
        1,
        "text",
        None,
        math.nan,
        [1, [2, 3]],
        {"a": {"b": [1, 2]}},
        _Person("John", 30),
        {1, 2, 3},
    ]
    for value in values:
        assert diff_values(value, value) == []
        assert diff_values(value, _copy(value)) == []


def test_record_fields_diff_in_declaration_order() -> None:
    entries = diff_values(_Person("John", 30), _Person("Jane", 25))

    assert [entry.path for entry in entries] == [("Name",), ("Age",)]
    assert [entry.location for entry in entries] == ["Name", "Age"]
    assert entries[0].expected_repr == '"John"'
    assert entries[0].actual_repr == '"Jane"'
    assert entries[1].expected_repr == "30"
    assert entries[1].actual_repr == "25"


def test_mapping_keys_are_walked_in_canonical_order() -> None:
    entries = diff_values({"b": 2, "a": 1}, {"c": 3, "a": 1})

    assert [entry.path for entry in entries] == [("b",), ("c",)]
    assert entries[0].kind == "missing_actual"
    assert entries[0].actual_repr == MISSING_TEXT
    assert entries[0].location == '["b"]'
    assert entries[1].kind == "missing_expected"
    assert entries[1].expected_repr == MISSING_TEXT


def test_sequence_length_difference_only_compares_overlap() -> None:
    entries = diff_values([1, 2, 3], [1, 5])

    assert len(entries) == 1
    assert entries[0].path == (1,)
    assert render_diff_line(entries[0]) == "[1]: 2 ≠ 5"


def test_nested_sequence_length_difference_is_reported_at_its_path() -> None:
    entries = diff_values({"tags": [1, 2]}, {"tags": [1, 2, 3]})

    assert len(entries) == 1
    assert entries[0].path == ("tags",)
    assert entries[0].kind == "changed"
    assert render_diff_line(entries[0]) == '["tags"]: [1, 2] ≠ [1, 2, 3]'


def test_nested_length_entry_follows_element_differences() -> None:
    entries = diff_values([[1, 2]], [[9, 2, 3]])

    assert [entry.path for entry in entries] == [(0, 0), (0,)]


def test_scalar_type_mismatch_is_disambiguated_when_reprs_match() -> None:
    entries = diff_values(1, 1.0)

    assert entries[0].kind == "type_mismatch"
    assert entries[0].expected_repr == "1 (int)"
    assert entries[0].actual_repr == "1 (float)"
    assert render_diff_line(entries[0]) == "<value>: 1 (int) ≠ 1 (float)"


def test_none_against_value_is_a_change_not_a_type_mismatch() -> None:
    entries = diff_values({"a": None}, {"a": [1]})

    assert entries[0].kind == "changed"
    assert summarize_entry(entries[0]) == '["a"] (None ≠ [1])'


def test_depth_limit_yields_placeholder_entry() -> None:
    entries = diff_values([[[1]]], [[[2]]], config=EngineConfig(max_diff_depth=2))

    assert len(entries) == 1
    assert entries[0].kind == "too_deep"
    assert entries[0].path == (0, 0)
    assert entries[0].expected_repr == TOO_DEEP_TEXT


def test_self_referencing_structures_terminate() -> None:
    left: list = [1]
    left.append(left)
    right: list = [2]
    right.append(right)

    entries = diff_values(left, right, config=EngineConfig(max_diff_depth=4))

    assert entries[0].path == (0,)
    assert entries[-1].kind == "too_deep"


def test_rendered_entries_are_capped_with_remainder_count() -> None:
    entries = diff_values(list(range(10)), list(range(10, 20)))

    lines = render_diff_entries(entries, max_lines=8)

    assert len(lines) == 9
    assert lines[0] == "  └─ [0]: 0 ≠ 10"
    assert lines[-1] == "  ... and 2 more differences"


def test_entry_to_dict_is_stable() -> None:
    entry = diff_values({"k": 1}, {"k": 2})[0]

    assert entry.to_dict() == {
        "path": ["k"],
        "location": '["k"]',
        "expected": "1",
        "actual": "2",
        "kind": "changed",
    }


def _copy(value):
    if isinstance(value, _Person):
        return _Person(value.Name, value.Age)
    if isinstance(value, dict):
        return {key: _copy(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_copy(item) for item in value]
    if isinstance(value, set):
        return set(value)
    return value
