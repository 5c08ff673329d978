from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kv_morph.errors import TypeMismatchError
from kv_morph.result import Err, Ok
from kv_morph.traversal import Record, compact, compact_deep, try_compact, try_compact_deep


@dataclass
class Empty:
    pass


class EmptyRecord(dict):
    pass


Record.register(EmptyRecord)


_KEYS = st.text(max_size=8)
_SCALARS = st.none() | st.booleans() | st.integers(min_value=-100, max_value=100) | st.text(max_size=10)
_VALUES = st.recursive(
    _SCALARS,
    lambda children: st.lists(children, max_size=3) | st.dictionaries(_KEYS, children, max_size=3),
    max_leaves=12,
)
_MAPPINGS = st.dictionaries(_KEYS, _VALUES, max_size=6)
_CLEAN_VALUES = st.recursive(
    st.booleans() | st.integers(min_value=-100, max_value=100) | st.text(max_size=10),
    lambda children: st.lists(children, max_size=3) | st.dictionaries(_KEYS, children, min_size=1, max_size=3),
    max_leaves=12,
)
_CLEAN_MAPPINGS = st.dictionaries(_KEYS, st.none() | _CLEAN_VALUES, max_size=6)


def _has_empty_mapping(value: object) -> bool:
    if isinstance(value, dict):
        return not value or any(_has_empty_mapping(child) for child in value.values())
    return False


def _has_none_below(value: object) -> bool:
    if isinstance(value, dict):
        return any(child is None or _has_none_below(child) for child in value.values())
    return False


def test_compact_drops_none_values() -> None:
    assert compact({"nil_key": None, "not_nil": "nil"}) == {"not_nil": "nil"}


def test_compact_drops_empty_mappings() -> None:
    assert compact({"empty": {}, "not": "not"}) == {"not": "not"}


def test_compact_keeps_falsy_scalars_and_empty_sequences() -> None:
    data = {"zero": 0, "false": False, "blank": "", "list": [], "tuple": ()}
    assert compact(data) == data


def test_compact_is_shallow() -> None:
    assert compact({"nested": {"inner": None, "empty": {}}}) == {"nested": {"inner": None, "empty": {}}}


def test_compact_keeps_empty_records() -> None:
    empty_record = EmptyRecord()
    data = {"record": empty_record, "dataclass": Empty(), "gone": {}}
    assert compact(data) == {"record": empty_record, "dataclass": Empty()}


def test_compact_does_not_mutate_input() -> None:
    data = {"a": None, "b": 1}
    _ = compact(data)
    assert data == {"a": None, "b": 1}


@pytest.mark.parametrize("bad_input", [("not", "a map"), "won't work", 5, None, [{"a": 1}]])
def test_compact_rejects_non_mappings(bad_input: object) -> None:
    with pytest.raises(TypeMismatchError, match="expected a mapping"):
        _ = compact(bad_input)  # type: ignore[arg-type]
    with pytest.raises(TypeMismatchError, match="expected a mapping"):
        _ = compact_deep(bad_input)  # type: ignore[arg-type]


def test_try_compact_reports_errors() -> None:
    assert try_compact({"nil_key": None, "not_nil": "real value"}) == Ok({"not_nil": "real value"})

    outcome = try_compact("won't work")  # type: ignore[arg-type]
    assert isinstance(outcome, Err)
    assert isinstance(outcome.error, TypeMismatchError)
    assert outcome.error.context == {"expected": "a mapping", "got": "str"}
    with pytest.raises(TypeMismatchError):
        outcome.unwrap()


def test_compact_deep_removes_nested_none() -> None:
    data = {"nil_nil": None, "not_nil": "a value", "nested": {"nil_val": None, "other": "other"}}
    assert compact_deep(data) == {"not_nil": "a value", "nested": {"other": "other"}}


def test_compact_deep_removes_nested_empty_mappings() -> None:
    data = {"nil_nil": None, "not_nil": "a value", "nested": {"nil_val": None, "other": "other", "nested_empty": {}}}
    assert compact_deep(data) == {"not_nil": "a value", "nested": {"other": "other"}}


def test_compact_deep_removes_mappings_emptied_by_compaction() -> None:
    data = {"a": None, "b": "not", "c": {"d": None, "e": {}, "f": {"g": "value"}}}
    assert compact_deep(data) == {"b": "not", "c": {"f": {"g": "value"}}}

    assert compact_deep({"parent": {"child": {"leaf": None}}, "keep": 1}) == {"keep": 1}


def test_compact_deep_keeps_records_and_sequences_as_is() -> None:
    empty_record = EmptyRecord()
    data = {"record": empty_record, "items": [None, {"x": None}], "dc": Empty()}
    assert compact_deep(data) == data


def test_try_compact_deep() -> None:
    assert try_compact_deep({"a": {"b": None}, "c": 1}) == Ok({"c": 1})
    outcome = try_compact_deep(5)  # type: ignore[arg-type]
    assert isinstance(outcome, Err)
    assert outcome.to_dict() == {
        "code": "E_TYPE_MISMATCH",
        "message": "expected a mapping, got: 5",
        "context": {"expected": "a mapping", "got": "int"},
    }


@given(data=_MAPPINGS)
def test_compact_is_idempotent(data: dict[str, object]) -> None:
    once = compact(data)
    assert compact(once) == once


@given(data=_MAPPINGS)
def test_compact_deep_is_idempotent(data: dict[str, object]) -> None:
    once = compact_deep(data)
    assert compact_deep(once) == once


@given(data=_MAPPINGS)
def test_compact_deep_leaves_no_none_or_empty_mapping(data: dict[str, object]) -> None:
    result = compact_deep(data)
    assert not any(_has_empty_mapping(value) for value in result.values())
    assert not _has_none_below(result)


@given(data=_CLEAN_MAPPINGS)
def test_compact_deep_matches_compact_without_nested_empties(data: dict[str, object]) -> None:
    assert compact_deep(data) == compact(data)


def _nested(depth: int, leaf: object) -> dict[str, object]:
    value = leaf
    for _ in range(depth):
        value = {"k": value}
    return value  # type: ignore[return-value]


def test_compact_deep_has_no_depth_limit() -> None:
    depth = 5000
    result = try_compact_deep({"keep": 1, "chain": _nested(depth, {"gone": None})})
    assert result == Ok({"keep": 1})

    node: object = compact_deep(_nested(depth, {"x": 1, "y": None, "z": {}}))
    for _ in range(depth):
        assert isinstance(node, dict)
        assert list(node) == ["k"]
        node = node["k"]
    assert node == {"x": 1}
