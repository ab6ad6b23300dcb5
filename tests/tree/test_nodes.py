"""Tests for ValueKind StrEnum, kind_of and validate_json.

Verifies:
- ValueKind has exactly 6 members with lowercase string values
- kind_of dispatches bool before int (bool subclasses int)
- kind_of raises TypeError for non-JSON Python types
- validate_json walks nested containers of any depth and rejects non-str keys
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from json_assert_diff.tree.nodes import ValueKind, kind_of, validate_json


class TestValueKind:
    def test_has_exactly_six_members(self) -> None:
        assert len(ValueKind) == 6

    def test_values_are_lowercased(self) -> None:
        assert ValueKind.NULL == "null"
        assert ValueKind.BOOLEAN == "boolean"
        assert ValueKind.NUMBER == "number"
        assert ValueKind.STRING == "string"
        assert ValueKind.ARRAY == "array"
        assert ValueKind.OBJECT == "object"

    def test_members_are_str_instances(self) -> None:
        for member in ValueKind:
            assert isinstance(member, str), f"{member!r} is not a str instance"

    def test_atoms(self) -> None:
        atoms = {k for k in ValueKind if k.is_atom}
        assert atoms == {
            ValueKind.NULL,
            ValueKind.BOOLEAN,
            ValueKind.NUMBER,
            ValueKind.STRING,
        }


class TestKindOf:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            (None, ValueKind.NULL),
            (True, ValueKind.BOOLEAN),
            (False, ValueKind.BOOLEAN),
            (0, ValueKind.NUMBER),
            (-3, ValueKind.NUMBER),
            (1.5, ValueKind.NUMBER),
            ("", ValueKind.STRING),
            ("text", ValueKind.STRING),
            ([], ValueKind.ARRAY),
            ([1, "a"], ValueKind.ARRAY),
            ({}, ValueKind.OBJECT),
            ({"a": 1}, ValueKind.OBJECT),
        ],
    )
    def test_classification(self, value: object, kind: ValueKind) -> None:
        assert kind_of(value) == kind

    def test_bool_is_not_number(self) -> None:
        assert kind_of(True) != kind_of(1)

    @pytest.mark.parametrize("value", [(1, 2), {1, 2}, b"bytes", object()])
    def test_unsupported_type_raises(self, value: object) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            kind_of(value)


class TestValidateJson:
    def test_valid_nested_document(self) -> None:
        validate_json({"a": [1, 2.5, None, True, {"b": "c"}], "d": {}})

    def test_nested_invalid_value_raises(self) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            validate_json({"a": [1, {"b": {1, 2}}]})

    def test_non_string_key_raises(self) -> None:
        with pytest.raises(TypeError, match="keys must be str"):
            validate_json({"a": {1: "x"}})

    def test_deeply_nested_document(self) -> None:
        validate_json(json.loads("[" * 600 + "]" * 600))

    def test_invalid_value_deep_in_tree_raises(self) -> None:
        value: Any = {"leaf": {1, 2}}
        for _ in range(2000):
            value = [value]
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            validate_json(value)
