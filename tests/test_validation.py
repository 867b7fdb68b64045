"""Tests for validation utilities."""

import re
from datetime import date, datetime

import pytest

from automerge_converter.utils.validation import ValidationUtils
from automerge_converter.types import ErrorType


class TestIsValidJson:
    """Tests for ValidationUtils.is_valid_json."""

    @pytest.mark.parametrize("value", [None, True, False, 0, -7, 3.5, "", "text"])
    def test_leaves_are_valid(self, value):
        assert ValidationUtils.is_valid_json(value)

    def test_empty_containers(self):
        assert ValidationUtils.is_valid_json({})
        assert ValidationUtils.is_valid_json({"items": []})
        assert ValidationUtils.is_valid_json([])

    def test_sample_document(self, sample_data):
        assert ValidationUtils.is_valid_json(sample_data)

    def test_deep_nesting(self, deep_data):
        assert ValidationUtils.is_valid_json(deep_data)

    def test_nesting_beyond_recursion_limit(self):
        data = {"leaf": [1, 2.5, None]}
        for _ in range(1500):
            data = {"child": data}

        assert ValidationUtils.is_valid_json(data)
        assert ValidationUtils.describe_invalid(data) is None

    def test_tuples_are_sequences(self):
        assert ValidationUtils.is_valid_json({"pair": (1, "two")})

    @pytest.mark.parametrize("bad", [
        datetime(2024, 1, 1, 12, 0),
        date(2024, 1, 1),
        re.compile("test"),
        lambda: None,
        print,
        object(),
        {1, 2},
        b"raw",
        float("nan"),
        float("inf"),
    ])
    def test_rejects_non_json_leaf(self, bad):
        assert not ValidationUtils.is_valid_json(bad)
        assert not ValidationUtils.is_valid_json({"value": bad})

    def test_rejects_at_any_depth(self):
        data = {"a": [{"b": {"c": [1, 2, {"when": datetime.now()}]}}]}
        assert not ValidationUtils.is_valid_json(data)

    def test_rejects_non_string_keys(self):
        assert not ValidationUtils.is_valid_json({1: "one"})

    def test_rejects_custom_objects(self):
        class Point:
            def __init__(self):
                self.x = 1

        assert not ValidationUtils.is_valid_json({"point": Point()})

    def test_rejects_cycles(self):
        data = {"a": {}}
        data["a"]["back"] = data
        assert not ValidationUtils.is_valid_json(data)

        items = [1]
        items.append(items)
        assert not ValidationUtils.is_valid_json(items)

    def test_shared_references_are_not_cycles(self):
        shared = {"x": 1}
        assert ValidationUtils.is_valid_json({"a": shared, "b": shared, "c": [shared, shared]})

    def test_does_not_modify_input(self, sample_data):
        before = repr(sample_data)
        ValidationUtils.is_valid_json(sample_data)
        assert repr(sample_data) == before


class TestDescribeInvalid:
    """Tests for ValidationUtils.describe_invalid."""

    def test_valid_value(self, sample_data):
        assert ValidationUtils.describe_invalid(sample_data) is None

    def test_points_at_offending_path(self):
        message = ValidationUtils.describe_invalid({"events": [1, {"at": datetime.now()}]})
        assert message == "$.events[1].at: unsupported type datetime"

    def test_deeply_nested_offender(self):
        data = {"when": datetime.now()}
        for _ in range(1500):
            data = {"child": [data]}

        assert not ValidationUtils.is_valid_json(data)
        message = ValidationUtils.describe_invalid(data)
        assert message.startswith("$.child[0].child[0]")
        assert message.endswith(".when: unsupported type datetime")

    def test_reports_cycle(self):
        data = {}
        data["self"] = data
        assert "circular reference" in ValidationUtils.describe_invalid(data)


class TestValidateJsonString:
    """Tests for ValidationUtils.validate_json_string."""

    def test_valid_json(self):
        result = ValidationUtils.validate_json_string('{"hello": "world"}')

        assert result.is_valid
        assert len(result.errors) == 0
        assert result.warnings == []

    def test_empty_json(self):
        result = ValidationUtils.validate_json_string("   ")

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "empty" in result.errors[0].message.lower()

    def test_invalid_syntax(self):
        result = ValidationUtils.validate_json_string('{"hello": "world"')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "syntax" in result.errors[0].message.lower()
        assert result.errors[0].location.startswith("line 1")

    def test_rejects_nan_constant(self):
        result = ValidationUtils.validate_json_string('{"value": NaN}')

        assert not result.is_valid
        assert "NaN" in result.errors[0].message

    def test_non_object_root_warns(self):
        result = ValidationUtils.validate_json_string('[1, 2, 3]')

        assert result.is_valid
        assert "Root element is list" in result.warnings[0]
