"""Validation utilities for JSON values and JSON text."""

import json
import math
from typing import Any, List, Optional, Set, Tuple
from ..types import ValidationResult, ValidationIssue, ErrorType


class ValidationUtils:
    """Utility class for validating JSON data before conversion."""

    @staticmethod
    def is_valid_json(value: Any) -> bool:
        """
        Check that a value is plain JSON.

        None, booleans, finite numbers and strings are valid leaves. Lists
        and tuples are valid when every element is; dicts are valid when
        every key is a string and every value is valid. Anything else
        (datetimes, compiled patterns, callables, sentinels, sets, bytes,
        class instances) is rejected, as is any container that contains
        itself. Nesting depth is not limited by the interpreter stack.

        Args:
            value: Value to check

        Returns:
            True if the value is plain JSON, False otherwise
        """
        return ValidationUtils._find_invalid(value, None) is None

    @staticmethod
    def describe_invalid(value: Any, path: str = "$") -> Optional[str]:
        """
        Locate the first non-JSON element of a value.

        Args:
            value: Value to inspect
            path: Path prefix used in the description

        Returns:
            Description of the offending element, or None if the value is valid
        """
        return ValidationUtils._find_invalid(value, path)

    @staticmethod
    def _is_valid_leaf(value: Any) -> bool:
        if value is None or isinstance(value, (bool, str, int)):
            return True
        if isinstance(value, float):
            return math.isfinite(value)
        return False

    @staticmethod
    def _find_invalid(value: Any, root_path: Optional[str]) -> Optional[str]:
        """
        Depth-first walk with an explicit stack.

        Entering a container adds its id to the ancestor set and pushes an
        exit entry below its children, so the set always holds exactly the
        containers on the current path. Paths are only built when root_path
        is given.
        """
        with_paths = root_path is not None
        ancestors: Set[int] = set()
        stack: List[Tuple[Any, Optional[str], bool]] = [(value, root_path, False)]

        while stack:
            item, path, leaving = stack.pop()
            if leaving:
                ancestors.remove(id(item))
                continue

            if not isinstance(item, (list, tuple, dict)):
                if ValidationUtils._is_valid_leaf(item):
                    continue
                return f"{path}: unsupported type {type(item).__name__}" if with_paths else "invalid"

            if id(item) in ancestors:
                return f"{path}: circular reference" if with_paths else "invalid"

            if isinstance(item, dict):
                for key in item:
                    if not isinstance(key, str):
                        return f"{path}: non-string key {key!r}" if with_paths else "invalid"
                children = [
                    (child, f"{path}.{key}" if with_paths else None)
                    for key, child in item.items()
                ]
            else:
                children = [
                    (child, f"{path}[{index}]" if with_paths else None)
                    for index, child in enumerate(item)
                ]

            ancestors.add(id(item))
            stack.append((item, path, True))
            # reversed so the first child is visited first
            stack.extend((child, child_path, False) for child, child_path in reversed(children))

        return None

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors: List[ValidationIssue] = []
        warnings: List[str] = []

        if not json_string.strip():
            errors.append(ValidationIssue(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            data = json.loads(json_string, parse_constant=ValidationUtils._reject_constant)
        except json.JSONDecodeError as e:
            errors.append(ValidationIssue(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        except ValueError as e:
            errors.append(ValidationIssue(
                type=ErrorType.SYNTAX,
                message=str(e),
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if not isinstance(data, dict):
            warnings.append(
                f"Root element is {type(data).__name__}; Automerge documents need an object at the root"
            )

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def _reject_constant(name: str) -> Any:
        raise ValueError(f"Invalid JSON syntax: {name} is not a JSON value")
