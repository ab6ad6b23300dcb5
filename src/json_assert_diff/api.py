"""Public API functions for json-assert-diff.

This module provides the user-facing functions: compare, diff, is_equal,
is_included, assert_json_eq and assert_json_include.  Each call creates a
fresh JsonComparator to guarantee zero global state mutation between calls.

Both assertion helpers accept their arguments positionally or by name, so
``assert_json_include(actual=response, expected={"id": 1})`` reads
unambiguously at the call site.
"""

from __future__ import annotations

from typing import Any

from json_assert_diff.algorithm.config import CompareMode, DiffConfig
from json_assert_diff.comparator import JsonComparator
from json_assert_diff.differences import Difference
from json_assert_diff.report import indent
from json_assert_diff.result import ComparisonResult

__all__ = [
    "assert_json_eq",
    "assert_json_include",
    "assert_json_matches",
    "compare",
    "diff",
    "is_equal",
    "is_included",
]


def compare(
    actual: Any,
    expected: Any,
    mode: CompareMode = CompareMode.EXACT,
    config: DiffConfig | None = None,
) -> ComparisonResult:
    """Compare two JSON values and return a ComparisonResult.

    Args:
        actual:   JSON value produced by the code under test.
        expected: Reference JSON value.
        mode:     EXACT (default) or INCLUSIVE.
        config:   Algorithm options.  Defaults to ``DiffConfig()`` when None.

    Returns:
        A ``ComparisonResult`` with the ordered differences and the mode.
    """
    comparator = JsonComparator(config=config)
    return comparator.compare(actual, expected, mode=mode)


def diff(
    actual: Any,
    expected: Any,
    mode: CompareMode = CompareMode.EXACT,
    config: DiffConfig | None = None,
) -> list[Difference]:
    """Return the ordered list of differences between two JSON values."""
    return list(compare(actual, expected, mode=mode, config=config).differences)


def is_equal(actual: Any, expected: Any, config: DiffConfig | None = None) -> bool:
    """Return True if the two values match exactly."""
    return compare(actual, expected, CompareMode.EXACT, config).matches


def is_included(actual: Any, expected: Any, config: DiffConfig | None = None) -> bool:
    """Return True if everything ``expected`` declares is present in ``actual``."""
    return compare(actual, expected, CompareMode.INCLUSIVE, config).matches


def assert_json_matches(
    actual: Any,
    expected: Any,
    mode: CompareMode = CompareMode.EXACT,
    config: DiffConfig | None = None,
) -> None:
    """Assert that ``actual`` matches ``expected`` under ``mode``.

    Raises:
        AssertionError: When any difference is found.  The message is the
            rendered report indented by four spaces and surrounded by blank
            lines.
    """
    result = compare(actual, expected, mode=mode, config=config)
    if not result.matches:
        raise AssertionError(f"\n\n{indent(result.report(), 4)}\n\n")


def assert_json_eq(
    actual: Any,
    expected: Any,
    config: DiffConfig | None = None,
) -> None:
    """Assert that two JSON values are exactly equal.

    Example::

        assert_json_eq(actual={"a": 1}, expected={"a": 1})

    Raises:
        AssertionError: With one block per difference.
    """
    assert_json_matches(actual, expected, CompareMode.EXACT, config)


def assert_json_include(
    actual: Any,
    expected: Any,
    config: DiffConfig | None = None,
) -> None:
    """Assert that ``actual`` contains everything ``expected`` declares.

    Extra object keys and trailing array elements in ``actual`` are allowed
    at every level, so a test can pin down just the part of a large
    document it cares about.

    Example::

        assert_json_include(
            actual={"a": {"b": 1}, "c": 2},
            expected={"a": {}},
        )

    Raises:
        AssertionError: With one block per difference.
    """
    assert_json_matches(actual, expected, CompareMode.INCLUSIVE, config)
