"""JSON assert diff - path-qualified structural differences for test assertions."""

from __future__ import annotations

from json_assert_diff.algorithm.config import ArrayLengthPolicy, CompareMode, DiffConfig
from json_assert_diff.api import (
    assert_json_eq,
    assert_json_include,
    assert_json_matches,
    compare,
    diff,
    is_equal,
    is_included,
)
from json_assert_diff.comparator import JsonComparator
from json_assert_diff.differences import (
    Difference,
    ExtraKeyInActual,
    LengthMismatch,
    MissingKeyInActual,
    TypeMismatch,
    ValueMismatch,
)
from json_assert_diff.result import ComparisonResult
from json_assert_diff.tree.path import Path

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayLengthPolicy",
    "CompareMode",
    "ComparisonResult",
    "DiffConfig",
    "Difference",
    "ExtraKeyInActual",
    "JsonComparator",
    "LengthMismatch",
    "MissingKeyInActual",
    "Path",
    "TypeMismatch",
    "ValueMismatch",
    "assert_json_eq",
    "assert_json_include",
    "assert_json_matches",
    "compare",
    "diff",
    "is_equal",
    "is_included",
]
