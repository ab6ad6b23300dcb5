"""Difference records produced by the diff algorithm.

Each Difference pairs the Path where two JSON trees disagree with a
DifferenceKind variant describing how they disagree.  All records are
frozen dataclasses: they are created once by the algorithm and never
mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_assert_diff.tree.nodes import ValueKind
from json_assert_diff.tree.path import Path

__all__ = [
    "Difference",
    "DifferenceKind",
    "ExtraKeyInActual",
    "LengthMismatch",
    "MissingKeyInActual",
    "TypeMismatch",
    "ValueMismatch",
]


@dataclass(frozen=True, slots=True)
class ValueMismatch:
    """Both sides are present and of the same kind, but unequal."""

    actual: Any
    expected: Any


@dataclass(frozen=True, slots=True)
class TypeMismatch:
    """The two sides are of different JSON kinds.

    Attributes:
        actual:        The full actual value at this path.
        expected:      The full expected value at this path.
        actual_type:   Kind of ``actual``.
        expected_type: Kind of ``expected``.
    """

    actual: Any
    expected: Any
    actual_type: ValueKind
    expected_type: ValueKind


@dataclass(frozen=True, slots=True)
class MissingKeyInActual:
    """``expected`` has a key or index that ``actual`` lacks."""

    expected_value: Any


@dataclass(frozen=True, slots=True)
class ExtraKeyInActual:
    """``actual`` has a key or index that ``expected`` lacks (EXACT mode only)."""

    actual_value: Any


@dataclass(frozen=True, slots=True)
class LengthMismatch:
    """``actual`` array is longer than ``expected`` (EXACT mode, SUMMARY policy)."""

    actual_len: int
    expected_len: int


DifferenceKind = (
    ValueMismatch | TypeMismatch | MissingKeyInActual | ExtraKeyInActual | LengthMismatch
)


@dataclass(frozen=True, slots=True)
class Difference:
    """A single disagreement between two JSON trees.

    Attributes:
        path: Location of the disagreement; rendered e.g. ``".a.b[0]"``.
        kind: One of the DifferenceKind variants.
    """

    path: Path
    kind: DifferenceKind

    def __str__(self) -> str:
        # Local import: report depends on this module.
        from json_assert_diff.report import render_difference

        return render_difference(self)
