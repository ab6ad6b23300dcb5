"""ComparisonResult dataclass for structural comparison output.

This module provides the result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_assert_diff.algorithm.config import CompareMode
from json_assert_diff.differences import Difference
from json_assert_diff.report import render_report

__all__ = ["ComparisonResult"]


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Result of a compare() call.

    Attributes:
        differences: Every disagreement found, in depth-first per-field order.
            Empty when the values match under ``mode``.
        mode: The CompareMode the comparison ran under.
    """

    differences: tuple[Difference, ...]
    mode: CompareMode

    @property
    def matches(self) -> bool:
        """True when no differences were found."""
        return not self.differences

    @property
    def paths(self) -> list[str]:
        """Rendered path of every difference, in order."""
        return [d.path.render() for d in self.differences]

    def report(self) -> str:
        """Render the differences as the multi-block failure message."""
        return render_report(self.differences)
