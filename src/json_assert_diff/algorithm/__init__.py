"""algorithm subpackage: public API for the structural diff algorithm.

Provides the recursive diff, its configuration, and the comparison modes.
Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_assert_diff.algorithm import CompareMode, diff

    diffs = diff({"a": {"b": 1}}, {"a": {"b": 2}}, mode=CompareMode.EXACT)
    str(diffs[0].path)   # ".a.b"
"""

from __future__ import annotations

from json_assert_diff.algorithm.config import ArrayLengthPolicy, CompareMode, DiffConfig
from json_assert_diff.algorithm.diff import atoms_equal, diff

__all__ = ["ArrayLengthPolicy", "CompareMode", "DiffConfig", "atoms_equal", "diff"]
