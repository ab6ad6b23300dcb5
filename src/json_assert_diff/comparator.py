"""JsonComparator: orchestrator that wires DiffConfig + the diff algorithm.

This is the wiring layer between the raw algorithm and the public API.
It validates both inputs, runs the recursive diff from the root path, and
packages the differences into a ComparisonResult.

Architecture:
- compare() validates ``actual`` and ``expected`` up front so a non-JSON
  value anywhere in either tree raises TypeError before any walking, even
  inside subtrees the diff itself would not visit (e.g. a missing key's
  value).
- The mode is a per-call argument; the config is fixed per instance.
- The comparator keeps no state between calls: the same inputs always
  produce an equal ComparisonResult.
"""

from __future__ import annotations

import logging
from typing import Any

from json_assert_diff.algorithm.config import CompareMode, DiffConfig
from json_assert_diff.algorithm.diff import diff
from json_assert_diff.result import ComparisonResult
from json_assert_diff.tree.nodes import validate_json
from json_assert_diff.tree.path import Path

__all__ = ["JsonComparator"]

logger = logging.getLogger(__name__)


class JsonComparator:
    """Orchestrator for structural JSON comparison.

    Example::

        from json_assert_diff.comparator import JsonComparator

        cmp = JsonComparator()
        result = cmp.compare({"a": {"b": 1}}, {"a": {"b": 2}})
        result.matches   # False
        result.paths     # [".a.b"]
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        """Initialise the comparator.

        Args:
            config: Algorithm options.  Defaults to ``DiffConfig()``.
        """
        self._config: DiffConfig = config if config is not None else DiffConfig()

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(
        self,
        actual: Any,
        expected: Any,
        mode: CompareMode = CompareMode.EXACT,
    ) -> ComparisonResult:
        """Compare two JSON values and return a ComparisonResult.

        Args:
            actual:   JSON value produced by the code under test.
            expected: Reference JSON value.
            mode:     EXACT or INCLUSIVE matching.  Plain strings
                      (``"inclusive"``) are accepted.

        Returns:
            A ``ComparisonResult`` holding the ordered differences.

        Raises:
            TypeError:  If either tree holds a value that is not JSON.
            ValueError: If ``mode`` is not a known CompareMode.
        """
        mode = CompareMode(mode)
        validate_json(actual)
        validate_json(expected)

        differences = diff(actual, expected, Path(), mode, self._config)

        logger.debug(
            "compared json values in %s mode: %d difference(s)",
            mode,
            len(differences),
        )
        return ComparisonResult(differences=tuple(differences), mode=mode)
