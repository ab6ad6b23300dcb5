"""Structural diff of two JSON values.

Walks ``actual`` and ``expected`` simultaneously and records every location
where they disagree under the given CompareMode.

Architecture:
- Kind check first: values of different JSON kinds produce one
  TypeMismatch and the walk does not descend below them.
- ATOMS:   compared by value.  Numbers compare per representation, so an
           int and a float never match (``1`` vs ``1.0``).
- OBJECTS: expected keys in iteration order (missing or recurse), then in
           EXACT mode the keys only ``actual`` has, in actual's order.
- ARRAYS:  index-wise over the common prefix, then surplus trailing
           elements on either side.

The walk keeps its own stack of pending work instead of recursing, so
nesting depth is limited only by memory.  Each work item derives its child
Path from the parent's, which is never modified.
"""

from __future__ import annotations

from typing import Any

from json_assert_diff.algorithm.config import ArrayLengthPolicy, CompareMode, DiffConfig
from json_assert_diff.differences import (
    Difference,
    ExtraKeyInActual,
    LengthMismatch,
    MissingKeyInActual,
    TypeMismatch,
    ValueMismatch,
)
from json_assert_diff.tree.nodes import ValueKind, kind_of
from json_assert_diff.tree.path import Path

__all__ = ["atoms_equal", "diff"]


def diff(
    actual: Any,
    expected: Any,
    path: Path | None = None,
    mode: CompareMode = CompareMode.EXACT,
    config: DiffConfig | None = None,
) -> list[Difference]:
    """Return every difference between ``actual`` and ``expected``.

    Args:
        actual:   JSON value produced by the code under test.
        expected: Reference JSON value.
        path:     Location of this pair within the enclosing tree.  Defaults
                  to the root path.
        mode:     EXACT or INCLUSIVE matching.  Plain strings
                  (``"inclusive"``) are accepted.
        config:   Algorithm options.  Defaults to ``DiffConfig()``.

    Returns:
        Differences in depth-first, per-field order.  Empty when the values
        match under ``mode``.

    Raises:
        TypeError:  If either side contains a value that is not a JSON type.
        ValueError: If ``mode`` is not a known CompareMode.
    """
    return _walk(
        actual,
        expected,
        path if path is not None else Path(),
        CompareMode(mode),
        config if config is not None else DiffConfig(),
    )


def atoms_equal(actual: Any, expected: Any, kind: ValueKind) -> bool:
    """Compare two atoms already known to share ``kind``.

    Numbers are equal only when both are ints or both are floats and
    their values are equal.  No tolerance is applied.
    """
    if kind == ValueKind.NUMBER:
        return isinstance(actual, float) == isinstance(expected, float) and bool(
            actual == expected
        )
    return bool(actual == expected)


# ---------------------------------------------------------------------------
# Work-stack traversal
# ---------------------------------------------------------------------------

# A pending comparison of (actual, expected, path), or a Difference already
# decided and waiting for its turn in the output.
_WorkItem = tuple[Any, Any, Path] | Difference


def _walk(
    actual: Any,
    expected: Any,
    path: Path,
    mode: CompareMode,
    config: DiffConfig,
) -> list[Difference]:
    acc: list[Difference] = []
    stack: list[_WorkItem] = [(actual, expected, path)]

    while stack:
        item = stack.pop()
        if isinstance(item, Difference):
            acc.append(item)
            continue

        actual, expected, path = item
        actual_kind = kind_of(actual)
        expected_kind = kind_of(expected)

        if actual_kind != expected_kind:
            acc.append(
                Difference(
                    path,
                    TypeMismatch(
                        actual=actual,
                        expected=expected,
                        actual_type=actual_kind,
                        expected_type=expected_kind,
                    ),
                )
            )
            continue

        if expected_kind.is_atom:
            if not atoms_equal(actual, expected, expected_kind):
                acc.append(
                    Difference(path, ValueMismatch(actual=actual, expected=expected))
                )
            continue

        if expected_kind == ValueKind.OBJECT:
            pending = _object_items(actual, expected, path, mode)
        else:
            pending = _array_items(actual, expected, path, mode, config)

        # LIFO stack: push in reverse so items are taken in output order
        stack.extend(reversed(pending))

    return acc


def _object_items(
    actual: dict[str, Any],
    expected: dict[str, Any],
    path: Path,
    mode: CompareMode,
) -> list[_WorkItem]:
    """Work items for one object pair, in output order."""
    items: list[_WorkItem] = []
    for key, expected_value in expected.items():
        key_path = path.append_key(key)
        if key not in actual:
            items.append(
                Difference(key_path, MissingKeyInActual(expected_value=expected_value))
            )
        else:
            items.append((actual[key], expected_value, key_path))

    if mode == CompareMode.INCLUSIVE:
        return items

    for key, actual_value in actual.items():
        if key not in expected:
            items.append(
                Difference(
                    path.append_key(key), ExtraKeyInActual(actual_value=actual_value)
                )
            )
    return items


def _array_items(
    actual: list[Any],
    expected: list[Any],
    path: Path,
    mode: CompareMode,
    config: DiffConfig,
) -> list[_WorkItem]:
    """Work items for one array pair, in output order."""
    common = min(len(actual), len(expected))
    items: list[_WorkItem] = [
        (actual[idx], expected[idx], path.append_index(idx)) for idx in range(common)
    ]

    # Trailing expected elements are treated like absent object keys
    for idx in range(common, len(expected)):
        items.append(
            Difference(
                path.append_index(idx),
                MissingKeyInActual(expected_value=expected[idx]),
            )
        )

    if mode == CompareMode.INCLUSIVE or len(actual) <= len(expected):
        return items

    if config.array_length_policy == ArrayLengthPolicy.SUMMARY:
        items.append(
            Difference(
                path,
                LengthMismatch(actual_len=len(actual), expected_len=len(expected)),
            )
        )
        return items

    for idx in range(common, len(actual)):
        items.append(
            Difference(
                path.append_index(idx), ExtraKeyInActual(actual_value=actual[idx])
            )
        )
    return items
