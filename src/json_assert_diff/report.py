"""Human-readable rendering of Difference records.

Every DifferenceKind maps to its own fixed wording so that failure output
is stable across runs.  Values are pretty-printed as JSON (2-space indent)
and indented by eight spaces beneath their label, e.g.::

    json atoms at path ".data.users[0].country.name" are not equal:
        expected:
            "Sweden"
        actual:
            "Denmark"

A report is the rendered blocks joined by a blank line.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from json_assert_diff.differences import (
    Difference,
    ExtraKeyInActual,
    LengthMismatch,
    MissingKeyInActual,
    TypeMismatch,
    ValueMismatch,
)

__all__ = ["indent", "render_difference", "render_report"]

_VALUE_INDENT = 8


def indent(text: str, level: int) -> str:
    """Prefix every line of ``text`` with ``level`` spaces."""
    prefix = " " * level
    return "\n".join(f"{prefix}{line}" for line in text.split("\n"))


def _pretty(value: Any) -> str:
    return indent(json.dumps(value, indent=2, ensure_ascii=False), _VALUE_INDENT)


def _value_blocks(actual: Any, expected: Any) -> str:
    return (
        f"    expected:\n{_pretty(expected)}\n"
        f"    actual:\n{_pretty(actual)}"
    )


def render_difference(difference: Difference) -> str:
    """Render one difference as a message block.

    Args:
        difference: The record to render.

    Returns:
        The message block, without a trailing newline.
    """
    path = difference.path.render()
    kind = difference.kind

    if isinstance(kind, ValueMismatch):
        return (
            f'json atoms at path "{path}" are not equal:\n'
            f"{_value_blocks(kind.actual, kind.expected)}"
        )

    if isinstance(kind, TypeMismatch):
        return (
            f'json atoms at path "{path}" are of different types '
            f"(expected {kind.expected_type}, actual {kind.actual_type}):\n"
            f"{_value_blocks(kind.actual, kind.expected)}"
        )

    if isinstance(kind, MissingKeyInActual):
        return f'json atom at path "{path}" is missing from actual'

    if isinstance(kind, ExtraKeyInActual):
        return f'json atom at path "{path}" is missing from expected'

    if isinstance(kind, LengthMismatch):
        return (
            f'json arrays at path "{path}" have different lengths:\n'
            f"    expected: {kind.expected_len}\n"
            f"    actual: {kind.actual_len}"
        )

    raise TypeError(f"Unknown difference kind: {type(kind)!r}")


def render_report(differences: Iterable[Difference]) -> str:
    """Render all differences, separated by blank lines.

    Returns an empty string when there are no differences.
    """
    return "\n\n".join(render_difference(d) for d in differences)
