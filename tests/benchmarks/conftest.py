"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 10-key flat, 1000-key nested, and a 100-level deep chain.
Each tier provides both an "equal" and a "different" pair.

The deep chain exercises path derivation: every level appends one segment,
so rendering cost must not grow with the depth of unrelated siblings.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_nested_1000() -> dict[str, Any]:
    """Generate a 1000-leaf nested document.

    Structure: 10 sections x 10 records x 10 leaf keys.
    """
    return {
        f"section_{i}": [
            {f"field_{k}": i * 100 + j * 10 + k for k in range(10)} for j in range(10)
        ]
        for i in range(10)
    }


def _make_deep_chain(depth: int) -> dict[str, Any]:
    """Generate an object/array chain ``depth`` levels deep."""
    value: Any = {"leaf": "bottom"}
    for level in range(depth):
        value = {"level": level, "child": [value]}
    return value  # type: ignore[no-any-return]


def _mutate_leaves(value: Any) -> Any:
    """Return a copy with every integer leaf incremented."""
    if isinstance(value, dict):
        return {k: _mutate_leaves(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_mutate_leaves(v) for v in value]
    if isinstance(value, int) and not isinstance(value, bool):
        return value + 1
    return value


@pytest.fixture(scope="session")
def pair_10key_equal() -> tuple[dict[str, Any], dict[str, Any]]:
    doc = generate_flat_object(10)
    return doc, copy.deepcopy(doc)


@pytest.fixture(scope="session")
def pair_10key_different() -> tuple[dict[str, Any], dict[str, Any]]:
    return generate_flat_object(10), generate_flat_object(10, prefix="other")


@pytest.fixture(scope="session")
def pair_1000key_equal() -> tuple[dict[str, Any], dict[str, Any]]:
    doc = _make_nested_1000()
    return doc, copy.deepcopy(doc)


@pytest.fixture(scope="session")
def pair_1000key_different() -> tuple[dict[str, Any], dict[str, Any]]:
    doc = _make_nested_1000()
    return doc, _mutate_leaves(doc)


@pytest.fixture(scope="session")
def pair_deep_equal() -> tuple[dict[str, Any], dict[str, Any]]:
    doc = _make_deep_chain(100)
    return doc, copy.deepcopy(doc)


@pytest.fixture(scope="session")
def pair_deep_different() -> tuple[dict[str, Any], dict[str, Any]]:
    doc = _make_deep_chain(100)
    return doc, _mutate_leaves(doc)
