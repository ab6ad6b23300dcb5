"""pytest plugin for json-assert-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_assert_diff import CompareMode, DiffConfig, assert_json_matches


@pytest.fixture(scope="session")
def assert_json_matched() -> Any:
    """Fixture that returns a callable JSON diff asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh JsonComparator per call).

    Usage in tests::

        def test_payload(assert_json_matched):
            assert_json_matched({"id": 1}, {"id": 1})

        def test_partial(assert_json_matched):
            assert_json_matched(
                {"id": 1, "name": "x"}, {"id": 1}, mode="inclusive"
            )

    Returns:
        A callable ``_assert(actual, expected, mode=CompareMode.EXACT, config=None)``
        that raises ``AssertionError`` listing every difference.
    """

    def _assert(
        actual: Any,
        expected: Any,
        mode: CompareMode = CompareMode.EXACT,
        config: DiffConfig | None = None,
    ) -> None:
        assert_json_matches(actual, expected, mode=mode, config=config)

    return _assert


@pytest.fixture(scope="session")
def assert_json_included() -> Any:
    """Fixture that returns an inclusive-mode JSON asserter.

    Usage in tests::

        def test_user(assert_json_included):
            assert_json_included(actual=response_json, expected={"id": 1})

    Returns:
        A callable ``_assert(actual, expected, config=None)`` that raises
        ``AssertionError`` when ``actual`` lacks or contradicts anything
        ``expected`` declares.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
    ) -> None:
        assert_json_matches(actual, expected, mode=CompareMode.INCLUSIVE, config=config)

    return _assert
