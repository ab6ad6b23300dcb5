"""Integrations subpackage for json-assert-diff.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_json_matched`` and ``assert_json_included`` fixtures.

The plugin module is loaded by pytest itself; it is not imported here so
that importing json_assert_diff never pulls in pytest.
"""

from __future__ import annotations

__all__: list[str] = []
