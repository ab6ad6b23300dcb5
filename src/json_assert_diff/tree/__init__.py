"""Tree subpackage for JSON location and kind primitives.

Re-exports the public API for the tree module:
- Path: immutable key/index path rendered as ``.a.b[0]``
- KeySegment / IndexSegment: the two path step kinds
- ValueKind: StrEnum of the six JSON value kinds
- kind_of: classifies a Python value into a ValueKind
- validate_json: rejects trees holding non-JSON values
"""

from json_assert_diff.tree.nodes import JsonValue, ValueKind, kind_of, validate_json
from json_assert_diff.tree.path import ROOT_LABEL, IndexSegment, KeySegment, Path

__all__ = [
    "ROOT_LABEL",
    "IndexSegment",
    "JsonValue",
    "KeySegment",
    "Path",
    "ValueKind",
    "kind_of",
    "validate_json",
]
