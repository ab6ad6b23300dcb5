"""ValueKind StrEnum and kind classification for JSON values.

Maps any Python value produced by ``json.loads`` onto one of the six JSON
kinds.  The comparator dispatches on these kinds; two values of different
kinds are never compared field by field.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

__all__ = ["JsonValue", "ValueKind", "kind_of", "validate_json"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class ValueKind(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"    : JSON null (``None``)
    - BOOLEAN -> "boolean" : ``true`` / ``false``
    - NUMBER  -> "number"  : integer or floating point number
    - STRING  -> "string"  : JSON string
    - ARRAY   -> "array"   : JSON array (``list``)
    - OBJECT  -> "object"  : JSON object (``dict``)
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def is_atom(self) -> bool:
        """True for leaf kinds (null, boolean, number, string)."""
        return self not in (ValueKind.ARRAY, ValueKind.OBJECT)


def kind_of(value: Any) -> ValueKind:
    """Return the JSON kind of ``value``.

    Args:
        value: Any valid JSON value (dict, list, str, int, float, bool, None).

    Returns:
        The matching ``ValueKind``.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    # bool MUST be checked before int: bool subclasses int in Python
    if isinstance(value, bool):
        return ValueKind.BOOLEAN

    if isinstance(value, dict):
        return ValueKind.OBJECT

    if isinstance(value, list):
        return ValueKind.ARRAY

    if isinstance(value, str):
        return ValueKind.STRING

    if isinstance(value, (int, float)):
        return ValueKind.NUMBER

    if value is None:
        return ValueKind.NULL

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def validate_json(value: Any) -> None:
    """Check that ``value`` and everything beneath it is a JSON value.

    Args:
        value: The value to check.

    Raises:
        TypeError: On a non-JSON value or non-string object key anywhere in
            the tree.
    """
    stack: list[Any] = [value]
    while stack:
        current = stack.pop()
        kind = kind_of(current)

        if kind == ValueKind.OBJECT:
            for key, child in current.items():
                if not isinstance(key, str):
                    raise TypeError(f"JSON object keys must be str, got {type(key)!r}")
                stack.append(child)
        elif kind == ValueKind.ARRAY:
            stack.extend(current)
