"""CompareMode, ArrayLengthPolicy and DiffConfig for the diff algorithm.

CompareMode selects exact or inclusive matching and is passed per
comparison call.  DiffConfig is a frozen (immutable) dataclass holding the
remaining algorithm options, which stay constant for a comparator's life.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["ArrayLengthPolicy", "CompareMode", "DiffConfig"]


class CompareMode(StrEnum):
    """How strictly ``actual`` must match ``expected``.

    - EXACT:     Both sides must match completely.  Keys or trailing array
                 elements present only in ``actual`` are differences.
    - INCLUSIVE: ``actual`` may carry extra object keys and trailing array
                 elements; only what ``expected`` declares must match.
    """

    EXACT = auto()
    INCLUSIVE = auto()


class ArrayLengthPolicy(StrEnum):
    """How surplus trailing ``actual`` array elements are reported in EXACT mode.

    - PER_INDEX: One ExtraKeyInActual per surplus index (``[2]``, ``[3]``, ...).
    - SUMMARY:   A single LengthMismatch at the array's own path.
    """

    PER_INDEX = auto()
    SUMMARY = auto()


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for the diff algorithm.

    Attributes:
        array_length_policy: How surplus ``actual`` array elements are
            reported in EXACT mode.  Plain strings (``"summary"``) are
            accepted and coerced.  Default ``ArrayLengthPolicy.PER_INDEX``.
    """

    array_length_policy: ArrayLengthPolicy = ArrayLengthPolicy.PER_INDEX

    def __post_init__(self) -> None:
        try:
            policy = ArrayLengthPolicy(self.array_length_policy)
        except ValueError:
            msg = (
                "array_length_policy must be one of "
                f"{[p.value for p in ArrayLengthPolicy]}, "
                f"got {self.array_length_policy!r}"
            )
            raise ValueError(msg) from None
        object.__setattr__(self, "array_length_policy", policy)
