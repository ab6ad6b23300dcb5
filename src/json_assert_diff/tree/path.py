"""Path and Segment types locating a value inside a JSON tree.

A Path is a persistent singly-linked list: each instance holds its parent
and the one segment it adds.  Appending allocates a single new node and
never touches the receiver, so sibling branches of a recursive walk share
their common prefix without ever observing each other's segments.

Rendering:
- Root renders as ``"(root)"``
- Object keys render as ``".name"``
- Array indices render as ``"[n]"``

e.g. ``Path().append_key("data").append_key("users").append_index(0)``
renders as ``".data.users[0]"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

__all__ = ["ROOT_LABEL", "IndexSegment", "KeySegment", "Path", "Segment"]

ROOT_LABEL = "(root)"


@dataclass(frozen=True, slots=True)
class KeySegment:
    """An object-key step."""

    name: str

    def render(self) -> str:
        return f".{self.name}"


@dataclass(frozen=True, slots=True)
class IndexSegment:
    """An array-index step."""

    index: int

    def render(self) -> str:
        return f"[{self.index}]"


Segment = KeySegment | IndexSegment


@dataclass(frozen=True, slots=True, eq=False)
class Path:
    """Immutable location inside a JSON tree.

    ``Path()`` is the root.  Equality and hashing are by segment sequence,
    so two independently built paths to the same location are equal.

    Example::

        path = Path().append_key("a").append_index(2)
        str(path)        # ".a[2]"
        path.segments    # (KeySegment(name="a"), IndexSegment(index=2))
    """

    parent: Path | None = None
    segment: Segment | None = None

    @classmethod
    def empty(cls) -> Path:
        """Return the root path."""
        return cls()

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def append(self, segment: Segment) -> Path:
        """Return a new path one segment longer than this one."""
        return Path(parent=self, segment=segment)

    def append_key(self, name: str) -> Path:
        return self.append(KeySegment(name))

    def append_index(self, index: int) -> Path:
        return self.append(IndexSegment(index))

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def is_root(self) -> bool:
        return self.segment is None

    @property
    def segments(self) -> tuple[Segment, ...]:
        """Segments from the root down to this location."""
        return tuple(self._walk())

    def _walk(self) -> Iterator[Segment]:
        collected: list[Segment] = []
        node: Path | None = self
        while node is not None and node.segment is not None:
            collected.append(node.segment)
            node = node.parent
        return reversed(collected)

    def render(self) -> str:
        """Render the canonical string form used in difference reports."""
        if self.is_root:
            return ROOT_LABEL
        return "".join(segment.render() for segment in self._walk())

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Path({self.render()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.segments == other.segments

    def __hash__(self) -> int:
        return hash(self.segments)
