"""Shared type aliases, enums, and errors for tick-blast."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# (x, y) on the arena grid, origin top-left.
Tile = tuple[int, int]


class Element(Enum):
    """The four arena quadrants, in fixed order."""

    FIRE = "fire"
    SHADOW = "shadow"
    ICE = "ice"
    LIGHTNING = "lightning"


class EventKind(Enum):
    """Kind of a single timeline entry."""

    EMPTY = "empty"
    RESET = "reset"
    GLYPH = "glyph"
    STAGE1 = "stage1"
    STAGE2 = "stage2"
    END = "end"


_ELEMENT_KINDS = frozenset({EventKind.GLYPH, EventKind.STAGE1, EventKind.STAGE2})


@dataclass(frozen=True)
class Event:
    """One tick of a compiled timeline.

    GLYPH, STAGE1 and STAGE2 carry the element they refer to; the other
    kinds carry none.
    """

    kind: EventKind
    element: Element | None = None

    def __post_init__(self) -> None:
        if (self.kind in _ELEMENT_KINDS) != (self.element is not None):
            raise InvariantError(f"malformed event {self.kind.value}/{self.element}")

    def __str__(self) -> str:
        if self.element is None:
            return self.kind.value
        return f"{self.kind.value}({self.element.value})"


Pattern = tuple[Element, ...]
Timeline = tuple[Event, ...]


class ConfigError(ValueError):
    """Raised when round options are outside their documented domain."""


class InvariantError(AssertionError):
    """Raised when a pattern, timeline, or round state breaks an engine invariant."""


class ReentrantTickError(RuntimeError):
    """Raised when tick() is entered while another tick is still running."""
