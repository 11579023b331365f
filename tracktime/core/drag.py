"""Drag constraint engine.

Every draggable node carries a bound function with the signature
``(proposed: Position, current_y: float) -> Position``. The rendering surface
calls it on each movement tick of an active drag and moves the node to the
returned position instead of the raw proposal. Positions are scene
coordinates, the same space the pan offset is recorded in. Vertical movement is never
allowed: the returned y is always the node's current y.

Two rules exist:

* items and the pointer may move right freely but never left of the current
  pan offset (`constrain_to_offset` / `OffsetBound`);
* the pan surface may move left freely but never right of its origin
  (`constrain_surface`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, NamedTuple


class Position(NamedTuple):
    x: float
    y: float


BoundFunc = Callable[[Position, float], Position]


@dataclass
class PanState:
    """Horizontal translation of the pan surface (always <= 0)."""

    offset: float = 0.0


def constrain_to_offset(
    proposed: Position, current_y: float, offset: float
) -> Position:
    x = proposed.x if proposed.x > offset else offset
    return Position(x, current_y)


def constrain_surface(proposed: Position, current_y: float) -> Position:
    x = proposed.x if proposed.x < 0 else 0.0
    return Position(x, current_y)


def surface_bound(proposed: Position, current_y: float) -> Position:
    return constrain_surface(proposed, current_y)


class OffsetBound:
    """Bound for items and the pointer.

    Holds the editor's `PanState` itself, not its value, so a pan that ends
    between two drags is seen by the next drag tick.
    """

    def __init__(self, pan: PanState):
        self._pan = pan

    def __call__(self, proposed: Position, current_y: float) -> Position:
        return constrain_to_offset(proposed, current_y, self._pan.offset)


@dataclass
class DragEvent:
    """Drag-end notification delivered to a node and then to its ancestors.

    Handlers set `cancel_bubble` to keep the event from reaching the parent
    node's drag-end handlers.
    """

    target: Any
    x: float
    y: float
    cancel_bubble: bool = False


__all__ = [
    "BoundFunc",
    "DragEvent",
    "OffsetBound",
    "PanState",
    "Position",
    "constrain_surface",
    "constrain_to_offset",
    "surface_bound",
]
