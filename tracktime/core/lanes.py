"""Vertical lane allocation for track items."""

from __future__ import annotations

from .config import LANE_GAP, LANE_ORIGIN, TrackConfig


class LaneAllocator:
    """Maps insertion order to a lane y-coordinate.

    Lanes are never reused; there is no item removal.
    """

    def __init__(self, config: TrackConfig):
        self._top = config.top
        self._pitch = config.item_height + LANE_GAP

    def allocate(self, item_count: int) -> float:
        return self._top + LANE_ORIGIN + item_count * self._pitch


__all__ = ["LaneAllocator"]
