"""Time <-> pixel mapping for the ruler and item bars.

One ruler subdivision covers ``unit1`` time units and is ``gap`` pixels wide.
The ruler itself starts at ``scale_left``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .config import MAJOR_TICK_EVERY, TrackConfig


@dataclass(frozen=True)
class Tick:
    index: int
    x: float
    major: bool


class ScaleModel:
    def __init__(self, config: TrackConfig):
        self._config = config

    @property
    def total_ticks(self) -> float:
        """Number of subdivisions across the ruler; not necessarily an integer."""
        return self._config.duration / self._config.unit1

    @property
    def ruler_length(self) -> float:
        return self.total_ticks * self._config.gap

    def pixel_offset(self, index: float) -> float:
        return self._config.scale_left + self._config.gap * index

    def width_in_pixels(self, duration: float) -> float:
        return (duration / self._config.unit1) * self._config.gap

    def time_at(self, x: float) -> float:
        """Inverse of `pixel_offset`, expressed in time units."""
        return (x - self._config.scale_left) / self._config.gap * self._config.unit1

    def ticks(self) -> Iterator[Tick]:
        # A fractional remainder of total_ticks gets no partial tick.
        total = self.total_ticks
        i = 0
        while i < total:
            yield Tick(i, self.pixel_offset(i), i % MAJOR_TICK_EVERY == 0)
            i += 1


__all__ = ["ScaleModel", "Tick"]
