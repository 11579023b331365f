"""Error taxonomy for the track editor control.

Only two conditions are fatal: the mount container cannot be found, or the
configuration violates the geometry invariants. Everything else (negative item
durations, drags far off the ruler) degrades to odd-looking geometry instead of
raising.
"""

from __future__ import annotations


class TrackTimeError(Exception):
    """Base class for all errors raised by tracktime."""


class ContainerNotFoundError(TrackTimeError, LookupError):
    def __init__(self, container: object):
        super().__init__(f"track container not found: {container!r}")
        self.container = container


class InvalidConfigurationError(TrackTimeError, ValueError):
    pass


__all__ = ["TrackTimeError", "ContainerNotFoundError", "InvalidConfigurationError"]
