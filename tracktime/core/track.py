"""Records for the things placed on the track: items and the pointer."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Generic, Mapping, Optional, TypeVar, Union

from .errors import InvalidConfigurationError

M = TypeVar("M")


@dataclass(frozen=True)
class ItemSpec(Generic[M]):
    """Caller-supplied description of an item.

    `duration` is the only field the editor reads; `data` is passed through
    untouched to change subscribers.
    """

    duration: float
    data: Optional[M] = None

    @classmethod
    def coerce(
        cls, spec: Union["ItemSpec[M]", Mapping[str, Any]]
    ) -> "ItemSpec[Any]":
        if isinstance(spec, ItemSpec):
            duration = spec.duration
        elif isinstance(spec, Mapping):
            if "duration" not in spec:
                raise InvalidConfigurationError("item spec requires a duration")
            extra = {k: v for k, v in spec.items() if k != "duration"}
            spec = cls(duration=spec["duration"], data=extra)
            duration = spec.duration
        else:
            raise InvalidConfigurationError(
                f"item spec must be an ItemSpec or a mapping, got {spec!r}"
            )
        if isinstance(duration, bool) or not isinstance(duration, Real):
            raise InvalidConfigurationError(
                f"item duration must be a number, got {duration!r}"
            )
        return spec


@dataclass(eq=False)
class TrackItem(Generic[M]):
    id: str
    options: ItemSpec[M]
    lane_index: int
    lane_y: float
    width: float
    current_x: float = 0.0
    # Scene handles, owned by the editor
    slide: Any = field(default=None, repr=False)
    bar: Any = field(default=None, repr=False)

    @property
    def duration(self) -> float:
        return self.options.duration


@dataclass(eq=False)
class Pointer:
    current_x: float = 0.0
    node: Any = field(default=None, repr=False)


__all__ = ["ItemSpec", "Pointer", "TrackItem"]
