"""Track configuration and fixed layout constants.

`TrackConfig` is frozen: it is resolved once when the editor is built and the
ruler geometry derived from it never changes afterwards.

Option names follow the control's external interface (``unit1``,
``itemHeight``); snake_case spellings (``item_height``) are accepted too.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Mapping, Optional, Tuple

from .errors import InvalidConfigurationError

# Lane layout
LANE_ORIGIN = 60  # distance from `top` to the first lane
LANE_GAP = 5  # spacing between consecutive lanes

# Ruler layout
SCALE_INSET = 20  # ruler starts this far right of `left`
RULER_OFFSET = 30  # ruler baseline below `top`
MAJOR_TICK_EVERY = 5
MINOR_TICK_LENGTH = 10
MAJOR_TICK_LENGTH = 20

# Pointer geometry
POINTER_HIT_WIDTH = 10
POINTER_HANDLE_HALF_WIDTH = 6
POINTER_HANDLE_SHOULDER = 8
POINTER_HANDLE_TIP = 16

DEFAULT_UNIT = 1.0
DEFAULT_DURATION = 60.0 * 60.0
DEFAULT_TOP = 0.0
DEFAULT_LEFT = 10.0
DEFAULT_GAP = 40.0
DEFAULT_ITEM_HEIGHT = 20.0

_ALIASES = {
    "itemHeight": "item_height",
}


@dataclass(frozen=True)
class TrackConfig:
    width: float
    height: float
    unit1: float = DEFAULT_UNIT
    duration: float = DEFAULT_DURATION
    top: float = DEFAULT_TOP
    left: float = DEFAULT_LEFT
    gap: float = DEFAULT_GAP
    item_height: float = DEFAULT_ITEM_HEIGHT

    def __post_init__(self):
        for name in (
            "width",
            "height",
            "unit1",
            "duration",
            "top",
            "left",
            "gap",
            "item_height",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidConfigurationError(
                    f"{name} must be a number, got {value!r}"
                )
        if self.unit1 <= 0:
            raise InvalidConfigurationError(f"unit1 must be > 0, got {self.unit1}")
        if self.gap <= 0:
            raise InvalidConfigurationError(f"gap must be > 0, got {self.gap}")
        if self.item_height <= 0:
            raise InvalidConfigurationError(
                f"item_height must be > 0, got {self.item_height}"
            )
        if self.duration < 0:
            raise InvalidConfigurationError(
                f"duration must be >= 0, got {self.duration}"
            )

    @property
    def scale_left(self) -> float:
        return self.left + SCALE_INSET

    @classmethod
    def from_options(
        cls,
        options: Mapping[str, Any],
        fallback_size: Optional[Tuple[float, float]] = None,
    ) -> "TrackConfig":
        """Build a config from constructor options.

        `width`/`height` fall back to ``fallback_size`` (the container's measured
        size) when omitted or None. Unknown keys (``container`` among them) are
        ignored.
        """
        opts = {_ALIASES.get(k, k): v for k, v in options.items() if v is not None}
        fb_w, fb_h = fallback_size if fallback_size is not None else (0.0, 0.0)
        return cls(
            width=opts.get("width", fb_w),
            height=opts.get("height", fb_h),
            unit1=opts.get("unit1", DEFAULT_UNIT),
            duration=opts.get("duration", DEFAULT_DURATION),
            top=opts.get("top", DEFAULT_TOP),
            left=opts.get("left", DEFAULT_LEFT),
            gap=opts.get("gap", DEFAULT_GAP),
            item_height=opts.get("item_height", DEFAULT_ITEM_HEIGHT),
        )


__all__ = [
    "TrackConfig",
    "LANE_ORIGIN",
    "LANE_GAP",
    "SCALE_INSET",
    "RULER_OFFSET",
    "MAJOR_TICK_EVERY",
    "MINOR_TICK_LENGTH",
    "MAJOR_TICK_LENGTH",
    "POINTER_HIT_WIDTH",
    "POINTER_HANDLE_HALF_WIDTH",
    "POINTER_HANDLE_SHOULDER",
    "POINTER_HANDLE_TIP",
]
