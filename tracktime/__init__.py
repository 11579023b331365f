"""Top-level package exports.

Public API surface (keep minimal):
 - TrackEditor (the control) and its configuration/records
 - NotificationHub, Events (change notifications)
 - error types

`MainWindow` (demo host) lives in `tracktime.ui.main_window`.
"""

from .core.config import TrackConfig  # noqa: F401
from .core.errors import (  # noqa: F401
    ContainerNotFoundError,
    InvalidConfigurationError,
    TrackTimeError,
)
from .core.events import Events, NotificationHub  # noqa: F401
from .core.track import ItemSpec, Pointer, TrackItem  # noqa: F401
from .track_editor import EditorState, TrackEditor  # noqa: F401

__all__ = [
    "ContainerNotFoundError",
    "EditorState",
    "Events",
    "InvalidConfigurationError",
    "ItemSpec",
    "NotificationHub",
    "Pointer",
    "TrackConfig",
    "TrackEditor",
    "TrackItem",
    "TrackTimeError",
]
