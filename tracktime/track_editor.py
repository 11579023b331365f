"""Track editor control: ruler, lanes of draggable items and a playhead.

The editor owns the configuration, the pan state, the item list and the
pointer, and wires them to a `TrackSurface` mounted in a caller-supplied
container widget.

Scene layout::

    TrackSurface (QGraphicsView)
      pan surface (DragNode, z=0, bound: never right of origin)
        ruler ticks
        lane backdrops (z=0)
        item bars (DragNode, z=1, bound: never left of pan offset)
        pointer (DragNode, z=10, bound: never left of pan offset)

Public API:
    TrackEditor(container, **options) / TrackEditor.init(options)
    add_item({"duration": d, ...}) or add_item(ItemSpec(d, data)) -> TrackItem
    on(event, handler) / emit(event, *payload) / off(event, handler=None)

Events:
    "change" (Events.CHANGE): an item drag ended; payload is the TrackItem,
    whose current_x (scene x of the bar) has already been updated.
"""

from __future__ import annotations

import os
import uuid
from enum import Enum
from functools import partial
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QPainterPath
from PySide6.QtWidgets import QApplication, QWidget

from .core.config import (
    MAJOR_TICK_LENGTH,
    MINOR_TICK_LENGTH,
    POINTER_HANDLE_HALF_WIDTH,
    POINTER_HANDLE_SHOULDER,
    POINTER_HANDLE_TIP,
    POINTER_HIT_WIDTH,
    RULER_OFFSET,
    TrackConfig,
)
from .core.drag import DragEvent, OffsetBound, PanState, surface_bound
from .core.errors import ContainerNotFoundError
from .core.events import Events, Handler, NotificationHub
from .core.lanes import LaneAllocator
from .core.scale import ScaleModel
from .core.track import ItemSpec, Pointer, TrackItem
from .ui.scene import DragNode, TrackSurface

DEBUG_TRACK = bool(os.getenv("TRACKTIME_DEBUG"))  # verbose drag/pan output

RULER_COLOR = "#ffffff"
LANE_COLOR = "#353535"
ITEM_COLOR = "#177ddc"
POINTER_COLOR = "#ffffff"

Z_SURFACE = 0
Z_LANE = 0
Z_ITEM = 1
Z_POINTER = 10


class EditorState(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


def _default_id() -> str:
    return uuid.uuid4().hex


def resolve_container(container: Union[str, QWidget]) -> QWidget:
    """Find the mount widget: a QWidget as-is, or a widget by objectName."""
    if isinstance(container, QWidget):
        return container
    if isinstance(container, str) and container:
        if QApplication.instance() is not None:
            for widget in QApplication.allWidgets():
                if widget.objectName() == container:
                    return widget
    raise ContainerNotFoundError(container)


class TrackEditor:
    """Timeline control with a pannable track, item lanes and a pointer.

    Args:
        container: mount widget or its objectName.
        id_factory: produces item ids (defaults to uuid4 hex strings).
        **options: width, height, unit1, duration, top, left, gap, itemHeight.
            width/height default to the container's current size.
    """

    def __init__(
        self,
        container: Union[str, QWidget],
        *,
        id_factory: Optional[Callable[[], str]] = None,
        **options: Any,
    ):
        self.container = container
        self._options = dict(options)
        self._id_factory = id_factory or _default_id
        self._hub = NotificationHub()
        self._pan = PanState()
        self._items: List[TrackItem[Any]] = []
        self._state = EditorState.UNINITIALIZED
        self.container_widget: Optional[QWidget] = None
        self.config: Optional[TrackConfig] = None
        self.scale: Optional[ScaleModel] = None
        self.lanes: Optional[LaneAllocator] = None
        self.surface: Optional[TrackSurface] = None
        self.group: Optional[DragNode] = None
        self.pointer: Optional[Pointer] = None
        self.initialize()

    @classmethod
    def init(cls, options: Mapping[str, Any], **kwargs: Any) -> "TrackEditor":
        opts = dict(options)
        container = opts.pop("container", None)
        return cls(container, **opts, **kwargs)

    # --- State ---
    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def offset(self) -> float:
        return self._pan.offset

    @property
    def items(self) -> Tuple[TrackItem[Any], ...]:
        return tuple(self._items)

    # --- Notification passthrough ---
    def on(self, event: Union[str, Events], handler: Handler) -> "TrackEditor":
        self._hub.subscribe(event, handler)
        return self

    def emit(self, event: Union[str, Events], *payload: Any) -> "TrackEditor":
        self._hub.publish(event, *payload)
        return self

    def off(
        self, event: Union[str, Events], handler: Optional[Handler] = None
    ) -> "TrackEditor":
        self._hub.unsubscribe(event, handler)
        return self

    # --- Lifecycle ---
    def initialize(self) -> "TrackEditor":
        if self._state is EditorState.READY:
            return self
        widget = resolve_container(self.container)
        self.container_widget = widget
        self.config = TrackConfig.from_options(
            self._options, fallback_size=(widget.width(), widget.height())
        )
        self.scale = ScaleModel(self.config)
        self.lanes = LaneAllocator(self.config)
        self._draw()
        self._state = EditorState.READY
        return self

    def _draw(self):
        cfg = self.config
        self.surface = TrackSurface(self.container_widget, cfg.width, cfg.height)
        extent = QRectF(
            0, 0, max(cfg.width, cfg.scale_left + self.scale.ruler_length), cfg.height
        )
        self.group = DragNode(
            bound=surface_bound, cursor=Qt.SizeAllCursor, extent=extent
        )
        self.group.setZValue(Z_SURFACE)
        self.group.on_drag_end(self._onPanDragEnd)
        self._drawScale()
        self._drawPointer()
        self.surface.add_node(self.group)

    # --- Items ---
    def add_item(
        self, spec: Union[ItemSpec[Any], Mapping[str, Any]]
    ) -> TrackItem[Any]:
        options = ItemSpec.coerce(spec)
        cfg = self.config
        lane_index = len(self._items)
        lane_y = self.lanes.allocate(lane_index)
        width = self.scale.width_in_pixels(options.duration)

        slide = self._drawSlide(lane_y)
        bar = DragNode(
            self.group, bound=OffsetBound(self._pan), cursor=Qt.SizeAllCursor
        )
        bar.add_line(
            cfg.scale_left,
            lane_y,
            cfg.scale_left + width,
            lane_y,
            ITEM_COLOR,
            cfg.item_height,
        )
        bar.setZValue(Z_ITEM)

        item = TrackItem(
            id=self._id_factory(),
            options=options,
            lane_index=lane_index,
            lane_y=lane_y,
            width=width,
            current_x=bar.scene_position().x,
            slide=slide,
            bar=bar,
        )
        self._items.append(item)
        bar.on_drag_end(partial(self._onItemDragEnd, item))
        return item

    addItem = add_item

    # --- Drawing ---
    def _drawScale(self):
        base = self.config.top + RULER_OFFSET
        path = QPainterPath()
        for tick in self.scale.ticks():
            length = MAJOR_TICK_LENGTH if tick.major else MINOR_TICK_LENGTH
            path.moveTo(tick.x, base + MINOR_TICK_LENGTH - length)
            path.lineTo(tick.x, base + MINOR_TICK_LENGTH)
        self.group.add_path(path, RULER_COLOR, 1)

    def _drawSlide(self, lane_y: float):
        cfg = self.config
        slide = self.group.add_line(
            cfg.left,
            lane_y,
            cfg.left + self.scale.ruler_length,
            lane_y,
            LANE_COLOR,
            cfg.item_height,
        )
        slide.setZValue(Z_LANE)
        return slide

    def _drawPointer(self):
        cfg = self.config
        x = cfg.scale_left
        top = cfg.top
        bottom = cfg.height - top
        node = DragNode(
            self.group, bound=OffsetBound(self._pan), cursor=Qt.SizeHorCursor
        )
        node.add_rect(x - POINTER_HIT_WIDTH / 2, top, POINTER_HIT_WIDTH, bottom - top)
        node.add_line(x, top + POINTER_HANDLE_TIP, x, bottom, POINTER_COLOR, 1)
        hw = POINTER_HANDLE_HALF_WIDTH
        node.add_polygon(
            [
                (x - hw, top),
                (x + hw, top),
                (x + hw, top + POINTER_HANDLE_SHOULDER),
                (x, top + POINTER_HANDLE_TIP),
                (x - hw, top + POINTER_HANDLE_SHOULDER),
            ],
            POINTER_COLOR,
        )
        node.setZValue(Z_POINTER)
        node.on_drag_end(self._onPointerDragEnd)
        self.pointer = Pointer(current_x=node.scene_position().x, node=node)

    # --- Drag-end handlers ---
    def _onPanDragEnd(self, event: DragEvent):
        self._pan.offset = event.x
        if DEBUG_TRACK:
            print(f"[TrackEditor] pan offset={self._pan.offset}")

    def _onItemDragEnd(self, item: TrackItem[Any], event: DragEvent):
        item.current_x = event.x
        event.cancel_bubble = True
        if DEBUG_TRACK:
            print(
                f"[TrackEditor] item {item.id} lane={item.lane_index}"
                f" x={item.current_x}"
            )
        self._hub.publish(Events.CHANGE, item)

    def _onPointerDragEnd(self, event: DragEvent):
        self.pointer.current_x = event.x
        event.cancel_bubble = True
        if DEBUG_TRACK:
            print(f"[TrackEditor] pointer x={self.pointer.current_x}")

    def item_time(self, item: TrackItem[Any]) -> float:
        """Start time of an item, read from its offset along the ruler."""
        return self.scale.time_at(self.config.scale_left + item.bar.x())

    def pointer_time(self) -> float:
        """Time under the pointer, in the config's time units."""
        return self.scale.time_at(self.config.scale_left + self.pointer.node.x())


__all__ = ["EditorState", "TrackEditor", "resolve_container"]
