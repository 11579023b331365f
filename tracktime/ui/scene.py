"""Qt Graphics View rendering surface for the track editor.

`TrackSurface` is the stage: a `QGraphicsView` mounted inside the caller's
container widget, owning a fixed-size scene. `DragNode` is the group
primitive: it holds child shapes, can be dragged, runs a bound function on
every position change and dispatches drag-end events that bubble to the
parent `DragNode` unless a handler cancels them.

Mouse handling and the programmatic drag path share one implementation:
``mouseMoveEvent`` ends in ``setPos`` (and therefore ``itemChange``), just as
`DragNode.drag_to` does, and ``mouseReleaseEvent`` calls `DragNode.end_drag`.

Bounds, `DragNode.drag_to` and drag-end events all speak scene coordinates,
so a bound compares like with like whatever the node's parent has panned to.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen, QPolygonF
from PySide6.QtWidgets import (
    QGraphicsItem,
    QGraphicsLineItem,
    QGraphicsObject,
    QGraphicsPathItem,
    QGraphicsPolygonItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsView,
    QVBoxLayout,
    QWidget,
)

from ..core.drag import BoundFunc, DragEvent, Position

DragEndHandler = Callable[[DragEvent], None]

BACKGROUND = QColor(30, 30, 30)


def _pen(color: str | QColor, width: float) -> QPen:
    pen = QPen(QColor(color), width)
    pen.setCapStyle(Qt.FlatCap)
    return pen


class DragNode(QGraphicsObject):
    """Draggable group of shapes.

    The node paints nothing itself. Its hit area is either a fixed ``extent``
    or the union of its children, so a press anywhere on a child shape starts
    a drag of the whole node.
    """

    def __init__(
        self,
        parent: Optional[QGraphicsItem] = None,
        *,
        bound: Optional[BoundFunc] = None,
        cursor: Optional[Qt.CursorShape] = None,
        extent: Optional[QRectF] = None,
    ):
        super().__init__()
        self._bound = bound
        self._cursor = cursor
        self._extent = extent
        self._drag_end_handlers: List[DragEndHandler] = []
        self._moved = False
        self._hovered = False
        self.setFlag(QGraphicsItem.ItemIsMovable, True)
        self.setFlag(QGraphicsItem.ItemSendsGeometryChanges, True)
        self.setAcceptHoverEvents(cursor is not None)
        if parent is not None:
            self.setParentItem(parent)

    # --- QGraphicsItem interface ---
    def boundingRect(self) -> QRectF:  # type: ignore[override]
        if self._extent is not None:
            return self._extent
        return self.childrenBoundingRect()

    def paint(self, painter, option, widget=None):  # type: ignore[override]
        pass

    def itemChange(self, change, value):  # type: ignore[override]
        if change == QGraphicsItem.ItemPositionChange and self._bound is not None:
            # Bounds work in scene coordinates, where the pan offset lives.
            proposed = self._toScene(value)
            current = self._toScene(self.pos())
            corrected = self._bound(Position(proposed.x(), proposed.y()), current.y())
            return self._fromScene(QPointF(corrected.x, corrected.y))
        return super().itemChange(change, value)

    def mousePressEvent(self, event):  # type: ignore[override]
        self._moved = False
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):  # type: ignore[override]
        if event.scenePos() != event.buttonDownScenePos(Qt.LeftButton):
            self._moved = True
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):  # type: ignore[override]
        super().mouseReleaseEvent(event)
        if self._moved:
            self._moved = False
            self.end_drag()

    def hoverEnterEvent(self, event):  # type: ignore[override]
        self._hovered = True
        self._setViewCursor(self._cursor)
        super().hoverEnterEvent(event)

    def hoverLeaveEvent(self, event):  # type: ignore[override]
        self._hovered = False
        # Fall back to the cursor of the nearest ancestor still under the mouse.
        node = self.parent_node()
        while node is not None and not (node._hovered and node._cursor is not None):
            node = node.parent_node()
        self._setViewCursor(node._cursor if node is not None else None)
        super().hoverLeaveEvent(event)

    # --- Drag API ---
    def on_drag_end(self, handler: DragEndHandler) -> "DragNode":
        if handler not in self._drag_end_handlers:
            self._drag_end_handlers.append(handler)
        return self

    def drag_to(self, x: float, y: float) -> Position:
        """Apply one drag tick towards scene position (x, y).

        Returns the scene position the bound let the node reach.
        """
        self.setPos(self._fromScene(QPointF(x, y)))
        return self.scene_position()

    def scene_position(self) -> Position:
        pos = self._toScene(self.pos())
        return Position(pos.x(), pos.y())

    def end_drag(self) -> DragEvent:
        pos = self.scene_position()
        event = DragEvent(self, pos.x, pos.y)
        node: Optional[DragNode] = self
        while node is not None:
            for handler in tuple(node._drag_end_handlers):
                handler(event)
            if event.cancel_bubble:
                break
            node = node.parent_node()
        return event

    def parent_node(self) -> Optional["DragNode"]:
        parent = self.parentItem()
        return parent if isinstance(parent, DragNode) else None

    # --- Shapes ---
    def add_line(
        self, x1: float, y1: float, x2: float, y2: float, color: str, width: float
    ) -> QGraphicsLineItem:
        self.prepareGeometryChange()
        line = QGraphicsLineItem(x1, y1, x2, y2, self)
        line.setPen(_pen(color, width))
        return line

    def add_polygon(
        self, points: Sequence[Tuple[float, float]], color: str, width: float = 1
    ) -> QGraphicsPolygonItem:
        self.prepareGeometryChange()
        poly = QGraphicsPolygonItem(QPolygonF([QPointF(x, y) for x, y in points]), self)
        poly.setPen(QPen(QColor(color), width))
        return poly

    def add_rect(self, x: float, y: float, w: float, h: float) -> QGraphicsRectItem:
        """Invisible hit area."""
        self.prepareGeometryChange()
        rect = QGraphicsRectItem(x, y, w, h, self)
        rect.setPen(Qt.NoPen)
        rect.setBrush(QBrush(QColor(0, 0, 0, 0)))
        return rect

    def add_path(
        self, path: QPainterPath, color: str, width: float = 1
    ) -> QGraphicsPathItem:
        self.prepareGeometryChange()
        item = QGraphicsPathItem(path, self)
        item.setPen(QPen(QColor(color), width))
        return item

    # --- Internal helpers ---
    def _toScene(self, pos: QPointF) -> QPointF:
        parent = self.parentItem()
        return parent.mapToScene(pos) if parent is not None else QPointF(pos)

    def _fromScene(self, pos: QPointF) -> QPointF:
        parent = self.parentItem()
        return parent.mapFromScene(pos) if parent is not None else QPointF(pos)

    def _setViewCursor(self, cursor: Optional[Qt.CursorShape]):
        scene = self.scene()
        if scene is None:
            return
        for view in scene.views():
            if cursor is None:
                view.viewport().unsetCursor()
            else:
                view.viewport().setCursor(cursor)


class TrackSurface(QGraphicsView):
    """Stage mounted into a container widget.

    The scene rect is fixed to the configured size so panning the track moves
    the content, never the view's scroll position.
    """

    def __init__(self, container: QWidget, width: float, height: float):
        super().__init__(container)
        self._scene = QGraphicsScene(0, 0, width, height, self)
        self._scene.setBackgroundBrush(QBrush(BACKGROUND))
        self.setScene(self._scene)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setRenderHint(QPainter.Antialiasing, True)
        self.setMinimumSize(int(width), int(height))
        layout = container.layout()
        if layout is None:
            layout = QVBoxLayout(container)
            layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self)

    def add_node(self, node: DragNode) -> DragNode:
        self._scene.addItem(node)
        return node


__all__ = ["DragNode", "TrackSurface"]
