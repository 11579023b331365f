import pytest
from PySide6.QtCore import QEvent, Qt
from PySide6.QtWidgets import (
    QApplication,
    QGraphicsItem,
    QGraphicsLineItem,
    QGraphicsSceneHoverEvent,
    QWidget,
)

from tracktime.core.drag import OffsetBound, PanState, surface_bound
from tracktime.ui.scene import DragNode, TrackSurface


@pytest.fixture(scope="module")
def app_instance():
    app = QApplication.instance() or QApplication([])
    return app


def test_bound_applies_on_every_tick(app_instance):
    pan = PanState(offset=-15)
    node = DragNode(bound=OffsetBound(pan))
    assert node.drag_to(-40, 30) == (-15, 0)
    assert node.drag_to(12, -8) == (12, 0)
    pan.offset = -5
    assert node.drag_to(-40, 0) == (-5, 0)


def test_surface_node_moves_left_only(app_instance):
    node = DragNode(bound=surface_bound)
    assert node.drag_to(25, 10) == (0, 0)
    assert node.drag_to(-25, 10) == (-25, 0)


def test_drag_end_bubbles_to_parent(app_instance):
    parent = DragNode()
    child = DragNode(parent)
    seen = []
    parent.on_drag_end(lambda e: seen.append(("parent", e.target)))
    child.on_drag_end(lambda e: seen.append(("child", e.target)))
    child.drag_to(7, 0)
    event = child.end_drag()
    assert seen == [("child", child), ("parent", child)]
    assert (event.x, event.y) == (7, 0)


def test_cancel_bubble_stops_propagation(app_instance):
    parent = DragNode()
    child = DragNode(parent)
    seen = []

    def stop(e):
        seen.append("child")
        e.cancel_bubble = True

    parent.on_drag_end(lambda e: seen.append("parent"))
    child.on_drag_end(stop)
    assert child.end_drag().cancel_bubble
    assert seen == ["child"]


def test_shapes_extend_hit_area(app_instance):
    node = DragNode()
    assert node.boundingRect().isEmpty()
    line = node.add_line(10, 50, 60, 50, "#177ddc", 20)
    assert isinstance(line, QGraphicsLineItem)
    rect = node.boundingRect()
    assert rect.left() <= 10 and rect.right() >= 60
    assert rect.top() <= 40 and rect.bottom() >= 60


def test_surface_mounts_into_container(app_instance):
    container = QWidget()
    surface = TrackSurface(container, 320, 200)
    assert container.layout().indexOf(surface) != -1
    assert surface.scene().sceneRect().width() == 320
    node = surface.add_node(DragNode())
    assert node.scene() is surface.scene()


def test_child_bound_sees_scene_coordinates(app_instance):
    pan = PanState()
    parent = DragNode(bound=surface_bound)
    child = DragNode(parent, bound=OffsetBound(pan))
    parent.drag_to(-100, 0)
    pan.offset = parent.end_drag().x
    assert child.drag_to(-250, 0) == (-100, 0)
    assert child.x() == 0
    assert child.drag_to(-60, 0) == (-60, 0)
    assert child.x() == 40
    assert child.end_drag().x == -60


def test_nodes_are_always_movable(app_instance):
    node = DragNode()
    assert node.flags() & QGraphicsItem.ItemIsMovable
    assert node.flags() & QGraphicsItem.ItemSendsGeometryChanges


def _hover(node, kind):
    event = QGraphicsSceneHoverEvent(kind)
    if kind == QEvent.GraphicsSceneHoverEnter:
        node.hoverEnterEvent(event)
    else:
        node.hoverLeaveEvent(event)


def test_leaving_child_restores_parent_cursor(app_instance):
    surface = TrackSurface(QWidget(), 200, 100)
    group = DragNode(cursor=Qt.SizeAllCursor)
    child = DragNode(group, cursor=Qt.SizeHorCursor)
    surface.add_node(group)
    vp = surface.viewport()

    _hover(group, QEvent.GraphicsSceneHoverEnter)
    assert vp.cursor().shape() == Qt.SizeAllCursor
    _hover(child, QEvent.GraphicsSceneHoverEnter)
    assert vp.cursor().shape() == Qt.SizeHorCursor
    _hover(child, QEvent.GraphicsSceneHoverLeave)
    assert vp.cursor().shape() == Qt.SizeAllCursor
    _hover(group, QEvent.GraphicsSceneHoverLeave)
    assert vp.cursor().shape() == Qt.ArrowCursor
