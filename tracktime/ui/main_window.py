"""Demo application window hosting a TrackEditor.

Layout:
+-----------------------------------------------+
| Item list | Track editor (ruler, lanes, pointer) |
+-----------------------------------------------+
| status bar: last change notification          |
+-----------------------------------------------+
"""

from __future__ import annotations

import os
import sys

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QGuiApplication
from PySide6.QtWidgets import (
    QApplication,
    QInputDialog,
    QListWidget,
    QMainWindow,
    QMessageBox,
    QSplitter,
    QStatusBar,
    QWidget,
)

from ..core.events import Events
from ..core.track import ItemSpec, TrackItem
from ..track_editor import TrackEditor
from ..utils.timefmt import format_time

TRACK_CONTAINER = "track"


class MainWindow(QMainWindow):
    def __init__(self, *, duration: float = 120.0, gap: float = 40.0):
        super().__init__()
        self.setWindowTitle("Tracktime")
        self.setGeometry(100, 100, 1000, 400)
        self._createMenuBar()
        self._createEditorLayout(duration, gap)

    def centerOnPreferredScreen(self):
        """Center on screen TRACKTIME_SCREEN_INDEX if valid, else the primary screen."""
        screens = QGuiApplication.screens()
        if not screens:
            return
        screen = None
        idx_env = os.getenv("TRACKTIME_SCREEN_INDEX")
        if idx_env is not None:
            try:
                idx = int(idx_env)
            except ValueError:
                idx = -1
            if 0 <= idx < len(screens):
                screen = screens[idx]
        if screen is None:
            screen = QGuiApplication.primaryScreen() or screens[0]
        geo = screen.availableGeometry()
        win_geo = self.frameGeometry()
        win_geo.moveCenter(geo.center())
        self.move(win_geo.topLeft())

    def _createMenuBar(self):
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("File")
        add_action = QAction("Add Item...", self)
        add_action.triggered.connect(self._promptAddItem)
        file_menu.addAction(add_action)
        exit_action = QAction("Exit", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)
        about_menu = menu_bar.addMenu("About")
        about_action = QAction("About Tracktime", self)
        about_action.triggered.connect(self._showAboutDialog)
        about_menu.addAction(about_action)

    def _showAboutDialog(self):
        QMessageBox.about(
            self,
            "About Tracktime",
            "Tracktime\nTimeline track editor with draggable items and playhead.",
        )

    def _createEditorLayout(self, duration: float, gap: float):
        splitter = QSplitter()
        splitter.setOrientation(Qt.Horizontal)  # type: ignore

        self.item_list = QListWidget()
        splitter.addWidget(self.item_list)

        self.track_container = QWidget()
        self.track_container.setObjectName(TRACK_CONTAINER)
        self.track_container.resize(800, 300)
        splitter.addWidget(self.track_container)
        splitter.setStretchFactor(1, 1)
        self.setCentralWidget(splitter)

        self.editor = TrackEditor(
            self.track_container,
            width=800,
            height=300,
            duration=duration,
            gap=gap,
        )
        self.editor.on(Events.CHANGE, self._onItemChanged)

        self.setStatusBar(QStatusBar(self))
        self.statusBar().showMessage("Drag the track to pan, bars to move items")

    def addItem(self, duration: float, label: str = "") -> TrackItem[str]:
        label = label or f"Item {len(self.editor.items) + 1}"
        item = self.editor.add_item(ItemSpec(duration, label))
        self.item_list.addItem(f"{item.options.data} ({format_time(duration)})")
        return item

    def _promptAddItem(self):
        duration, ok = QInputDialog.getDouble(
            self, "Add Item", "Duration (seconds):", 10.0, 0.0, 1e9, 2
        )
        if ok:
            self.addItem(duration)

    def _onItemChanged(self, item: TrackItem[str]):
        start = self.editor.item_time(item)
        self.statusBar().showMessage(
            f"{item.options.data}: starts at {format_time(start)}"
            f" (x={item.current_x:.1f})"
        )


def run():  # convenience launcher
    app = QApplication(sys.argv)
    window = MainWindow()
    for duration in (10.0, 25.0, 5.0):
        window.addItem(duration)
    window.show()
    window.centerOnPreferredScreen()
    sys.exit(app.exec())


__all__ = ["MainWindow", "run"]
