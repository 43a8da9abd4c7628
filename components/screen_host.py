# components/screen_host.py
# Main window that acts as the default view of a single screen.

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QMainWindow, QPushButton, QVBoxLayout, QWidget

from screens import Screen
from utils.icon_manager import IconManager
from .view_adapters import WidgetViewAdapter


class ScreenHostWindow(QMainWindow):
    """
    Shows one screen and drives its lifecycle.

    The window attaches itself (through a :class:`WidgetViewAdapter`) as the
    screen's default view, activates the screen when shown and deactivates it
    with ``close=True`` once the screen agrees to close. The screen may answer
    ``can_close`` later; the window stays open until it does. A closed screen
    is never activated again, even if the window is shown once more.
    """

    def __init__(self, view_model: Screen, parent=None):
        super().__init__(parent)
        self.view_model = view_model
        self.resize(480, 240)
        self._closed = False
        self._close_pending = False
        self._close_approved = False
        self._asking = False
        self._inline_answer = None

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)

        self.title_label = QLabel(self)
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        layout.addWidget(self.title_label)

        self.close_button = QPushButton(IconManager.create_icon('fa5s.times'), "Close", self)
        self.close_button.clicked.connect(self.view_model.try_close)
        layout.addWidget(self.close_button)
        self.setCentralWidget(central)

        self.view_model.property_changed.connect(self._on_screen_property_changed)
        self.adapter = WidgetViewAdapter(self)
        self.view_model.attach_view(self.adapter)
        self._sync_title()

    def _on_screen_property_changed(self, name: str):
        if name in ("display_name", ""):
            self._sync_title()

    def _sync_title(self):
        self.title_label.setText(self.view_model.display_name)
        self.setWindowTitle(self.view_model.display_name)

    def showEvent(self, event):
        super().showEvent(event)
        # A closed screen must not be activated again.
        if not self._closed:
            self.view_model.activate()

    def closeEvent(self, event):
        if self._closed:
            event.accept()
            return
        if self._close_approved:
            self._finish_close()
            event.accept()
            return
        if self._close_pending:
            event.ignore()
            return

        self._close_pending = True
        self._inline_answer = None
        self._asking = True
        try:
            self.view_model.can_close(self._on_can_close)
        except Exception:
            self._close_pending = False
            raise
        finally:
            self._asking = False

        if self._inline_answer:
            self._finish_close()
            event.accept()
        else:
            # Refused, or the screen will answer later.
            event.ignore()

    def _on_can_close(self, allowed: bool):
        self._close_pending = False
        if self._asking:
            self._inline_answer = bool(allowed)
            return
        if allowed:
            self._close_approved = True
            self.close()

    def _finish_close(self):
        self._closed = True
        self._close_approved = False
        self.view_model.deactivate(True)
