# components/view_adapters.py
# Adapters giving Qt widgets the optional capabilities screens look for.

from PyQt6.QtCore import QEvent, QObject, pyqtSignal
from PyQt6.QtWidgets import QWidget


class _ShowWatcher(QObject):
    """
    Base for adapters: re-emits the wrapped widget's Show events as ``loaded``.

    The adapter is parented to the widget, so it lives exactly as long as
    the widget does.
    """
    loaded = pyqtSignal()

    def __init__(self, widget: QWidget):
        super().__init__(widget)
        self._widget = widget
        widget.installEventFilter(self)

    @property
    def widget(self) -> QWidget:
        return self._widget

    def eventFilter(self, watched, event):
        # _widget can already be gone while Qt tears the pair down.
        widget = getattr(self, "_widget", None)
        if widget is not None and watched is widget and event.type() == QEvent.Type.Show:
            self.loaded.emit()
        return False


class WidgetViewAdapter(_ShowWatcher):
    """A top-level widget or window used as a screen's view. Closes the widget."""

    def close(self):
        return self._widget.close()


class PopupViewAdapter(_ShowWatcher):
    """
    A popup, flyout or tooltip used as a screen's view.

    Popups are not closed but hidden, so this adapter exposes an open state
    instead of ``close()``.
    """

    @property
    def is_open(self) -> bool:
        return self._widget.isVisible()

    def set_open(self, is_open: bool):
        self._widget.setVisible(is_open)
