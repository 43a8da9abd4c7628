from PyQt6.QtCore import QEvent
from PyQt6.QtWidgets import QFrame, QWidget

from components.view_adapters import PopupViewAdapter, WidgetViewAdapter
from screens import Closable, LoadNotifier, OpenStateHolder, Screen


class LoadRecordingScreen(Screen):
    def __init__(self):
        super().__init__()
        self.loaded_views = []

    def on_view_loaded(self, view):
        self.loaded_views.append(view)


def test_widget_adapter_capabilities(qapp):
    adapter = WidgetViewAdapter(QWidget())
    assert isinstance(adapter, Closable)
    assert isinstance(adapter, LoadNotifier)
    assert not isinstance(adapter, OpenStateHolder)


def test_popup_adapter_capabilities(qapp):
    adapter = PopupViewAdapter(QFrame())
    assert isinstance(adapter, OpenStateHolder)
    assert isinstance(adapter, LoadNotifier)
    assert not isinstance(adapter, Closable)


def test_showing_widget_reports_view_loaded(qapp):
    widget = QWidget()
    adapter = WidgetViewAdapter(widget)
    screen = LoadRecordingScreen()
    screen.attach_view(adapter)

    widget.show()

    assert screen.loaded_views == [adapter]
    widget.close()


def test_try_close_closes_widget(qapp):
    widget = QWidget()
    adapter = WidgetViewAdapter(widget)
    screen = Screen()
    screen.attach_view(adapter)
    widget.show()
    assert widget.isVisible()

    screen.try_close()

    assert not widget.isVisible()


def test_try_close_hides_popup(qapp):
    popup = QFrame()
    adapter = PopupViewAdapter(popup)
    screen = Screen()
    screen.attach_view(adapter)
    adapter.set_open(True)
    assert adapter.is_open

    screen.try_close()

    assert not adapter.is_open


def test_event_filter_tolerates_missing_widget(qapp):
    widget = QWidget()
    adapter = WidgetViewAdapter(widget)
    shown = []
    adapter.loaded.connect(lambda: shown.append(True))
    del adapter._widget

    assert adapter.eventFilter(widget, QEvent(QEvent.Type.Show)) is False
    assert shown == []
