# screens/property_change.py
# Qt based property-change notification shared by screens.

from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal


class PropertyChangedBase(QObject):
    """
    Base class for objects whose properties can be bound to a view.

    Every observable property stores its value in ``_<name>`` and is changed
    through :meth:`_set_property`, which emits :attr:`property_changed` with
    the property name exactly once per actual change. An empty name means
    "everything may have changed" (see :meth:`refresh`).
    """
    property_changed = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.is_notifying = True

    def notify_of_property_change(self, property_name: str):
        """Emits :attr:`property_changed` unless notifications are switched off."""
        if self.is_notifying:
            self.property_changed.emit(property_name)

    def refresh(self):
        """Tells listeners that all properties should be re-read."""
        self.notify_of_property_change("")

    def _set_property(self, property_name: str, value: Any) -> bool:
        """
        Stores ``value`` for ``property_name`` and notifies if it changed.

        Returns True when the stored value was different.
        """
        attr = f"_{property_name}"
        if getattr(self, attr) == value:
            return False
        setattr(self, attr, value)
        self.notify_of_property_change(property_name)
        return True
