# screens/lifecycle.py
# Initialize/activate/deactivate state machine for screens.

import logging
from dataclasses import dataclass
from typing import Optional

from PyQt6.QtCore import pyqtSignal

from .property_change import PropertyChangedBase

logger = logging.getLogger(__name__)
# Avoid emitting logs unless the app configures handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class ActivationEventArgs:
    """Payload of :attr:`LifecycleStateMachine.activated`."""
    was_initialized: bool


@dataclass(frozen=True)
class DeactivationEventArgs:
    """Payload of :attr:`LifecycleStateMachine.deactivated`."""
    was_closed: bool


class LifecycleStateMachine(PropertyChangedBase):
    """
    Tracks whether an object has been initialized and whether it is active.

    The machine moves from fresh to initialized on the first activation and
    then toggles between active and inactive for as long as the host keeps
    driving it. Both transitions are idempotent: activating an active object
    or deactivating an inactive one does nothing at all.

    Subclasses customise behaviour by overriding :meth:`on_initialize`,
    :meth:`on_activate` and :meth:`on_deactivate`. Hooks run synchronously
    and their exceptions propagate to the caller; flags already changed
    before the failing hook stay changed.
    """
    activated = pyqtSignal(object)
    deactivated = pyqtSignal(object)

    def __init__(self, parent=None, log: Optional[logging.Logger] = None):
        super().__init__(parent)
        self._is_active = False
        self._is_initialized = False
        self._log = log if log is not None else logger

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized

    def activate(self):
        """Initializes on first use, then activates and emits :attr:`activated`."""
        if self._is_active:
            return

        initialized = False
        if not self._is_initialized:
            self._set_property("is_initialized", True)
            initialized = True
            self.on_initialize()

        self._set_property("is_active", True)
        self._log.info("Activating %s.", self)
        self.on_activate()

        self.activated.emit(ActivationEventArgs(was_initialized=initialized))

    def deactivate(self, close: bool):
        """
        Deactivates and emits :attr:`deactivated`.

        Args:
            close (bool): True when the object is being retired for good. The
                host must not activate it again afterwards.
        """
        if not self._is_active:
            return

        self._set_property("is_active", False)
        self._log.info("Deactivating %s.", self)
        self.on_deactivate(close)

        if close:
            self._log.info("Closed %s.", self)

        self.deactivated.emit(DeactivationEventArgs(was_closed=close))

    # --- Hooks (no-op defaults) ---
    def on_initialize(self):
        pass

    def on_activate(self):
        pass

    def on_deactivate(self, close: bool):
        pass
