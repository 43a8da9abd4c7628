# screens/screen.py
# The Screen: a lifecycle-managed unit of presentation logic.

import logging
from typing import Any, Callable, Optional

from .conductor import Conductor
from .lifecycle import LifecycleStateMachine
from .view_binding import ViewBindingRegistry

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class Screen(LifecycleStateMachine):
    """
    A presentable unit decoupled from its concrete views.

    Lifecycle (``activate``/``deactivate``) comes from
    :class:`LifecycleStateMachine`; view bookkeeping and closing are delegated
    to a :class:`ViewBindingRegistry`. Subclasses override the ``on_*`` hooks.

    Args:
        display_name (str, optional): Label shown by views. Defaults to the
            fully qualified name of the concrete class.
        log (logging.Logger, optional): Logger for lifecycle and close
            messages. Defaults to this module's logger.
    """

    def __init__(self, display_name: Optional[str] = None, log: Optional[logging.Logger] = None):
        log = log if log is not None else logger
        super().__init__(log=log)
        cls = type(self)
        self._display_name = display_name if display_name is not None else f"{cls.__module__}.{cls.__qualname__}"
        self._parent: Optional[Conductor] = None
        self._views = ViewBindingRegistry(self, log=log)

    def __str__(self):
        return self._display_name

    @property
    def display_name(self) -> str:
        return self._display_name

    @display_name.setter
    def display_name(self, value: str):
        self._set_property("display_name", value)

    @property
    def parent(self) -> Optional[Conductor]:
        """The conductor that owns this screen, if any. Not owned by the screen."""
        return self._parent

    @parent.setter
    def parent(self, value: Optional[Conductor]):
        if value is self._parent:
            return
        self._parent = value
        self.notify_of_property_change("parent")

    def can_close(self, callback: Callable[[bool], None]):
        """Answers through ``callback`` whether the screen may be closed. Always True here."""
        callback(True)

    # --- Views ---
    def attach_view(self, view: Any, context: Any = None):
        """Binds ``view`` to this screen under ``context`` (default slot when None)."""
        self._views.attach_view(view, context)

    def get_view(self, context: Any = None) -> Optional[Any]:
        """Returns the view bound under ``context`` or None."""
        return self._views.get_view(context)

    def try_close(self):
        """Closes through the parent, or else through the default view."""
        self._views.try_close()

    def on_view_loaded(self, view: Any):
        pass
