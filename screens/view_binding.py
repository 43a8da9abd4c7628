# screens/view_binding.py
# Keeps track of the views bound to a screen and closes the screen through them.

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from .capabilities import Closable, LoadNotifier, OpenStateHolder, resolve_context
from .errors import UnsupportedOperationError

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class ViewBindingRegistry:
    """
    Maps context keys to the views attached to one screen.

    A screen may be shown by several views at once (a full view and a
    tooltip, for instance); each one lives under its own context key and a
    later attach under the same key replaces the earlier view.

    The registry also implements the close-delegation protocol used by
    :meth:`try_close`: a screen with a parent asks the parent to close it,
    otherwise the default view is asked to close itself.
    """

    def __init__(self, owner, log: Optional[logging.Logger] = None):
        self._owner = owner
        self._log = log if log is not None else logger
        self._views: Dict[Any, Any] = {}
        # context -> (view, slot) of the live "loaded" subscription
        self._load_subscriptions: Dict[Any, Tuple[Any, Callable[[], None]]] = {}

    def attach_view(self, view: Any, context: Any = None):
        key = resolve_context(context)
        self._release_load_subscription(key)
        self._views[key] = view

        if isinstance(view, LoadNotifier):
            def _on_loaded(*_args):
                self._owner.on_view_loaded(view)

            view.loaded.connect(_on_loaded)
            self._load_subscriptions[key] = (view, _on_loaded)

    def get_view(self, context: Any = None) -> Optional[Any]:
        return self._views.get(resolve_context(context))

    def try_close(self):
        """
        Closes the owning screen.

        With a parent set the request is handed to ``parent.close_item`` and
        nothing else happens. Without one the default view is used: its
        ``close()`` is preferred, then ``set_open(False)``.

        Raises:
            UnsupportedOperationError: No parent and no default view, or a
                default view offering neither capability.
        """
        parent = self._owner.parent
        if parent is not None:
            parent.close_item(self._owner)
            return

        view = self.get_view()
        if view is None:
            self._fail("You cannot close an instance without a parent or a default view.")

        if isinstance(view, Closable):
            view.close()
            return

        if isinstance(view, OpenStateHolder):
            view.set_open(False)
            return

        self._fail("The default view does not support the close method or the open state.")

    def _fail(self, message: str):
        error = UnsupportedOperationError(message)
        self._log.error("%s", error)
        raise error

    def _release_load_subscription(self, key: Any):
        subscription = self._load_subscriptions.pop(key, None)
        if subscription is None:
            return
        view, slot = subscription
        try:
            view.loaded.disconnect(slot)
        except (TypeError, RuntimeError):
            # Signal already disconnected or its QObject was deleted.
            pass
