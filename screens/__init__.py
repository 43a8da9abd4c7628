# screens/__init__.py
# Makes the screens directory a Python package and simplifies imports.

from .capabilities import DEFAULT_CONTEXT, Closable, LoadNotifier, OpenStateHolder
from .conductor import Child, Conductor
from .errors import UnsupportedOperationError
from .lifecycle import ActivationEventArgs, DeactivationEventArgs, LifecycleStateMachine
from .property_change import PropertyChangedBase
from .screen import Screen
from .view_binding import ViewBindingRegistry
