# screens/capabilities.py
# Context keys and the optional capabilities a view may offer to its screen.

from typing import Any, Protocol, runtime_checkable


class _DefaultContext:
    """Sentinel key for the view slot used when no context is given."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "DEFAULT_CONTEXT"

    def __reduce__(self):
        return (_DefaultContext, ())


DEFAULT_CONTEXT = _DefaultContext()


def resolve_context(context: Any) -> Any:
    """Map ``None`` to :data:`DEFAULT_CONTEXT`, leave other keys untouched."""
    return DEFAULT_CONTEXT if context is None else context


@runtime_checkable
class Closable(Protocol):
    """A view that can close itself."""

    def close(self) -> Any:
        ...


@runtime_checkable
class OpenStateHolder(Protocol):
    """A view whose open/closed state can be written, e.g. a popup or flyout."""

    def set_open(self, is_open: bool) -> None:
        ...


@runtime_checkable
class LoadNotifier(Protocol):
    """A view that announces when it becomes visible.

    ``loaded`` is expected to behave like a bound Qt signal: it must offer
    ``connect(slot)`` and ``disconnect(slot)``.
    """

    loaded: Any
