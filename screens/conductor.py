# screens/conductor.py
# Contracts between a screen and the conductor that composes it.

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class Conductor(Protocol):
    """Owner of one or more screens.

    A conductor decides whether and when a child is actually closed. The
    screen only forwards the request and never inspects the outcome.
    """

    def close_item(self, item: Any) -> None:
        ...


@runtime_checkable
class Child(Protocol):
    """Something that can be placed under a conductor."""

    parent: Optional[Conductor]
