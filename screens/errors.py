# screens/errors.py
# Errors raised by the screen lifecycle engine.


class UnsupportedOperationError(NotImplementedError):
    """Raised when a screen is asked to do something it has no means to do.

    Currently only :meth:`ViewBindingRegistry.try_close` raises it, when a
    screen without a parent has no default view, or the default view offers
    no way of closing itself.
    """
