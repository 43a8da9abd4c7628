# utils/exception_safe_application.py
# QApplication that reports unhandled exceptions instead of aborting.

import logging
import sys
import traceback
from PyQt6.QtWidgets import QApplication, QMessageBox

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class ExceptionSafeApplication(QApplication):
    """
    QApplication subclass that logs unhandled exceptions and, unless
    ``show_dialog=False`` is given, displays them in a message box.

    Exceptions raised by screen hooks that run from Qt signals or event
    handlers (``on_view_loaded``, for instance) reach :data:`sys.excepthook`;
    without this application PyQt6 would abort the process.
    """

    def __init__(self, *args, show_dialog=True, **kwargs):
        super().__init__(*args, **kwargs)
        self.show_dialog = show_dialog
        # Handle exceptions that occur outside the Qt event loop
        sys.excepthook = self._handle_exception

    def notify(self, receiver, event):
        try:
            return super().notify(receiver, event)
        except Exception as exc:  # pylint: disable=broad-except
            self._handle_exception(type(exc), exc, exc.__traceback__)
            return False

    def _handle_exception(self, exc_type, exc_value, exc_traceback):
        """Log the exception, then show it in a critical message box."""
        logger.error("Unhandled exception", exc_info=(exc_type, exc_value, exc_traceback))
        if not self.show_dialog:
            return
        formatted = ''.join(
            traceback.format_exception(exc_type, exc_value, exc_traceback)
        )
        QMessageBox.critical(
            None,
            "Unhandled Exception",
            formatted,
        )
