# main.py
# Demo entry point: hosts a single screen in a window.

import logging
import os
import sys

from components.screen_host import ScreenHostWindow
from screens import Screen
from services.settings_service import SettingsService
from utils.exception_safe_application import ExceptionSafeApplication
from utils.logging_config import configure_logging

logger = logging.getLogger("screens.demo")


class WelcomeScreen(Screen):
    """Screen shown by the demo shell."""

    def on_view_loaded(self, view):
        logger.info("%s loaded for %s.", type(view).__name__, self)


def main():
    """
    Loads settings, configures logging, creates the host window and starts
    the event loop. An optional first argument names the settings file.
    """
    settings_path = sys.argv[1] if len(sys.argv) > 1 else "screen_settings.json"
    if len(sys.argv) > 1 and not os.path.exists(settings_path):
        print(f"Warning: Settings file not found at '{settings_path}'")
    settings = SettingsService(settings_path)
    configure_logging(settings)

    app = ExceptionSafeApplication(sys.argv)
    app.setStyle("Fusion")

    screen = WelcomeScreen(display_name=settings.get_value("default_display_name") or "Welcome")
    screen.is_notifying = bool(settings.get_value("notify_property_changes"))

    window = ScreenHostWindow(screen)
    window.show()

    sys.exit(app.exec())

if __name__ == '__main__':
    main()
