# tests/conftest.py
# Shared Qt application for widget and signal tests.

import os
import sys
import pytest
from PyQt6.QtWidgets import QApplication

from utils.exception_safe_application import ExceptionSafeApplication


@pytest.fixture(scope="session", autouse=True)
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = ExceptionSafeApplication(sys.argv, show_dialog=False)
    return app
