from __future__ import annotations

import pytest
from PyQt6.QtCore import QCoreApplication


@pytest.fixture(scope="session")
def qt_app() -> QCoreApplication:
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app
