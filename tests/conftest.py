# Test configuration: headless Qt, fallback 'qtbot' when pytest-qt is missing,
# and per-test isolation of the shared service registry and settings.

import sys
import os
import contextlib
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from responsive.services.service_locator import services  # noqa: E402
from responsive.settings import ResponsiveSettings  # noqa: E402

try:  # If pytest-qt present, do nothing (its fixture will be used)
    import pytestqt  # type: ignore  # noqa: F401
except ImportError:  # pragma: no cover
    try:
        from PyQt6.QtWidgets import QApplication
    except ImportError:  # pragma: no cover
        QApplication = None  # type: ignore

    @pytest.fixture
    def qtbot():  # type: ignore
        if QApplication is None:
            pytest.skip("PyQt6 not available")
        app = QApplication.instance() or QApplication(sys.argv)  # type: ignore  # noqa: F841
        widgets = []

        class Bot:
            def addWidget(self, w):  # mimic pytest-qt API subset
                widgets.append(w)

            @contextlib.contextmanager
            def waitSignal(self, *args, **kwargs):  # no-op stub
                yield

        yield Bot()
        for w in widgets:
            w.close()


@pytest.fixture(autouse=True)
def _isolated_services():
    saved = ResponsiveSettings.instance
    services.clear()
    yield
    services.clear()
    ResponsiveSettings.instance = saved
