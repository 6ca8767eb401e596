import os

# Headless Qt for CI and local runs without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from glasslogin.app.application import create_app


@pytest.fixture(scope="session")
def qapp():
    app = create_app([])
    yield app


@pytest.fixture
def shown(qapp):
    """Show a widget, flush pending layout/paint events and close it afterwards."""
    widgets = []

    def _show(widget, width=None, height=None):
        if width is not None and height is not None:
            widget.resize(width, height)
        widget.show()
        qapp.processEvents()
        if widget not in widgets:
            widgets.append(widget)
        return widget

    yield _show

    for widget in widgets:
        widget.close()
        widget.deleteLater()
    qapp.processEvents()
