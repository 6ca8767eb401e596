from __future__ import annotations

from PySide6.QtWidgets import QMainWindow, QWidget

from glasslogin.app.ui.login_screen import GlassLoginScreen
from glasslogin.app.ui.style import WINDOW_TITLE, WINDOW_SIZE


class MainWindow(QMainWindow):
    """Top-level window hosting the login screen."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*WINDOW_SIZE)

        self.login_screen = GlassLoginScreen(self)
        self.setCentralWidget(self.login_screen)
