from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from PySide6.QtCore import QCoreApplication
from PySide6.QtGui import QColor, QFontDatabase, QPalette
from PySide6.QtWidgets import QApplication

from glasslogin.config import FONTS_PATH
from glasslogin.app.ui.style import FONT_FAMILY, WINDOW_TITLE

logger = logging.getLogger(__name__)

ORG_ID = "glasslogin"
APP_ID = "glassmorphism-login"

VISIBLE_APP_NAME = WINDOW_TITLE

FONT_SUFFIXES = (".ttf", ".otf")


def dark_palette() -> QPalette:
    """Dark palette for the Fusion style, so default widget chrome suits the glass look."""
    window = QColor(48, 48, 48)
    surface = QColor(66, 66, 66)
    white = QColor(255, 255, 255)

    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, window)
    palette.setColor(QPalette.ColorRole.WindowText, white)
    palette.setColor(QPalette.ColorRole.Base, surface)
    palette.setColor(QPalette.ColorRole.AlternateBase, window)
    palette.setColor(QPalette.ColorRole.Text, white)
    palette.setColor(QPalette.ColorRole.Button, surface)
    palette.setColor(QPalette.ColorRole.ButtonText, white)
    palette.setColor(QPalette.ColorRole.ToolTipBase, surface)
    palette.setColor(QPalette.ColorRole.ToolTipText, white)
    palette.setColor(QPalette.ColorRole.Highlight, QColor(100, 255, 218))
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor(0, 0, 0))
    palette.setColor(QPalette.ColorRole.PlaceholderText, QColor(255, 255, 255, 138))
    return palette


def register_fonts(directory: str | os.PathLike = FONTS_PATH) -> list[str]:
    """
    Register every .ttf/.otf file in `directory` with Qt.

    Returns:
        The font families that became available. Missing directories or
        unreadable files are logged and skipped; Qt then falls back to the
        platform sans-serif.
    """
    font_dir = Path(directory)
    if not font_dir.is_dir():
        logger.warning(f"Font directory not found at {font_dir}, using system fonts.")
        return []

    families: list[str] = []
    for font_file in sorted(font_dir.iterdir()):
        if font_file.suffix.lower() not in FONT_SUFFIXES:
            continue
        font_id = QFontDatabase.addApplicationFont(str(font_file))
        if font_id == -1:
            logger.warning(f"Could not load font file '{font_file.name}'.")
            continue
        for family in QFontDatabase.applicationFontFamilies(font_id):
            if family not in families:
                families.append(family)

    if FONT_FAMILY not in families:
        logger.info(f"Font '{FONT_FAMILY}' is not bundled, Qt will substitute a sans-serif font.")
    else:
        logger.debug(f"Registered font families: {families}")
    return families


def create_app(argv: Optional[Sequence[str]] = None) -> QApplication:
    """Create and configure the QApplication instance (or return the running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")

    existing = QApplication.instance()
    if existing is not None:
        return existing

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(list(argv) if argv is not None else sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    app.setStyle("Fusion")
    app.setPalette(dark_palette())

    register_fonts()
    logger.info(f"Application created ({app.platformName()} platform).")
    return app
