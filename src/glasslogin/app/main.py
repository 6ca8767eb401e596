"""
Run with: python -m glasslogin
"""
from __future__ import annotations

import logging
import sys

from glasslogin.logging_config import setup_logging
from glasslogin.app.application import create_app
from glasslogin.app.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the application."""
    # Use logging.DEBUG to follow backdrop re-renders
    setup_logging(level=logging.INFO)

    app = create_app()
    win = MainWindow()
    win.show()
    logger.info("Main window shown, entering event loop.")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
