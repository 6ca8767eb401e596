"""
Configuration & Path Management
===============================
Central registry for file paths used at runtime.

Why is this file needed?
------------------------
1. Abstraction: no hardcoded paths scattered through the widgets.
2. Deployment: it resolves assets both from a source checkout and from a
   PyInstaller bundle (sys._MEIPASS).

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    FONTS_PATH (str): Absolute path to the bundled font files.
"""
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/glasslogin/
    project_root: Path = Path(__file__).parent.parent.parent
    return os.path.join(str(project_root), relative_path)


ASSETS_PATH: str = get_resource_path("assets")
FONTS_PATH: str = os.path.join(ASSETS_PATH, "fonts")

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
