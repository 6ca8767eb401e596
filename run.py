"""
Development launcher for the glass login screen.

Runs the app straight from a source checkout, without `pip install -e .`,
by putting `src/` first on the import path.

Usage:
    $ python run.py
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

# Own taskbar icon group on Windows instead of python.exe's
if sys.platform == "win32":
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID('glasslogin.GlassmorphismLogin')

from glasslogin.app.main import main

if __name__ == "__main__":
    sys.exit(main())
