"""Glassmorphism login screen demo built on Qt."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("glasslogin")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
