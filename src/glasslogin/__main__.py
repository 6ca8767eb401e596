"""Run with: python -m glasslogin"""
import sys

from glasslogin.app.main import main

if __name__ == "__main__":
    sys.exit(main())
