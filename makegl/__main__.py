"""
CLI entry point for makegl package.

Usage:
    python -m makegl [options] [DOCUMENT ...]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
