"""
Entry point for running dharma as a module.

Usage:
    python -m dharma run program.dh
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
