"""
nodeseq CLI entry point.

Usage:
    python -m nodeseq a.b.txt --op insert-at new 0
"""

import sys

from nodeseq.cli import main

if __name__ == "__main__":
    sys.exit(main())
