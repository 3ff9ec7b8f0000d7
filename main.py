"""
Entry point for the Hold'em demo round.
"""

import sys

from holdem.cli import main


if __name__ == "__main__":
    sys.exit(main())
