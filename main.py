"""
Frosty Pine - purchase tracking command line entry point.
"""

import sys

from frosty_pine.presentation.cli import main


if __name__ == "__main__":
    sys.exit(main())
