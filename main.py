"""
Entry point for the WordPress WXR parser.
"""

import sys

from wxr_parser.cli import main

if __name__ == "__main__":
    sys.exit(main())
