"""
Main entry point for the M3U Converter.

Usage:
    python main.py [options] FILE [FILE ...]

For example, to convert every playlist exported into the current directory
into the `converted/` subdirectory:

    python main.py *.m3u

The same entry point is installed as the `m3u-converter` command.
"""

import sys

from m3u_converter.cli import main


if __name__ == "__main__":
    sys.exit(main())
