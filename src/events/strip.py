#!/usr/bin/env python3
"""Comment stripping filter.

Reads JSONC from stdin and writes it to stdout with comments removed.
"""

import sys

from core.jsonc import strip_comments
from lib.hooks import read_text_input


def main() -> None:
    """Strip comments from stdin."""
    sys.stdout.write(strip_comments(read_text_input()))


if __name__ == "__main__":
    main()
