#!/usr/bin/env python3
"""
metatrace.__main__ - Module entry point
"""

import sys

EXIT_INTERNAL_ERROR = 3


def main():
    """Main entry point for console scripts"""
    try:
        from .main import main as script_main

        return script_main()
    except ImportError as e:
        print(f"Error: Could not import main script: {e}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
