"""
Package entry point.

Allows running: python -m ngo_nearby "Helping Hands, 123 Main St, Springfield"
"""

import sys

from ngo_nearby.cli import main

if __name__ == "__main__":
    sys.exit(main())
