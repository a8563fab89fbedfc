#!/usr/bin/env python3
"""
NGO nearby-places search - CLI

Geocode NGO locations and list restaurants, places of worship, or any other
configured category around each of them.

Usage:
    python main.py "Helping Hands, 123 Main St, Springfield"
    python main.py --file ngos.txt --output results.json --geojson places.geojson
    python main.py --file ngos.txt --categories "restaurants=restaurant,cafes=cafe"
"""

import sys

from ngo_nearby.cli import main

if __name__ == "__main__":
    sys.exit(main())
