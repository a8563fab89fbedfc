#!/usr/bin/env python3
"""
Command-line interface for the geocoding module.

Unlike the search pipeline, this reports "not found" and "provider error"
as different outcomes.

Usage:
    python -m ngo_nearby.geocoding.cli --address "123 Main St, Springfield"
    python -m ngo_nearby.geocoding.cli --record "Helping Hands, 123 Main St, Springfield"
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from ngo_nearby.core import ConfigurationError, LocationNotFound, ServiceError, load_settings
from ngo_nearby.core.utils import build_bounding_box, parse_location_record
from ngo_nearby.geocoding import MapboxGeocoder

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 2
EXIT_SERVICE_ERROR = 3


async def lookup(geocoder: MapboxGeocoder, query: str, margin: float) -> int:
    """Geocode one query and print the outcome."""
    print(f"\nGeocoding: {query}")
    print(f"Provider: {geocoder.provider_name}")
    print("-" * 50)

    try:
        coord = await geocoder.resolve(query)
    except LocationNotFound:
        print("✗ No match found")
        return EXIT_NOT_FOUND
    except ServiceError as e:
        print(f"✗ Provider error: {e}")
        return EXIT_SERVICE_ERROR

    bbox = build_bounding_box(coord, margin=margin)
    print("✓ Success!")
    print(f"  Latitude:  {coord.lat:.6f}")
    print(f"  Longitude: {coord.lng:.6f}")
    print(f"  Search box: {bbox.as_param}")
    return EXIT_FOUND


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Geocode a single location with the configured provider"
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--address", "-a",
        type=str,
        help="Geocode free text as-is"
    )
    group.add_argument(
        "--record", "-r",
        type=str,
        help="Geocode a '<name>, <address line>, <city>' record"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    args = parser.parse_args(argv)
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.record:
        query = parse_location_record(args.record).query
    elif args.address:
        query = args.address
    else:
        parser.print_help()
        return 0

    try:
        geocoder = MapboxGeocoder(settings.provider_config())
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return asyncio.run(lookup(geocoder, query, settings.SEARCH_MARGIN))


if __name__ == "__main__":
    sys.exit(main())
