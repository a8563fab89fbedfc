#!/usr/bin/env python3
"""
Command-line interface for the nearby-places search.

Usage:
    ngo-nearby "Helping Hands, 123 Main St, Springfield"
    ngo-nearby --file ngos.txt --output results.json --geojson places.geojson
    ngo-nearby --file ngos.txt --categories "restaurants=restaurant,religious=temple,cafes=cafe"
    ngo-nearby --file ngos.txt --concurrency 4
"""

import argparse
import asyncio
import json
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from ngo_nearby.core import ConfigurationError, Settings, load_settings, parse_categories
from ngo_nearby.core.utils import haversine_distance, read_records
from ngo_nearby.models import NgoSearchResult
from ngo_nearby.pipeline import build_feature_collection, search_nearby

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find places of interest near a batch of NGO locations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Records are formatted "<name>, <address line>, <city>".

Examples:
  ngo-nearby "Helping Hands, 123 Main St, Springfield"
  ngo-nearby --file ngos.txt -o results.json --geojson places.geojson
  ngo-nearby --file ngos.txt --categories "restaurants=restaurant,cafes=cafe"
        """
    )

    parser.add_argument(
        "records",
        nargs="*",
        help="Records to search ('<name>, <address line>, <city>')"
    )
    parser.add_argument(
        "--file", "-f",
        type=Path,
        help="Read records from a file, one per line ('#' comments allowed)"
    )
    parser.add_argument(
        "--categories", "-c",
        type=str,
        help="Categories as 'key=query,...' (default: SEARCH_CATEGORIES)"
    )
    parser.add_argument(
        "--concurrency", "-j",
        type=int,
        help="Records processed at once (default: MAX_CONCURRENCY)"
    )
    parser.add_argument(
        "--limit", "-l",
        type=int,
        help="Maximum places per category (default: SEARCH_LIMIT)"
    )
    parser.add_argument(
        "--margin", "-m",
        type=float,
        help="Bounding box half-width in degrees (default: SEARCH_MARGIN)"
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Write results as JSON to this file"
    )
    parser.add_argument(
        "--geojson",
        type=Path,
        help="Write a GeoJSON FeatureCollection to this file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    return parser


def collect_records(args: argparse.Namespace) -> List[str]:
    records = list(args.records)
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            records.extend(read_records(f))
    return records


def print_summary(records: Sequence[str], results: Sequence[NgoSearchResult], elapsed: float) -> None:
    for result in results:
        print(f"\n{result.name} ({result.location.name}, {result.location.city})")
        print(f"  Lat/Lng: {result.coordinates.lat:.6f}, {result.coordinates.lng:.6f}")
        for key, places in result.nearby_places.items():
            if places:
                nearest = min(haversine_distance(result.coordinates, p.coordinates) for p in places)
                print(f"  {key:<14} {len(places):>3} places, nearest {nearest:.0f}m")
            else:
                print(f"  {key:<14}   0 places")

    print(f"\n{'='*50}")
    print("SEARCH SUMMARY")
    print(f"{'='*50}")
    print(f"Records:          {len(records)}")
    print(f"Geocoded:         {len(results)}")
    print(f"Skipped:          {len(records) - len(results)}")
    print(f"Time elapsed:     {elapsed:.1f}s")


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    if args.limit is not None:
        settings.SEARCH_LIMIT = args.limit
    if args.margin is not None:
        settings.SEARCH_MARGIN = args.margin
    if args.categories:
        settings.SEARCH_CATEGORIES = args.categories
    if args.concurrency is not None:
        settings.MAX_CONCURRENCY = args.concurrency
    return settings


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = apply_overrides(load_settings(), args)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    records = collect_records(args)
    if not records:
        parser.print_help()
        return 0

    try:
        categories = parse_categories(settings.SEARCH_CATEGORIES)
        start_time = time.time()
        results = asyncio.run(search_nearby(records, settings=settings, categories=categories))
    except (ConfigurationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130

    elapsed = time.time() - start_time
    print_summary(records, results, elapsed)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump([r.as_dict for r in results], f, indent=2)
        print(f"Results written to {args.output}")

    if args.geojson:
        with open(args.geojson, "w", encoding="utf-8") as f:
            json.dump(build_feature_collection(results), f, indent=2)
        print(f"GeoJSON written to {args.geojson}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
