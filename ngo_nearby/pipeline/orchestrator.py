"""
Geocode-then-search orchestration.

For each raw record: parse it, geocode "<address line>, <city>", build the
bounding box, run one place search per configured category, and collect the
results. Records that cannot be geocoded are logged and left out; the rest
keep their input order.
"""

import asyncio
import logging
from typing import List, Optional, Sequence, Tuple

import aiohttp

from ngo_nearby.core.config import Settings
from ngo_nearby.core.utils.geo import DEFAULT_MARGIN_DEGREES, build_bounding_box
from ngo_nearby.core.utils.records import parse_location_record
from ngo_nearby.geocoding.base import BaseGeocoder
from ngo_nearby.geocoding.providers.mapbox import MapboxGeocoder
from ngo_nearby.models import LocationSummary, NgoSearchResult, PlaceCategory
from ngo_nearby.search.base import BasePlaceSearcher, DEFAULT_LIMIT
from ngo_nearby.search.providers.mapbox import MapboxPlaceSearcher

logger = logging.getLogger(__name__)


class SearchOrchestrator:
    """
    Drives the nearby-places pipeline over a batch of records.

    With concurrency=1 every geocode and search call runs one after another,
    in input order. With concurrency=N up to N records are in flight at once
    (categories within a record still run in order); each record keeps its
    input index and the output is reassembled in that order.

    Usage:
        orchestrator = SearchOrchestrator(geocoder, searcher, categories)
        results = await orchestrator.run(["Helping Hands, 123 Main St, Springfield"])
    """

    def __init__(
        self,
        geocoder: BaseGeocoder,
        searcher: BasePlaceSearcher,
        categories: Sequence[PlaceCategory],
        margin: float = DEFAULT_MARGIN_DEGREES,
        limit: int = DEFAULT_LIMIT,
        concurrency: int = 1,
    ):
        """
        Args:
            geocoder: Resolves record addresses to coordinates
            searcher: Finds places of one category in a bounding box
            categories: Categories searched for every record, in order
            margin: Bounding box half-width in degrees
            limit: Maximum places kept per category
            concurrency: Maximum records processed at once (>= 1)
        """
        if concurrency < 1:
            raise ValueError(f"concurrency must be >= 1, got {concurrency}")

        self.geocoder = geocoder
        self.searcher = searcher
        self.categories = list(categories)
        self.margin = margin
        self.limit = limit
        self.concurrency = concurrency

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        session: Optional[aiohttp.ClientSession] = None,
        categories: Optional[Sequence[PlaceCategory]] = None,
        concurrency: Optional[int] = None,
    ) -> "SearchOrchestrator":
        """
        Build an orchestrator backed by the Mapbox clients.

        Raises:
            ConfigurationError: If the access token is missing or the
                                category specification is invalid
        """
        provider = settings.provider_config()
        return cls(
            geocoder=MapboxGeocoder(provider, session=session),
            searcher=MapboxPlaceSearcher(provider, session=session),
            categories=categories if categories is not None else settings.categories,
            margin=settings.SEARCH_MARGIN,
            limit=settings.SEARCH_LIMIT,
            concurrency=concurrency if concurrency is not None else settings.MAX_CONCURRENCY,
        )

    async def process_record(self, raw: str) -> Optional[NgoSearchResult]:
        """
        Run the pipeline for one raw record.

        Returns:
            NgoSearchResult, or None when the record could not be geocoded
        """
        record = parse_location_record(raw)
        coordinates = await self.geocoder.geocode(record.query)

        if coordinates is None:
            logger.error(
                f"Coordinates not found for {record.name}, "
                f"{record.address_line}, {record.city}"
            )
            return None

        bbox = build_bounding_box(coordinates, margin=self.margin)
        result = NgoSearchResult(
            name=record.name,
            location=LocationSummary(name=record.address_line, city=record.city),
            coordinates=coordinates,
        )

        for category in self.categories:
            places = await self.searcher.search(bbox, category.query, limit=self.limit)
            result.nearby_places[category.key] = places

        logger.info(
            f"{record.name}: "
            + ", ".join(f"{k}={len(v)}" for k, v in result.nearby_places.items())
        )
        return result

    async def run(self, records: Sequence[str]) -> List[NgoSearchResult]:
        """
        Process a batch of raw records.

        Args:
            records: Entries formatted '<name>, <address line>, <city>'

        Returns:
            One NgoSearchResult per geocoded record, in input order
        """
        if self.concurrency == 1:
            results = []
            for raw in records:
                result = await self.process_record(raw)
                if result is not None:
                    results.append(result)
        else:
            results = await self._run_bounded(records)

        logger.info(f"Resolved {len(results)}/{len(records)} records")
        return results

    async def _run_bounded(self, records: Sequence[str]) -> List[NgoSearchResult]:
        semaphore = asyncio.Semaphore(self.concurrency)

        async def process_one(index: int, raw: str) -> Tuple[int, Optional[NgoSearchResult]]:
            async with semaphore:
                return index, await self.process_record(raw)

        tasks = [asyncio.ensure_future(process_one(i, raw)) for i, raw in enumerate(records)]
        by_index = {}

        try:
            for coro in asyncio.as_completed(tasks):
                index, result = await coro
                by_index[index] = result
        finally:
            for task in tasks:
                task.cancel()

        return [
            by_index[i]
            for i in sorted(by_index)
            if by_index[i] is not None
        ]
