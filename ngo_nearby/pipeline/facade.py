"""
Nearby-places facade providing a one-call interface to the pipeline.
"""

import logging
from typing import List, Optional, Sequence

import aiohttp

from ngo_nearby.core.config import Settings, load_settings
from ngo_nearby.models import NgoSearchResult, PlaceCategory
from ngo_nearby.pipeline.orchestrator import SearchOrchestrator

logger = logging.getLogger(__name__)


async def search_nearby(
    records: Sequence[str],
    settings: Optional[Settings] = None,
    categories: Optional[Sequence[PlaceCategory]] = None,
    concurrency: Optional[int] = None,
) -> List[NgoSearchResult]:
    """
    Geocode a batch of records and search nearby places for each.

    One aiohttp session is shared by every provider call in the batch.

    Args:
        records: Entries formatted '<name>, <address line>, <city>'
        settings: Settings to use (loaded from the environment if omitted)
        categories: Override the configured categories
        concurrency: Override MAX_CONCURRENCY

    Returns:
        One NgoSearchResult per geocoded record, in input order

    Raises:
        ConfigurationError: If the access token is missing

    Example:
        results = await search_nearby(
            ["Helping Hands, 123 Main St, Springfield"],
            categories=[PlaceCategory("restaurants", "restaurant")],
        )
    """
    if settings is None:
        settings = load_settings()

    async with aiohttp.ClientSession() as session:
        orchestrator = SearchOrchestrator.from_settings(
            settings,
            session=session,
            categories=categories,
            concurrency=concurrency,
        )
        logger.debug(
            f"Searching {len(records)} records for "
            f"{[c.key for c in orchestrator.categories]} "
            f"(concurrency={orchestrator.concurrency})"
        )
        return await orchestrator.run(records)
