"""
Async JSON-over-HTTP access to the Mapbox geocoding endpoint.

Every failure on the way to a decoded JSON object (connection error,
timeout, non-2xx status, body that is not a JSON object) surfaces as
ServiceError so the clients only have one exception to absorb.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from ngo_nearby.core.config import ProviderConfig
from ngo_nearby.core.exceptions import ServiceError

logger = logging.getLogger(__name__)


class JsonHttpClient:
    """
    Thin GET-and-decode wrapper bound to one provider configuration.

    Usage:
        async with aiohttp.ClientSession() as session:
            http = JsonHttpClient(config, session=session, provider="mapbox")
            data = await http.get_json("restaurant.json", {"limit": 5})

    When no session is given, a short-lived session is opened per request.
    """

    def __init__(
        self,
        config: ProviderConfig,
        session: Optional[aiohttp.ClientSession] = None,
        provider: str = "mapbox",
    ):
        self.config = config
        self.session = session
        self.provider = provider

    def url_for(self, path: str) -> str:
        return f"{self.config.base_url}/{path.lstrip('/')}"

    async def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        GET `path` relative to the provider base URL and decode the JSON body.

        The access token is always added to the query string.

        Args:
            path: Path below the base URL (already URL-encoded)
            params: Extra query parameters

        Returns:
            Decoded JSON object

        Raises:
            ServiceError: On any transport, status, or decoding failure
        """
        query = {"access_token": self.config.access_token}
        if params:
            query.update(params)

        url = self.url_for(path)
        timeout = aiohttp.ClientTimeout(total=self.config.timeout)

        try:
            if self.session is not None:
                return await self._request(self.session, url, query, timeout)

            async with aiohttp.ClientSession() as session:
                return await self._request(session, url, query, timeout)

        except asyncio.TimeoutError:
            raise ServiceError(
                f"Timeout after {self.config.timeout}s",
                provider=self.provider,
                query=path,
            )
        except aiohttp.ClientError as e:
            raise ServiceError(
                f"Request failed: {e}",
                provider=self.provider,
                query=path,
            ) from e
        except ValueError as e:
            raise ServiceError(
                f"Undecodable response: {e}",
                provider=self.provider,
                query=path,
            ) from e

    async def _request(
        self,
        session: aiohttp.ClientSession,
        url: str,
        params: Dict[str, Any],
        timeout: aiohttp.ClientTimeout,
    ) -> Dict[str, Any]:
        async with session.get(url, params=params, timeout=timeout) as response:
            if response.status < 200 or response.status >= 300:
                body = await response.text(errors="replace")
                raise ServiceError(
                    f"HTTP {response.status}: {body[:200]}",
                    provider=self.provider,
                    query=url,
                )

            try:
                data = await response.json(content_type=None)
            except ValueError as e:
                raise ServiceError(
                    f"Malformed JSON: {e}",
                    provider=self.provider,
                    query=url,
                ) from e

        if not isinstance(data, dict):
            raise ServiceError(
                f"Expected a JSON object, got {type(data).__name__}",
                provider=self.provider,
                query=url,
            )

        logger.debug(f"{self.provider}: GET {url} -> {len(data.get('features') or [])} features")
        return data
