"""TMDB API client for catalog discovery.

Issues exactly one request per call to the TMDB discover endpoint and maps
the response to typed models. There is no retry and no caching: a failed
call surfaces immediately as UpstreamError with the response payload kept
for logging.
"""

import asyncio
import json
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from ..exceptions import UpstreamError
from ..models import CatalogItem, CatalogPage

logger = logging.getLogger(__name__)

POPULARITY_DESC = "popularity.desc"


class TMDBClient:
    """Async client for the TMDB v3 discover API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.themoviedb.org/3",
        timeout: float = 10.0,
        session: aiohttp.ClientSession | None = None,
    ):
        """Initialize TMDB client.

        Args:
            api_key: TMDB v3 API key.
            base_url: API root without trailing slash.
            timeout: Total timeout for one request in seconds.
            session: Optional externally managed HTTP session.
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={"Accept": "application/json"},
            )
        return self._session

    async def close(self) -> None:
        """Close the session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def discover_movies(self, language: str, page: int = 1) -> list[CatalogItem]:
        """Fetch one page of popular movies in the given original language.

        Args:
            language: ISO 639-1 original language filter ("hi", "en", ...).
            page: 1-based result page.

        Returns:
            Catalog items in the order returned by TMDB.

        Raises:
            ValueError: If page is lower than 1.
            UpstreamError: If the request fails or TMDB answers with an error.
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")

        params = {
            "api_key": self.api_key,
            "with_original_language": language,
            "sort_by": POPULARITY_DESC,
            "include_adult": "false",
            "page": page,
        }
        data = await self._get_json("/discover/movie", params)

        try:
            catalog_page = CatalogPage.model_validate(data)
        except ValidationError as e:
            raise UpstreamError("Unexpected TMDB response shape", payload=data) from e

        logger.info(
            "TMDB discover language=%s page=%d returned %d items",
            language,
            page,
            len(catalog_page.results),
        )
        return catalog_page.results

    async def _get_json(self, endpoint: str, params: dict[str, Any]) -> Any:
        """Make a GET request and return the decoded JSON body."""
        session = await self._get_session()
        url = f"{self.base_url}{endpoint}"

        try:
            async with session.get(url, params=params, timeout=self.timeout) as response:
                if not 200 <= response.status < 300:
                    payload = await self._read_error_payload(response)
                    raise UpstreamError(
                        f"TMDB request to {endpoint} failed",
                        status=response.status,
                        payload=payload,
                    )

                try:
                    return await response.json(content_type=None)
                except (aiohttp.ContentTypeError, ValueError) as e:
                    # ValueError covers malformed JSON and invalid UTF-8 alike
                    raise UpstreamError(
                        "TMDB returned a body that is not JSON", status=response.status
                    ) from e
        except asyncio.TimeoutError as e:
            raise UpstreamError(f"TMDB request to {endpoint} timed out") from e
        except aiohttp.ClientError as e:
            raise UpstreamError(f"Connection error: {e}") from e

    @staticmethod
    async def _read_error_payload(response: aiohttp.ClientResponse) -> Any:
        """Decode an error body as JSON when possible, otherwise as text."""
        text = await response.text(errors="replace")
        try:
            return json.loads(text)
        except ValueError:
            return text
