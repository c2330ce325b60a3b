"""Catalog pipeline coordination for menu categories.

Runs the request-scoped pipeline for one category selection: TMDB query,
result shaping and album partitioning. Delivery stays with the handler.
"""

import logging
from collections.abc import Mapping

from ..exceptions import ConfigError, EmptyResultError
from ..models import AlbumBatch
from ..services.batching import ALBUM_LIMIT, partition
from ..services.presentation import shape_results
from ..services.tmdb import TMDBClient

logger = logging.getLogger(__name__)


class CatalogOrchestrator:
    """Coordinates catalog lookups for menu categories.

    Responsibilities:
    - Resolve a category to its original language filter
    - Query TMDB for one page of popular movies
    - Shape the results and split them into albums
    """

    def __init__(
        self,
        client: TMDBClient,
        categories: Mapping[str, str],
        languages: Mapping[str, str],
        image_base: str,
        result_count: int = 10,
        page: int = 1,
        album_size: int = ALBUM_LIMIT,
    ) -> None:
        """Initialize catalog orchestrator.

        Args:
            client: TMDB client used for discovery.
            categories: Category to original language table.
            languages: Language code to display name table.
            image_base: Prefix for poster URLs.
            result_count: Maximum movies returned per category.
            page: Discover page requested.
            album_size: Maximum photos per album.
        """
        self.client = client
        self.categories = categories
        self.languages = languages
        self.image_base = image_base
        self.result_count = result_count
        self.page = page
        self.album_size = album_size

    def language_for(self, category: str) -> str:
        """Get the original language filter for a category.

        Raises:
            ConfigError: If the category is not configured.
        """
        try:
            return self.categories[category.lower()]
        except KeyError as e:
            raise ConfigError(f"No language configured for category {category!r}") from e

    async def fetch_albums(self, category: str) -> list[AlbumBatch]:
        """Fetch, shape and partition movies for a category.

        Args:
            category: Menu category name ("bollywood", "hollywood").

        Returns:
            Non-empty list of album batches in display order.

        Raises:
            ConfigError: If the category has no language filter.
            EmptyResultError: If no movie with a poster was returned.
            UpstreamError: If the TMDB request failed.
        """
        language = self.language_for(category)
        items = await self.client.discover_movies(language, page=self.page)
        entries = shape_results(items, self.result_count, self.image_base, self.languages)

        if not entries:
            logger.info("No eligible items for %s (%d raw items)", category, len(items))
            raise EmptyResultError(category)

        albums = list(partition(entries, self.album_size))
        logger.info(
            "Prepared %d entries in %d albums for %s", len(entries), len(albums), category
        )
        return albums
