"""Dependency-injection container.

This module defines a dependency-injection (DI) container that wires together
the application's components from the loaded configuration. Tests override
the ``settings`` provider to build components from fake settings.
"""

from dependency_injector import containers, providers

from moviebot.bot.catalog_orchestrator import CatalogOrchestrator
from moviebot.config import config
from moviebot.services.tmdb import TMDBClient


class Container(containers.DeclarativeContainer):
    """DI container for the application.

    This container holds the wiring for all the application's components.
    """

    settings = providers.Object(config)

    # Services
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=settings.provided.catalog.api_key,
        base_url=settings.provided.catalog.base_url,
        timeout=settings.provided.catalog.timeout,
    )

    # Bot components
    catalog_orchestrator = providers.Singleton(
        CatalogOrchestrator,
        client=tmdb_client,
        categories=settings.provided.categories,
        languages=settings.provided.languages,
        image_base=settings.provided.catalog.image_base,
        result_count=settings.provided.catalog.result_count,
        page=settings.provided.catalog.page,
    )
