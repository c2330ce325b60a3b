"""Global test configuration and fixtures.

Provides shared fixtures for all test levels including environment setup,
sample TMDB payloads and mocked HTTP sessions and Telegram objects.
"""

import os
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

# Test constants
TEST_BOT_TOKEN = os.getenv("TEST_BOT_TOKEN", "test_bot_token_placeholder")
TEST_TMDB_API_KEY = os.getenv("TEST_TMDB_API_KEY", "test_tmdb_key_placeholder")
TEST_CHAT_ID = 12345

# The global config is built on import, so secrets must exist before any
# moviebot module is imported by the test modules.
os.environ.setdefault("BOT_TOKEN", TEST_BOT_TOKEN)
os.environ.setdefault("TMDB_API_KEY", TEST_TMDB_API_KEY)

IMAGE_BASE = "https://image.tmdb.org/t/p/w500"


def make_movie(index: int, **overrides: Any) -> dict[str, Any]:
    """Build one TMDB discover result."""
    movie: dict[str, Any] = {
        "id": 1000 + index,
        "title": f"Movie {index}",
        "release_date": "2023-01-15",
        "original_language": "en",
        "vote_average": 7.0,
        "poster_path": f"/poster{index}.jpg",
        "popularity": 100.0 - index,
    }
    movie.update(overrides)
    return movie


@pytest.fixture
def movie_factory():
    """Factory for TMDB movie dictionaries."""
    return make_movie


@pytest.fixture
def discover_payload():
    """Factory for a TMDB discover response body."""

    def _payload(results: list[dict[str, Any]], page: int = 1) -> dict[str, Any]:
        return {
            "page": page,
            "results": results,
            "total_pages": 1,
            "total_results": len(results),
        }

    return _payload


@pytest.fixture
def mock_http_session():
    """Factory for a mocked aiohttp.ClientSession returning a fixed response."""

    def _session(status: int = 200, json_body: Any = None, text: str = "") -> MagicMock:
        response = MagicMock()
        response.status = status
        response.json = AsyncMock(return_value=json_body)
        response.text = AsyncMock(return_value=text)

        request_context = MagicMock()
        request_context.__aenter__ = AsyncMock(return_value=response)
        request_context.__aexit__ = AsyncMock(return_value=False)

        session = MagicMock()
        session.closed = False
        session.get = MagicMock(return_value=request_context)
        session.close = AsyncMock()
        session.response = response
        return session

    return _session


@pytest.fixture
def mock_telegram_bot():
    """Mock Telegram bot with async send methods."""
    bot = AsyncMock()
    bot.send_message = AsyncMock()
    bot.send_media_group = AsyncMock()
    bot.send_chat_action = AsyncMock()
    return bot


@pytest.fixture
def callback_update():
    """Factory for an Update carrying a callback query."""

    def _update(data: str | None, chat_id: int = TEST_CHAT_ID) -> MagicMock:
        update = MagicMock()
        update.callback_query.data = data
        update.callback_query.answer = AsyncMock()
        update.effective_chat.id = chat_id
        update.effective_user = MagicMock(id=777, username="test_user")
        return update

    return _update


@pytest.fixture
def bot_context(mock_telegram_bot):
    """Factory for a handler context holding the given orchestrator."""

    def _context(orchestrator: Any = None) -> MagicMock:
        context = MagicMock()
        context.bot = mock_telegram_bot
        context.bot_data = {"catalog_orchestrator": orchestrator}
        return context

    return _context
