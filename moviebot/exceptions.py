"""Exception hierarchy for the movie catalog bot.

Errors raised by the catalog client and the album delivery layer are caught
at the handler boundary, logged with their diagnostic payload and turned into
a single user-visible notice.
"""

from typing import Any


class BotError(Exception):
    """Base exception for all bot errors."""


class ConfigError(BotError):
    """Required settings are missing or invalid."""


class UpstreamError(BotError):
    """TMDB is unreachable or answered with a non-success status.

    Attributes:
        status: HTTP status code, None for transport failures.
        payload: Decoded error body (JSON or text) for logging.
    """

    def __init__(self, message: str, status: int | None = None, payload: Any = None):
        super().__init__(message)
        self.status = status
        self.payload = payload

    def __str__(self) -> str:
        base = super().__str__()
        if self.status is None:
            return base
        return f"{base} (HTTP {self.status})"


class EmptyResultError(BotError):
    """No catalog item survived filtering for the requested category."""

    def __init__(self, category: str):
        super().__init__(f"No results for category '{category}'")
        self.category = category


class DeliveryError(BotError):
    """Sending an album to Telegram failed.

    Attributes:
        batch_index: Zero-based index of the album that failed.
    """

    def __init__(self, message: str, batch_index: int | None = None):
        super().__init__(message)
        self.batch_index = batch_index


class UnknownActionError(BotError):
    """Callback data does not name a known menu action."""

    def __init__(self, data: str | None):
        super().__init__(f"Unknown action: {data!r}")
        self.data = data
