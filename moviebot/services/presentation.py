"""Shaping of raw catalog items into display-ready entries.

Filters out records that cannot be shown as photos, limits the result count
and renders the caption fields. Captions are sent with the HTML parse mode,
so every text value coming from TMDB is escaped before embedding.
"""

import html
import logging
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from itertools import islice

from ..config import DEFAULT_LANGUAGES
from ..models import CatalogItem, PresentationEntry

logger = logging.getLogger(__name__)

PLACEHOLDER = "—"


def escape_html(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for Telegram HTML captions."""
    return html.escape(text, quote=False)


def resolve_language(code: str | None, languages: Mapping[str, str] = DEFAULT_LANGUAGES) -> str:
    """Resolve an ISO 639-1 code to a display name.

    Falls back to the uppercased code when the table has no entry and to a
    dash when there is no code at all.

    Args:
        code: Language code from TMDB, may be None or empty.
        languages: Code to display name table.

    Returns:
        Display name, never empty.
    """
    if not code:
        return PLACEHOLDER
    return languages.get(code.lower()) or code.upper()


def format_rating(vote_average: float | None) -> str:
    """Format a 0-10 rating with one decimal, rounding half up."""
    if vote_average is None:
        return "0.0"
    try:
        value = Decimal(str(vote_average))
    except InvalidOperation:
        return "0.0"
    if not value.is_finite():
        return "0.0"
    return str(value.quantize(Decimal("0.1"), ROUND_HALF_UP))


def build_entry(
    item: CatalogItem,
    image_base: str,
    languages: Mapping[str, str] = DEFAULT_LANGUAGES,
) -> PresentationEntry:
    """Map one catalog item to its presentation entry.

    Args:
        item: Catalog item with a poster path.
        image_base: Prefix for poster URLs.
        languages: Code to display name table.

    Returns:
        Frozen presentation entry.
    """
    date = item.display_date
    return PresentationEntry(
        title=escape_html(item.display_title),
        date_label=escape_html(date or PLACEHOLDER),
        year=date[:4] if date else PLACEHOLDER,
        language=escape_html(resolve_language(item.original_language, languages)),
        rating=format_rating(item.vote_average),
        poster_url=f"{image_base}{item.poster_path}",
    )


def shape_results(
    items: Iterable[CatalogItem],
    count: int,
    image_base: str,
    languages: Mapping[str, str] = DEFAULT_LANGUAGES,
) -> list[PresentationEntry]:
    """Filter, truncate and format catalog items.

    Items without a poster are dropped silently. The remaining items keep
    their original order and are truncated to at most ``count`` entries.

    Args:
        items: Raw catalog items in server order.
        count: Maximum number of entries to return.
        image_base: Prefix for poster URLs.
        languages: Code to display name table.

    Returns:
        Presentation entries, at most ``count`` long.

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    with_poster = (item for item in items if item.has_poster)
    entries = [build_entry(item, image_base, languages) for item in islice(with_poster, count)]
    logger.debug("Shaped %d presentation entries (limit %d)", len(entries), count)
    return entries
