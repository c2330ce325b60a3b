"""Data models for the movie catalog bot.

Defines Pydantic models for the TMDB discover response, the display-ready
presentation of a single movie and the album batches handed to Telegram.
Presentation models are frozen: they are built once per request and never
modified afterwards.
"""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

CAPTION_TEMPLATE = (
    "<b>{title}</b>\n"
    "📅 Release: {date} ({year})\n"
    "🌐 Language: {language}\n"
    "⭐ Rating: {rating}"
)


class CatalogItem(BaseModel):
    """Raw movie or TV record from the TMDB discover endpoint.

    Attributes:
        title: Movie title.
        name: TV show name, used when title is absent.
        release_date: Movie release date (YYYY-MM-DD).
        first_air_date: TV first air date (YYYY-MM-DD).
        original_language: ISO 639-1 code of the original language.
        vote_average: Average user rating on a 0-10 scale.
        poster_path: Poster path relative to the image base URL.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    name: str | None = None
    release_date: str | None = None
    first_air_date: str | None = None
    original_language: str | None = None
    vote_average: float | None = None
    poster_path: str | None = None

    @property
    def display_title(self) -> str:
        """Get the display title regardless of media type."""
        return self.title or self.name or ""

    @property
    def display_date(self) -> str:
        """Get the release or first air date, empty when unknown."""
        return self.release_date or self.first_air_date or ""

    @property
    def has_poster(self) -> bool:
        """Whether the record can be rendered as a photo."""
        return bool(self.poster_path)


class CatalogPage(BaseModel):
    """One page of TMDB discover results."""

    model_config = ConfigDict(extra="ignore")

    page: int = 1
    results: list[CatalogItem] = Field(default_factory=list)
    total_pages: int = 0
    total_results: int = 0


class PresentationEntry(BaseModel):
    """Display-ready representation of one catalog item.

    Text fields are already HTML-escaped and safe to embed in a caption
    sent with the HTML parse mode.

    Attributes:
        title: Escaped title.
        date_label: Escaped release date or a dash.
        year: Four-digit year or a dash.
        language: Escaped language display name.
        rating: Rating formatted to one decimal place.
        poster_url: Absolute poster image URL.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    date_label: str
    year: str
    language: str
    rating: str
    poster_url: str

    @property
    def caption(self) -> str:
        """Photo caption in Telegram HTML markup."""
        return CAPTION_TEMPLATE.format(
            title=self.title,
            date=self.date_label,
            year=self.year,
            language=self.language,
            rating=self.rating,
        )


class AlbumBatch(BaseModel):
    """Ordered group of entries sent as one Telegram media group."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[PresentationEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PresentationEntry]:  # type: ignore[override]
        return iter(self.entries)
