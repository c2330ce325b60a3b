"""Tests for shaping catalog items into presentation entries."""

import pytest

from moviebot.models import CatalogItem
from moviebot.services.presentation import (
    build_entry,
    escape_html,
    format_rating,
    resolve_language,
    shape_results,
)

IMAGE_BASE = "https://image.tmdb.org/t/p/w500"


def _items(raw: list[dict]) -> list[CatalogItem]:
    return [CatalogItem.model_validate(item) for item in raw]


def test_caption_for_documented_example() -> None:
    """Single complete movie renders every caption field."""
    items = _items(
        [
            {
                "title": "A",
                "poster_path": "/a.jpg",
                "release_date": "2020-05-01",
                "original_language": "en",
                "vote_average": 7.55,
            }
        ]
    )

    entries = shape_results(items, count=10, image_base=IMAGE_BASE)

    assert len(entries) == 1
    assert entries[0].caption == (
        "<b>A</b>\n"
        "📅 Release: 2020-05-01 (2020)\n"
        "🌐 Language: English\n"
        "⭐ Rating: 7.6"
    )
    assert entries[0].poster_url == "https://image.tmdb.org/t/p/w500/a.jpg"


def test_items_without_poster_are_dropped(movie_factory) -> None:
    raw = [
        movie_factory(1),
        movie_factory(2, poster_path=None),
        movie_factory(3, poster_path=""),
        movie_factory(4),
    ]
    items = _items(raw)

    entries = shape_results(items, count=10, image_base=IMAGE_BASE)

    assert [entry.title for entry in entries] == ["Movie 1", "Movie 4"]
    assert len(entries) <= sum(1 for item in items if item.has_poster)


def test_order_is_preserved_after_filtering(movie_factory) -> None:
    raw = [movie_factory(i, poster_path=None if i % 3 == 0 else f"/p{i}.jpg") for i in range(12)]

    entries = shape_results(_items(raw), count=20, image_base=IMAGE_BASE)

    expected = [f"Movie {i}" for i in range(12) if i % 3 != 0]
    assert [entry.title for entry in entries] == expected


@pytest.mark.parametrize("count", [0, 1, 5, 10, 15, 30])
def test_truncation_never_exceeds_count(movie_factory, count: int) -> None:
    items = _items([movie_factory(i) for i in range(15)])

    entries = shape_results(items, count=count, image_base=IMAGE_BASE)

    assert len(entries) == min(count, 15)


def test_fifteen_items_truncated_to_ten(movie_factory) -> None:
    """Truncation keeps the first ten eligible movies."""
    items = _items([movie_factory(i) for i in range(15)])

    entries = shape_results(items, count=10, image_base=IMAGE_BASE)

    assert [entry.title for entry in entries] == [f"Movie {i}" for i in range(10)]


def test_negative_count_rejected(movie_factory) -> None:
    with pytest.raises(ValueError):
        shape_results(_items([movie_factory(1)]), count=-1, image_base=IMAGE_BASE)


def test_all_items_without_poster_yield_nothing(movie_factory) -> None:
    items = _items([movie_factory(i, poster_path=None) for i in range(5)])

    assert shape_results(items, count=10, image_base=IMAGE_BASE) == []


def test_title_markup_is_escaped() -> None:
    item = CatalogItem(title="<script>alert(1)</script> & co", poster_path="/x.jpg")

    entry = build_entry(item, IMAGE_BASE)

    assert "&lt;script&gt;" in entry.caption
    assert "<script>" not in entry.caption
    assert "&amp; co" in entry.caption
    assert entry.caption.startswith("<b>&lt;script&gt;")


def test_escape_html_leaves_quotes_untouched() -> None:
    assert escape_html('Say "hi" & <go>') == 'Say "hi" &amp; &lt;go&gt;'


def test_missing_date_uses_placeholders() -> None:
    item = CatalogItem(title="Undated", poster_path="/u.jpg")

    entry = build_entry(item, IMAGE_BASE)

    assert "📅 Release: — (—)" in entry.caption


def test_tv_fields_are_used_as_fallback() -> None:
    item = CatalogItem(name="Show", first_air_date="2019-09-01", poster_path="/s.jpg")

    entry = build_entry(item, IMAGE_BASE)

    assert entry.title == "Show"
    assert "2019-09-01 (2019)" in entry.caption


def test_missing_rating_defaults_to_zero() -> None:
    item = CatalogItem(title="New", poster_path="/n.jpg")

    assert "⭐ Rating: 0.0" in build_entry(item, IMAGE_BASE).caption


@pytest.mark.parametrize(
    ("value", "expected"),
    [(7.55, "7.6"), (8, "8.0"), (6.04, "6.0"), (0.05, "0.1"), (10.0, "10.0"), (None, "0.0")],
)
def test_format_rating(value, expected: str) -> None:
    assert format_rating(value) == expected


def test_unknown_language_is_uppercased() -> None:
    assert resolve_language("xx") == "XX"


def test_known_language_is_resolved() -> None:
    assert resolve_language("hi") == "Hindi"
    assert resolve_language("TE") == "Telugu"


def test_missing_language_uses_placeholder() -> None:
    assert resolve_language(None) == "—"
    assert resolve_language("") == "—"


def test_custom_language_table() -> None:
    item = CatalogItem(title="Film", original_language="fr", poster_path="/f.jpg")

    entry = build_entry(item, IMAGE_BASE, languages={"fr": "French"})

    assert "🌐 Language: French" in entry.caption


def test_presentation_entry_is_immutable() -> None:
    entry = build_entry(CatalogItem(title="Frozen", poster_path="/f.jpg"), IMAGE_BASE)

    with pytest.raises(Exception):
        entry.title = "Changed"  # type: ignore[misc]
