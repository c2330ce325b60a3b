"""Partitioning of presentation entries into Telegram albums."""

from collections.abc import Iterable, Iterator
from itertools import islice

from ..models import AlbumBatch, PresentationEntry

# Telegram accepts at most 10 items per media group.
ALBUM_LIMIT = 10


def partition(
    entries: Iterable[PresentationEntry], size: int = ALBUM_LIMIT
) -> Iterator[AlbumBatch]:
    """Lazily split entries into consecutive batches of at most ``size``.

    Every batch except possibly the last holds exactly ``size`` entries.
    Empty input yields no batches.

    Raises:
        ValueError: If size is lower than 1.
    """
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")
    return _batches(iter(entries), size)


def _batches(iterator: Iterator[PresentationEntry], size: int) -> Iterator[AlbumBatch]:
    while chunk := tuple(islice(iterator, size)):
        yield AlbumBatch(entries=chunk)
