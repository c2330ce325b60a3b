"""Menu action space for inline keyboard callbacks.

Every inline button carries one of these identifiers as callback data. The
current menu position is encoded in the identifier itself, so no session
state is kept on the server.
"""

from enum import StrEnum

from ..exceptions import UnknownActionError


class Action(StrEnum):
    """Known callback data values."""

    ROOT = "root"
    MOVIES = "movies"
    BOLLYWOOD = "bollywood"
    HOLLYWOOD = "hollywood"
    SONGS = "songs"
    VIDEOS = "videos"

    @property
    def is_catalog_category(self) -> bool:
        """Whether selecting this action fetches movies from the catalog."""
        return self in CATALOG_CATEGORIES

    @property
    def label(self) -> str:
        """Human-readable category name ("Bollywood", "Hollywood", ...)."""
        return self.value.capitalize()


CATALOG_CATEGORIES = frozenset({Action.BOLLYWOOD, Action.HOLLYWOOD})


def parse_action(data: str | None) -> Action:
    """Validate raw callback data against the action space.

    Args:
        data: Callback data from the inline button.

    Returns:
        Matching action.

    Raises:
        UnknownActionError: If data does not name a known action.
    """
    if not data:
        raise UnknownActionError(data)
    try:
        return Action(data.strip().lower())
    except ValueError as e:
        raise UnknownActionError(data) from e
