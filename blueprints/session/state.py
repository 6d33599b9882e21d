"""Session state - the currently selected author and their last summary."""

import logging
from typing import Optional

from blueprints.summaries.schemas import AuthorView

logger = logging.getLogger(__name__)


class SessionState:
    """Holds the selected author and the most recent AuthorView.

    Selecting a new author discards the held view; views are never merged
    across authors.
    """

    def __init__(self):
        self._current_author: Optional[str] = None
        self._current_view: Optional[AuthorView] = None

    def set_current_author(self, name: str) -> None:
        self._current_author = name
        self._current_view = None
        logger.debug(f"Current author set to {name}")

    def get_current_author(self) -> Optional[str]:
        return self._current_author

    @property
    def current_view(self) -> Optional[AuthorView]:
        return self._current_view

    def remember_view(self, view: AuthorView) -> None:
        """Hold view for re-rendering; ignored unless it belongs to the current author."""
        if view.author != self._current_author:
            logger.debug(
                f"Ignoring view for {view.author}; current author is {self._current_author}"
            )
            return
        self._current_view = view

    def reset(self) -> None:
        self._current_author = None
        self._current_view = None
