"""Blueprint browser - the surface a display layer calls into.

Wires the data source, aggregator, renderer and session state together:

    lookup_author(author)        -> AuthorView
    open_blueprint(author, name) -> BlueprintDrawing
    current_author()             -> str | None

Input is validated before the data source is touched. A NotFound from an
author lookup becomes the empty AuthorView; every other error propagates
unchanged for the display layer to report.
"""

import logging
from typing import Optional

from blueprints.presenter.schemas import AuthorPage, BlueprintRow, OpenBlueprintAction
from blueprints.rendering.renderer import render_blueprint
from blueprints.rendering.schemas import BlueprintDrawing, RenderStyle
from blueprints.session.state import SessionState
from blueprints.sources.base import BlueprintSource, require_text
from blueprints.sources.errors import BlueprintNotFoundError
from blueprints.summaries.aggregator import empty_view, summarize
from blueprints.summaries.schemas import AuthorView

logger = logging.getLogger(__name__)


class BlueprintBrowser:
    """Author lookup and blueprint opening for one user session."""

    def __init__(
        self,
        source: BlueprintSource,
        session: Optional[SessionState] = None,
        style: Optional[RenderStyle] = None,
    ):
        self.source = source
        self.session = session or SessionState()
        self.style = style or RenderStyle()

    async def lookup_author(self, author: str) -> AuthorView:
        """Select an author and summarize their blueprints.

        Raises:
            BlueprintValidationError: If author is empty
            ServiceUnavailableError: If the data source failed
        """
        author = require_text(author, "author")
        self.session.set_current_author(author)

        try:
            blueprints = await self.source.fetch_by_author(author)
        except BlueprintNotFoundError:
            logger.info(f"No blueprints found for author: {author}")
            view = empty_view(author)
        else:
            view = summarize(author, blueprints)
            logger.info(
                f"Author {author}: {len(view.summaries)} blueprints, "
                f"{view.total_points} points"
            )

        self.session.remember_view(view)
        return view

    async def open_blueprint(self, author: str, name: str) -> BlueprintDrawing:
        """Fetch one blueprint and render it to draw ops.

        Raises:
            BlueprintValidationError: If author or name is empty
            BlueprintNotFoundError: If the blueprint does not exist
            ServiceUnavailableError: If the data source failed
        """
        author = require_text(author, "author")
        name = require_text(name, "name")
        blueprint = await self.source.fetch_by_author_and_name(author, name)
        return render_blueprint(blueprint, style=self.style)

    def current_author(self) -> Optional[str]:
        return self.session.get_current_author()

    @staticmethod
    def rows(view: AuthorView) -> list[BlueprintRow]:
        """Build display rows from an already-computed view."""
        return [
            BlueprintRow(
                name=s.name,
                point_count=s.point_count,
                open=OpenBlueprintAction(author=view.author, name=s.name),
            )
            for s in view.summaries
        ]

    async def author_page(self, author: str) -> AuthorPage:
        """Look up an author and package the view with its rows."""
        view = await self.lookup_author(author)
        if view.is_empty:
            message = f"No blueprints found for author: {view.author}"
        else:
            message = f"{view.author}'s blueprints:"
        return AuthorPage(view=view, rows=self.rows(view), message=message)
