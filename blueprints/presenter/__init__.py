"""Presentation-facing surface: author lookup, row descriptors, blueprint opening."""

from blueprints.presenter.browser import BlueprintBrowser
from blueprints.presenter.schemas import AuthorPage, BlueprintRow, OpenBlueprintAction

__all__ = [
    "AuthorPage",
    "BlueprintBrowser",
    "BlueprintRow",
    "OpenBlueprintAction",
]
