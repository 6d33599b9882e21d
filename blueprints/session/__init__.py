"""Per-session selection state."""

from blueprints.session.state import SessionState

__all__ = ["SessionState"]
