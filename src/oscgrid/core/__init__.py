"""Session layer tying the grid, the parser and device events together."""

from .session import GridSession, SessionObserver

__all__ = ["GridSession", "SessionObserver"]
