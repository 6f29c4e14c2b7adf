"""Session storage."""

from .sessions import Session, SessionStore, UnknownSessionError

__all__ = ["Session", "SessionStore", "UnknownSessionError"]
