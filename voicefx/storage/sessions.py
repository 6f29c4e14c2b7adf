"""In-memory per-user session records."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, replace
from typing import Iterable, Optional


class UnknownSessionError(KeyError):
    """Raised when writing a session for an identity outside the allow-list."""


@dataclass(frozen=True, slots=True)
class Session:
    """Preset selection of one allowed Telegram user."""

    user_id: str
    selected_preset: str = ""

    @property
    def has_preset(self) -> bool:
        return bool(self.selected_preset)


class SessionStore:
    """Holds one session per allowed identity behind a single lock.

    Keys are fixed at construction time; only the values are ever replaced.
    """

    def __init__(self, user_ids: Iterable[str]) -> None:
        self._sessions: dict[str, Session] = {user_id: Session(user_id=user_id) for user_id in user_ids}
        self._lock = asyncio.Lock()

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)

    async def get(self, user_id: str) -> Optional[Session]:
        """Return the session for ``user_id`` or ``None`` if it is not allowed."""

        async with self._lock:
            return self._sessions.get(user_id)

    async def set(self, user_id: str, session: Session) -> None:
        """Replace the stored session of an existing identity."""

        async with self._lock:
            if user_id not in self._sessions:
                raise UnknownSessionError(user_id)
            self._sessions[user_id] = session

    async def select_preset(self, user_id: str, preset: str) -> Session:
        """Store ``preset`` as the selection of ``user_id`` and return the new session."""

        async with self._lock:
            current = self._sessions.get(user_id)
            if current is None:
                raise UnknownSessionError(user_id)
            updated = replace(current, selected_preset=preset)
            self._sessions[user_id] = updated
            return updated
