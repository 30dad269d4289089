"""In-game message log.

Collects the combat lines produced by the turn engine so a front end can
show the most recent ones.  The log can be locked (e.g. while a modal
screen is up), in which case new messages are rejected rather than
queued.
"""

from __future__ import annotations

from collections import deque


class MessageLog:
    """Append-only log with an optional size bound and a lock switch.

    Parameters
    ----------
    max_entries:
        Oldest entries are dropped once this many are stored.  ``None``
        keeps everything.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        self._entries: deque[str] = deque(maxlen=max_entries)
        self._locked = False

    # -- writing -------------------------------------------------------------

    def send(self, msg: str) -> bool:
        """Append *msg*.  Returns ``False`` (and drops it) while locked."""
        if self._locked:
            return False
        self._entries.append(msg)
        return True

    def show(self) -> str | None:
        """Pop and return the newest message, or ``None`` if empty."""
        if not self._entries:
            return None
        return self._entries.pop()

    # -- locking -------------------------------------------------------------

    def lock(self) -> None:
        self._locked = True

    def unlock(self) -> None:
        self._locked = False

    @property
    def is_locked(self) -> bool:
        return self._locked

    # -- reading -------------------------------------------------------------

    def recent(self, n: int = 2) -> list[str]:
        """The last *n* messages, oldest first."""
        if n <= 0:
            return []
        return list(self._entries)[-n:]

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
