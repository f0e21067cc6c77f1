import secrets
import threading
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager

from app.session.session_log import SessionLog

SESSION_ID_KEY = "sid"


class SessionStore:
    """Process-local store of session logs keyed by session id.

    Only the id travels in the session cookie; the entries stay server-side
    and live as long as the process.
    """

    def __init__(self) -> None:
        self._entries: dict[str, list[str]] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def log_for(self, session_id: str) -> SessionLog:
        with self._guard:
            entries = self._entries.setdefault(session_id, [])
        return SessionLog(entries)

    @contextmanager
    def exclusive(self, session_id: str) -> Iterator[SessionLog]:
        """Yield the session's log while holding that session's lock."""
        with self._guard:
            lock = self._locks.setdefault(session_id, threading.Lock())
        with lock:
            yield self.log_for(session_id)

    def __len__(self) -> int:
        return len(self._entries)


def session_id_from(session: MutableMapping[str, object]) -> str:
    """Return the id stored in the cookie session, issuing one if missing."""
    session_id = session.get(SESSION_ID_KEY)
    if not isinstance(session_id, str) or not session_id:
        session_id = secrets.token_urlsafe(16)
        session[SESSION_ID_KEY] = session_id
    return session_id
