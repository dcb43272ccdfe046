"""
Session Store - Append-only, per-session history owned by the caller.

One lock per session key serializes appends for that session; different
sessions never wait on each other. Reads return copies.
"""
import threading
from typing import Any, Dict, Generic, List, TypeVar

T = TypeVar("T")


def slice_window(entries: List[T], n: int, offset: int = 0) -> List[T]:
    """
    Up to n entries ending `offset` entries before the newest.

    slice_window(h, 3) is the last three; slice_window(h, 3, offset=3)
    is the three before those.
    """
    end = len(entries) - offset
    if end <= 0 or n <= 0:
        return []
    return entries[max(0, end - n):end]


class SessionStore(Generic[T]):
    """Maps session id -> ordered list of entries. Entries are never removed."""

    def __init__(self):
        self._histories: Dict[str, List[T]] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, session_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[session_id] = lock
                self._histories[session_id] = []
            return lock

    def append(self, session_id: str, entry: T) -> int:
        """Append and return the new history length."""
        with self._lock_for(session_id):
            history = self._histories[session_id]
            history.append(entry)
            return len(history)

    def history(self, session_id: str) -> List[T]:
        if session_id not in self._locks:
            return []
        with self._lock_for(session_id):
            return list(self._histories[session_id])

    def recent_window(self, session_id: str, n: int, offset: int = 0) -> List[T]:
        return slice_window(self.history(session_id), n, offset)

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._histories)

    def count(self, session_id: str) -> int:
        return len(self.history(session_id))

    def sessions(self) -> List[str]:
        with self._registry_lock:
            return list(self._histories.keys())

    def stats(self) -> Dict[str, Any]:
        sessions = self.sessions()
        return {
            "session_count": len(sessions),
            "entry_count": sum(self.count(s) for s in sessions),
        }
