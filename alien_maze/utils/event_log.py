"""Thread-safe event log for session events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GameEvent:
    """A single session event for the API event feed."""

    seq: int
    category: str
    message: str


class EventLog:
    """Bounded event log. Writers append; readers copy a slice.

    Sequence numbers never restart, so pollers can keep asking for
    ``since(last_seq + 1)`` across games.
    """

    __slots__ = ("_buffer", "_lock", "_next_seq")

    def __init__(self, maxlen: int = 1000) -> None:
        self._buffer: deque[GameEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()
        self._next_seq = 1

    def append(self, category: str, message: str) -> GameEvent:
        with self._lock:
            event = GameEvent(seq=self._next_seq, category=category, message=message)
            self._next_seq += 1
            self._buffer.append(event)
        return event

    def since(self, seq: int) -> list[GameEvent]:
        """Return all retained events with seq >= *seq*."""
        with self._lock:
            return [e for e in self._buffer if e.seq >= seq]

    def latest(self, count: int = 50) -> list[GameEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
