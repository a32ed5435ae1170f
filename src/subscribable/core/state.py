"""Broadcast state tracking for a channel."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import TracebackType
from typing import Optional, Type


class BroadcastState(str, Enum):
    IDLE = "idle"
    BROADCASTING = "broadcasting"


@dataclass
class BroadcastGuard:
    """Scoped marker for an in-progress broadcast.

    ``acquire`` reports whether the caller may start a broadcast. Used as a
    context manager the guard always returns to ``IDLE`` on exit, including
    when a listener raises.
    """

    state: BroadcastState = BroadcastState.IDLE

    @property
    def active(self) -> bool:
        return self.state is BroadcastState.BROADCASTING

    def acquire(self) -> bool:
        if self.active:
            return False
        self.state = BroadcastState.BROADCASTING
        return True

    def release(self) -> None:
        self.state = BroadcastState.IDLE

    def __enter__(self) -> "BroadcastGuard":
        if not self.acquire():
            raise RuntimeError("broadcast already in progress")
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.release()
