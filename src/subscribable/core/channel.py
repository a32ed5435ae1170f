"""In-memory broadcast channel."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, TypeVar

from ..config.settings import ChannelSettings
from .diagnostics import DiagnosticSink, LoggingDiagnostics
from .listeners import OnceOnly, Persistent, make_entry
from .state import BroadcastGuard, BroadcastState

logger = logging.getLogger(__name__)

T = TypeVar("T")

NESTED_WARNING = "Detected recursive broadcast, ignoring nested broadcast."
NESTED_TRACE = "Detected recursive broadcast"


class Subscription:
    """Handle returned by registration; calling it removes the listener."""

    def __init__(self, listeners: Dict[int, Persistent | OnceOnly], entry: Persistent | OnceOnly) -> None:
        self._listeners = listeners
        self._entry = entry

    @property
    def active(self) -> bool:
        return self._entry.key in self._listeners

    def __call__(self) -> bool:
        return self._listeners.pop(self._entry.key, None) is not None

    def __repr__(self) -> str:
        kind = "once" if self._entry.once else "persistent"
        return f"<Subscription {kind} active={self.active}>"


class Channel(Generic[T]):
    """Broadcasts values of type ``T`` to the listeners registered on it.

    Listeners run synchronously in registration order. A listener that calls
    ``broadcast`` on the same channel while it is being invoked is ignored and
    reported through the channel's diagnostics. Exceptions raised by a
    listener propagate to the caller of ``broadcast`` and skip the remaining
    listeners of that pass; the channel is idle again afterwards.
    """

    def __init__(
        self,
        diagnostics: DiagnosticSink | None = None,
        settings: ChannelSettings | None = None,
    ) -> None:
        self.settings = settings or ChannelSettings()
        if diagnostics is None:
            diagnostics = LoggingDiagnostics.from_settings(self.settings)
        self.diagnostics: DiagnosticSink = diagnostics
        self._listeners: Dict[int, Persistent | OnceOnly] = {}
        self._guard = BroadcastGuard()

    @property
    def state(self) -> BroadcastState:
        return self._guard.state

    @property
    def is_broadcasting(self) -> bool:
        return self._guard.active

    def __len__(self) -> int:
        return len(self._listeners)

    def register(self, callback: Callable[[T], None], once: bool = False) -> Subscription:
        if once:
            return self.register_once(callback)

        entry = make_entry(callback)
        # Re-registering keeps the original slot in the iteration order.
        entry = self._listeners.setdefault(entry.key, entry)
        return Subscription(self._listeners, entry)

    def register_once(self, callback: Callable[[T], None]) -> Subscription:
        entry = make_entry(callback, once=True)
        self._listeners[entry.key] = entry
        return Subscription(self._listeners, entry)

    def broadcast(self, value: T) -> None:
        if self._guard.active:
            self._reject_nested()
            return

        with self._guard:
            # Entries added during the pass wait for the next broadcast;
            # entries removed during the pass are skipped when their turn comes.
            for entry in list(self._listeners.values()):
                if self._listeners.get(entry.key) is not entry:
                    continue
                self._invoke(entry, value)

    def _invoke(self, entry: Persistent | OnceOnly, value: T) -> None:
        if isinstance(entry, OnceOnly):
            try:
                entry.callback(value)
            finally:
                self._discard(entry)
        else:
            entry.callback(value)

    def _discard(self, entry: Persistent | OnceOnly) -> None:
        if self._listeners.get(entry.key) is entry:
            del self._listeners[entry.key]

    def _reject_nested(self) -> None:
        if self.settings.warn_on_nested:
            self.diagnostics.warn(NESTED_WARNING)
        if self.settings.trace_on_nested:
            self.diagnostics.trace(NESTED_TRACE)

    subscribe = register
    subscribe_once = register_once
    publish = broadcast


def create_channel(
    *,
    diagnostics: DiagnosticSink | None = None,
    settings: ChannelSettings | None = None,
) -> Channel[Any]:
    """Create a channel with no listeners in the idle state."""
    channel: Channel[Any] = Channel(diagnostics=diagnostics, settings=settings)
    logger.debug("Created channel %#x", id(channel))
    return channel


subscribable = create_channel
