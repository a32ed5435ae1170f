"""Structural interface implemented by channels."""
from __future__ import annotations

from typing import Callable, Protocol, TypeVar

T = TypeVar("T")


class Unsubscribe(Protocol):
    def __call__(self) -> bool:
        ...


class Subscribable(Protocol[T]):
    """An object listeners can subscribe to and values can be published on."""

    def register(self, callback: Callable[[T], None], once: bool = False) -> Unsubscribe:
        """Add ``callback``; with ``once`` it is removed after its first invocation."""
        ...

    def register_once(self, callback: Callable[[T], None]) -> Unsubscribe:
        """Add ``callback`` for a single invocation."""
        ...

    def broadcast(self, value: T) -> None:
        """Invoke every registered listener with ``value``."""
        ...
