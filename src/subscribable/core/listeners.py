"""Tagged listener entries stored by a channel."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Callback = Callable[[T], None]


@dataclass(frozen=True, eq=False)
class Persistent(Generic[T]):
    """A listener that stays registered until its handle is called."""

    callback: Callback
    once: bool = field(default=False, init=False)

    @property
    def key(self) -> int:
        # Registering the same function object twice must collapse to one entry.
        return id(self.callback)


@dataclass(frozen=True, eq=False)
class OnceOnly(Generic[T]):
    """A listener removed from the channel after its first invocation."""

    callback: Callback
    once: bool = field(default=True, init=False)

    @property
    def key(self) -> int:
        return id(self)


def make_entry(callback: Callback, once: bool = False) -> Persistent | OnceOnly:
    if once:
        return OnceOnly(callback)
    return Persistent(callback)
