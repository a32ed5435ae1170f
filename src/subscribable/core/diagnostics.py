"""Diagnostic sinks used by channels to report rejected broadcasts."""
from __future__ import annotations

import logging
import traceback
from typing import List, Protocol, Tuple

from ..config.settings import ChannelSettings


class DiagnosticSink(Protocol):
    def warn(self, message: str) -> None:
        ...

    def trace(self, message: str) -> None:
        ...


class LoggingDiagnostics:
    """Route diagnostics through the standard ``logging`` module.

    Warnings are logged at ``WARNING``. Traces are logged at ``DEBUG`` with the
    call-site stack appended to the message.
    """

    def __init__(self, logger: logging.Logger, trace_depth: int | None = None) -> None:
        self.logger = logger
        self.trace_depth = trace_depth

    @classmethod
    def from_settings(cls, settings: ChannelSettings) -> "LoggingDiagnostics":
        return cls(logging.getLogger(settings.logger_name), trace_depth=settings.trace_depth)

    def warn(self, message: str) -> None:
        self.logger.warning(message)

    def trace(self, message: str) -> None:
        if not self.logger.isEnabledFor(logging.DEBUG):
            return
        # Drop this frame so the stack ends at the caller of ``trace``.
        frames = traceback.format_stack()[:-1]
        if self.trace_depth is not None:
            frames = frames[-self.trace_depth:]
        self.logger.debug("%s\n%s", message, "".join(frames).rstrip())


class NullDiagnostics:
    def warn(self, message: str) -> None:
        pass

    def trace(self, message: str) -> None:
        pass


class RecordingDiagnostics:
    """Keep diagnostics in memory, mostly useful in tests."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str]] = []

    def warn(self, message: str) -> None:
        self.records.append(("warn", message))

    def trace(self, message: str) -> None:
        self.records.append(("trace", message))

    @property
    def warnings(self) -> List[str]:
        return [message for level, message in self.records if level == "warn"]

    @property
    def traces(self) -> List[str]:
        return [message for level, message in self.records if level == "trace"]

    def clear(self) -> None:
        self.records.clear()
