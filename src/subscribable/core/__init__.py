"""Core channel primitives."""

from .channel import Channel, Subscription, create_channel, subscribable
from .diagnostics import DiagnosticSink, LoggingDiagnostics, NullDiagnostics, RecordingDiagnostics
from .protocols import Subscribable
from .state import BroadcastState

__all__ = [
    "BroadcastState",
    "Channel",
    "DiagnosticSink",
    "LoggingDiagnostics",
    "NullDiagnostics",
    "RecordingDiagnostics",
    "Subscribable",
    "Subscription",
    "create_channel",
    "subscribable",
]
