"""subscribable: a minimal in-memory publish/subscribe channel."""
from __future__ import annotations

# Importing the package never touches logging configuration. Applications
# that want structured output call `subscribable.logging.configure_logging()`.

from .config.settings import ChannelSettings, load_settings_from_env
from .core.channel import Channel, Subscription, create_channel, subscribable
from .core.diagnostics import DiagnosticSink, LoggingDiagnostics, NullDiagnostics
from .core.protocols import Subscribable
from .core.state import BroadcastState

__version__ = "0.1.0"

__all__ = [
    "BroadcastState",
    "Channel",
    "ChannelSettings",
    "DiagnosticSink",
    "LoggingDiagnostics",
    "NullDiagnostics",
    "Subscribable",
    "Subscription",
    "create_channel",
    "load_settings_from_env",
    "subscribable",
]
