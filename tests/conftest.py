"""Shared pytest fixtures for channel tests."""

import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from subscribable import create_channel
from subscribable.core.diagnostics import RecordingDiagnostics


@pytest.fixture
def diagnostics():
    """Diagnostics sink that keeps every message for assertions."""
    return RecordingDiagnostics()


@pytest.fixture
def channel(diagnostics):
    """Fresh channel wired to the recording diagnostics sink."""
    return create_channel(diagnostics=diagnostics)


@pytest.fixture
def calls():
    """Ordered log of ``(listener, value)`` pairs appended by listeners."""
    return []


@pytest.fixture
def recorder(calls):
    """Build a listener that appends ``(name, value)`` to ``calls``."""

    def build(name):
        def listener(value):
            calls.append((name, value))

        return listener

    return build
