"""Tests for diagnostic sinks and their wiring into channels."""

import logging

from subscribable import ChannelSettings, LoggingDiagnostics, NullDiagnostics, create_channel
from subscribable.core.channel import NESTED_TRACE, NESTED_WARNING


def _nested_broadcast(channel):
    channel.register(lambda value: channel.broadcast(value))
    channel.broadcast(1)


def test_default_sink_logs_warning_and_trace(caplog):
    caplog.set_level(logging.DEBUG, logger="subscribable.channel")
    channel = create_channel()

    _nested_broadcast(channel)

    records = [r for r in caplog.records if r.name == "subscribable.channel"]
    assert [r.levelno for r in records] == [logging.WARNING, logging.DEBUG]
    assert records[0].getMessage() == NESTED_WARNING
    trace = records[1].getMessage()
    assert trace.startswith(NESTED_TRACE)
    assert "_nested_broadcast" in trace


def test_trace_skipped_when_debug_disabled(caplog):
    caplog.set_level(logging.WARNING, logger="subscribable.channel")
    channel = create_channel()

    _nested_broadcast(channel)

    records = [r for r in caplog.records if r.name == "subscribable.channel"]
    assert [r.levelno for r in records] == [logging.WARNING]


def test_settings_choose_logger_and_toggle_messages(caplog):
    caplog.set_level(logging.DEBUG, logger="app.events")
    settings = ChannelSettings(logger_name="app.events", warn_on_nested=False)
    channel = create_channel(settings=settings)

    _nested_broadcast(channel)

    records = [r for r in caplog.records if r.name == "app.events"]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG


def test_trace_depth_limits_frames():
    logger = logging.getLogger("subscribable.tests.depth")
    logger.setLevel(logging.DEBUG)
    messages = []

    class _Capture(logging.Handler):
        def emit(self, record):
            messages.append(record.getMessage())

    handler = _Capture()
    logger.addHandler(handler)
    try:
        LoggingDiagnostics(logger, trace_depth=1).trace("where")
    finally:
        logger.removeHandler(handler)

    body = messages[0].split("\n", 1)[1]
    assert body.count('File "') == 1
    assert "test_trace_depth_limits_frames" in body


def test_disabled_diagnostics(diagnostics):
    settings = ChannelSettings(warn_on_nested=False, trace_on_nested=False)
    channel = create_channel(diagnostics=diagnostics, settings=settings)

    _nested_broadcast(channel)

    assert diagnostics.records == []


def test_null_sink_is_silent(caplog):
    caplog.set_level(logging.DEBUG)
    channel = create_channel(diagnostics=NullDiagnostics())

    _nested_broadcast(channel)

    assert not [r for r in caplog.records if r.name == "subscribable.channel"]


def test_recording_sink_clear(diagnostics):
    diagnostics.warn("w")
    diagnostics.trace("t")
    assert diagnostics.records == [("warn", "w"), ("trace", "t")]

    diagnostics.clear()
    assert diagnostics.records == []
