"""Tests for structured logging and the debug events rresult emits."""

from __future__ import annotations

import io

import orjson
import pytest

from rresult import Result, UnwrapFailedError, failure, propagate, success
from rresult.observability import (
    BoundLogger,
    ConsoleRenderer,
    JsonRenderer,
    LogEntry,
    NoOpRenderer,
    configure_logging,
    get_logger,
)


def _json_lines(buf: io.StringIO) -> list[dict[str, object]]:
    return [orjson.loads(line) for line in buf.getvalue().splitlines()]


def test_configure_logging_renderers() -> None:
    assert isinstance(configure_logging(format="console"), ConsoleRenderer)
    assert isinstance(configure_logging(format="json"), JsonRenderer)
    assert isinstance(configure_logging(format="none"), NoOpRenderer)

    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging(format="xml")


def test_bind_is_immutable() -> None:
    log = get_logger("svc", region="eu")
    bound = log.bind(request_id="abc")

    assert log.context == {"region": "eu", "logger": "svc"}
    assert bound.context == {"region": "eu", "logger": "svc", "request_id": "abc"}
    assert bound.unbind("region").context == {"logger": "svc", "request_id": "abc"}


def test_json_renderer_output() -> None:
    buf = io.StringIO()
    configure_logging(format="json", level="INFO", output=buf)

    get_logger("svc").info("started", port=8080)

    [entry] = _json_lines(buf)
    assert entry["event"] == "started"
    assert entry["level"] == "info"
    assert entry["logger"] == "svc"
    assert entry["port"] == 8080
    assert "timestamp" in entry


def test_level_filtering() -> None:
    buf = io.StringIO()
    configure_logging(format="json", level="WARNING", output=buf)
    log = get_logger()

    log.info("hidden")
    log.warning("shown")

    assert [e["event"] for e in _json_lines(buf)] == ["shown"]


def test_console_renderer_without_colors() -> None:
    buf = io.StringIO()
    renderer = ConsoleRenderer(output=buf, colors=False, show_timestamp=False)

    renderer.render(LogEntry(0.0, "debug", "early return", {"function": "load"}))

    assert buf.getvalue() == '[debug] early return function="load"\n'


def test_explicit_logger_level_and_renderer() -> None:
    buf = io.StringIO()
    log = BoundLogger(_renderer=JsonRenderer(output=buf), _level=10)

    log.debug("visible regardless of global level")

    assert _json_lines(buf)[0]["event"] == "visible regardless of global level"


def test_unwrap_failure_is_logged_at_debug() -> None:
    buf = io.StringIO()
    configure_logging(format="json", level="DEBUG", output=buf)

    with pytest.raises(UnwrapFailedError):
        failure("boom").expect("loading config")

    [entry] = _json_lines(buf)
    assert entry["event"] == "unwrap failed"
    assert entry["logger"] == "rresult.result"
    assert entry["message"] == "loading config"
    assert entry["payload_type"] == "str"


def test_early_return_is_logged_at_debug() -> None:
    buf = io.StringIO()
    configure_logging(format="json", level="DEBUG", output=buf)

    @propagate
    def run() -> Result[int, str]:
        return success(failure("nope").try_unwrap())

    assert run() == failure("nope")

    [entry] = _json_lines(buf)
    assert entry["event"] == "early return"
    assert entry["result"] == "failure('nope')"


def test_library_is_quiet_by_default(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(UnwrapFailedError):
        failure("boom").unwrap()

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_level_from_settings(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("RRESULT_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("RRESULT_LOG_FORMAT", "json")

    with pytest.raises(UnwrapFailedError):
        success(1).unwrap_failure()

    [line] = capsys.readouterr().out.splitlines()
    assert orjson.loads(line)["event"] == "unwrap failed"


def test_invalid_settings_fall_back_to_info(monkeypatch: pytest.MonkeyPatch,
                                            capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("RRESULT_LOG_LEVEL", "verbose")

    with pytest.raises(UnwrapFailedError):
        failure("boom").unwrap()
    get_logger("svc").info("still logging")

    captured = capsys.readouterr()
    assert "unwrap failed" not in captured.err
    assert "still logging" in captured.err


def test_debug_setting_forces_debug_level(monkeypatch: pytest.MonkeyPatch,
                                          capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("RRESULT_DEBUG", "true")
    monkeypatch.setenv("RRESULT_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("RRESULT_LOG_FORMAT", "json")

    with pytest.raises(UnwrapFailedError):
        failure("boom").unwrap()

    [line] = capsys.readouterr().out.splitlines()
    assert orjson.loads(line)["event"] == "unwrap failed"
