from __future__ import annotations

import io
import json
import logging

from account_address import logging as alog


def _record(**extra) -> logging.LogRecord:
    rec = logging.LogRecord("account_address.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    for k, v in extra.items():
        setattr(rec, k, v)
    return rec


def test_json_formatter_merges_context_and_extras():
    alog.bind(component="test", raw=b"\x01\x02")
    line = alog.JSONFormatter().format(_record(reason="address_too_long"))
    payload = json.loads(line)
    assert payload["msg"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "account_address.test"
    assert payload["component"] == "test"
    assert payload["raw"] == "0102"
    assert payload["reason"] == "address_too_long"


def test_text_formatter_is_one_line():
    alog.bind(command="normalize")
    line = alog.TextFormatter().format(_record(code="hex_decode"))
    assert "| INFO  | account_address.test" in line
    assert "command=normalize" in line
    assert "code=hex_decode" in line
    assert line.endswith("| hello world")


def test_bind_and_unbind():
    alog.bind(component="x", command="y")
    alog.unbind("command")
    assert alog.context() == {"component": "x"}
    alog.clear_context()
    assert alog.context() == {}


def test_configure_json_stream():
    buf = io.StringIO()
    alog.configure(json=True, level="DEBUG", stream=buf)
    alog.get_logger("account_address.test").debug("configured", extra={"n": 3})
    payload = json.loads(buf.getvalue().strip())
    assert payload["msg"] == "configured"
    assert payload["n"] == 3


def test_configure_respects_level_and_env(monkeypatch):
    monkeypatch.setenv(alog.ENV_LOG_FORMAT, "text")
    buf = io.StringIO()
    alog.configure(level="warning", stream=buf)
    log = alog.get_logger("account_address.test")
    log.info("hidden")
    log.warning("shown")
    out = buf.getvalue()
    assert "hidden" not in out
    assert "| WARNING | account_address.test | shown" in out


def test_configure_uses_stderr_at_call_time(monkeypatch):
    buf = io.StringIO()
    monkeypatch.setattr("sys.stderr", buf)
    alog.configure(json=True, level="INFO")
    alog.get_logger("account_address.test").info("late stream")
    assert json.loads(buf.getvalue().strip())["msg"] == "late stream"
