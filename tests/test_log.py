import logging

import config
from core.log import get_error_summary, setup_logging


def test_get_error_summary():
    assert get_error_summary(ValueError("bad value")) == "ValueError: bad value"
    assert get_error_summary(KeyError()) == "KeyError"
    assert len(get_error_summary(RuntimeError("x" * 500))) == 200


def test_setup_logging_uses_debug_flag(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    monkeypatch.setattr(config, "debug", True)
    setup_logging()
    monkeypatch.setattr(config, "debug", False)
    monkeypatch.setattr(config, "LOG_LEVEL", "WARNING")
    setup_logging()
    setup_logging("nonsense")

    assert [c["level"] for c in calls] == [logging.DEBUG, logging.WARNING, logging.INFO]
