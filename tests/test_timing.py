import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from fib_report.timing import timed


def test_returns_result_and_logs(caplog):
    @timed
    def add(a, b):
        return a + b

    with caplog.at_level(logging.INFO, logger="fib_report.timing"):
        assert add(2, 3) == 5

    records = [r for r in caplog.records if r.name == "fib_report.timing"]
    assert len(records) == 1
    assert records[0].msg["event"] == "timed"
    assert records[0].msg["function"] == "add"
    assert records[0].msg["elapsed"] >= 0


def test_preserves_metadata():
    @timed
    def documented():
        """Docstring survives."""

    assert documented.__name__ == "documented"
    assert documented.__doc__ == "Docstring survives."


def test_logs_even_when_raising(caplog):
    @timed
    def boom():
        raise RuntimeError("boom")

    with caplog.at_level(logging.INFO, logger="fib_report.timing"):
        with pytest.raises(RuntimeError):
            boom()

    assert any(r.msg.get("function") == "boom" for r in caplog.records if isinstance(r.msg, dict))


def test_does_not_print(capsys):
    timed(lambda: None)()
    out, _ = capsys.readouterr()
    assert out == ""
