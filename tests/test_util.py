import io
import logging

import pytest

from util import LOGGER_NAME, Debug, configure_logging, strip_line_ending, truncate_payload


@pytest.fixture
def debug_logs(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    return caplog


def test_debug_latches_on_first_query():
    d = Debug()
    assert d.on(True) is True
    assert d.on(False) is True
    assert d.enabled


def test_debug_latched_at_construction():
    d = Debug(False)
    assert d.on(True) is False
    assert not d.enabled


def test_first_trace_latches_off(debug_logs):
    d = Debug()
    assert d("nothing %s", "here") == 0
    assert d.on(True) is False
    assert debug_logs.records == []


def test_trace_returns_length(debug_logs):
    d = Debug(True)
    assert d("bucket [%d]", 12) == len("bucket [12]")
    assert d("plain") == 5
    assert [r.getMessage() for r in debug_logs.records] == ["bucket [12]", "plain"]


def test_configure_logging_prefixes_lines():
    stream = io.StringIO()
    configure_logging(stream)
    Debug(True)("hello %s", "world")
    assert stream.getvalue() == "DEBUG hello world\n"

    # A second call replaces the handler instead of adding one.
    configure_logging(stream)
    assert len(logging.getLogger(LOGGER_NAME).handlers) == 1


@pytest.mark.parametrize("line, expected", [
    ("apple\n", "apple"),
    ("apple\r\n", "apple"),
    ("apple\r", "apple"),
    ("apple", "apple"),
    ("a\nb", "a"),
    ("\n", ""),
])
def test_strip_line_ending(line, expected):
    assert strip_line_ending(line) == expected


def test_truncate_payload():
    assert truncate_payload("abcdef", 3) == "abc"
    assert truncate_payload("ab", 3) == "ab"
    assert truncate_payload("x" * 9000) == "x" * 8192
