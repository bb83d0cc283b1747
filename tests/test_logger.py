import io

import pytest

from blockworld.logger import Logger, LogLevel


def test_info_formats_arguments():
    stream = io.StringIO()
    Logger("net", stream=stream).info("hello %d\n", 5)
    assert stream.getvalue() == "[net] - hello 5\n"


def test_message_without_arguments_is_literal():
    stream = io.StringIO()
    Logger("x", stream=stream).warn("100% done")
    assert stream.getvalue() == "[x] - 100% done"


def test_writes_to_stdout_by_default(capsys):
    Logger("app").trace("t%s", "ick")
    assert capsys.readouterr().out == "[app] - tick"


@pytest.mark.parametrize(
    "method, threshold",
    [
        ("trace", LogLevel.TRACE),
        ("debug", LogLevel.DEBUG),
        ("info", LogLevel.INFO),
        ("warn", LogLevel.WARN),
    ],
)
def test_filtering_by_level(method, threshold):
    for level in LogLevel:
        stream = io.StringIO()
        getattr(Logger("l", level=level, stream=stream), method)("m")
        assert (stream.getvalue() == "[l] - m") == (level >= threshold)


def test_error_always_written():
    stream = io.StringIO()
    Logger("e", level=LogLevel.ERROR, stream=stream).error("bad %s", "thing")
    assert stream.getvalue() == "[e] - bad thing"


def test_info_level_writes_info_and_warn_but_not_debug():
    stream = io.StringIO()
    logger = Logger("o", level=LogLevel.INFO, stream=stream)
    logger.debug("d")
    logger.trace("t")
    logger.info("i")
    logger.warn("w")
    assert stream.getvalue() == "[o] - i[o] - w"