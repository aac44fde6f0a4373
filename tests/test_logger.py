import io
import logging
import re

from motivar.logger import LOGGER_NAME, new_logger

LINE = re.compile(
    r'^time="\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}" level=(?P<level>\w+) '
    r"source=test_logger\.py:\d+ msg=(?P<msg>.*)$"
)


def _lines(stream):
    return stream.getvalue().splitlines()


def test_info_line_format():
    stream = io.StringIO()
    logger = new_logger(stream)
    logger.info("hello world")
    lines = _lines(stream)
    assert len(lines) == 1
    match = LINE.match(lines[0])
    assert match is not None
    assert match.group("level") == "INFO"
    assert match.group("msg") == '"hello world"'


def test_single_word_is_not_quoted():
    stream = io.StringIO()
    new_logger(stream).info("ready")
    match = LINE.match(_lines(stream)[0])
    assert match is not None
    assert match.group("msg") == "ready"


def test_warning_is_named_warn():
    stream = io.StringIO()
    new_logger(stream).warning("careful")
    match = LINE.match(_lines(stream)[0])
    assert match is not None
    assert match.group("level") == "WARN"


def test_debug_is_hidden_by_default():
    stream = io.StringIO()
    logger = new_logger(stream)
    logger.debug("invisible")
    assert stream.getvalue() == ""


def test_debug_shown_after_level_change():
    stream = io.StringIO()
    logger = new_logger(stream)
    logger.setLevel(logging.DEBUG)
    logger.debug("visible")
    match = LINE.match(_lines(stream)[0])
    assert match is not None
    assert match.group("level") == "DEBUG"


def test_repeated_setup_does_not_duplicate_output():
    first = io.StringIO()
    new_logger(first)
    second = io.StringIO()
    logger = new_logger(second)
    logger.info("once")
    assert first.getvalue() == ""
    assert len(_lines(second)) == 1


def test_child_loggers_reach_the_handler():
    stream = io.StringIO()
    new_logger(stream)
    logging.getLogger(LOGGER_NAME + ".child").info("from child")
    match = LINE.match(_lines(stream)[0])
    assert match is not None
    assert match.group("msg") == '"from child"'


def test_quotes_are_escaped():
    stream = io.StringIO()
    new_logger(stream).info('say "hi"')
    assert _lines(stream)[0].endswith('msg="say \\"hi\\""')