import logging

from click import BadParameter
from pytest import raises

from mocklite.parser.logger import LoggerParser


def test_logger_count_coerce():
    parser = LoggerParser()
    logger = parser.convert(0, None, None)
    assert logger.name == "mocklite"
    assert logger.level == logging.WARNING

    assert parser.convert(1, None, None).level == logging.INFO
    assert parser.convert(2, None, None).level == logging.DEBUG
    assert parser.convert("3", None, None).level == logging.DEBUG


def test_logger_value_str_large_coerce():
    assert LoggerParser().convert("10", None, None).level == 10


def test_logger_level_name():
    parser = LoggerParser()
    assert parser.convert("INFO", None, None).level == logging.INFO
    assert parser.convert(" error ", None, None).level == logging.ERROR


def test_logger_custom_name():
    assert LoggerParser("mocklite.handler").convert(1, None, None).name == "mocklite.handler"


def test_logger_rejects_bad_values():
    parser = LoggerParser()
    for value in ("XYZ", " ", object(), True):
        with raises(BadParameter):
            parser.convert(value, None, None)


def test_logger_value_coerce_logger():
    source = logging.getLogger(__name__)
    source.setLevel(logging.ERROR)
    assert LoggerParser().convert(source, None, None).level == logging.ERROR
