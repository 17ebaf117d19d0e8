import logging

import pytest

from willie.levels import Level, register_levels


def test_priorities_ascend_in_table_order():
    levels = list(Level)
    assert [lvl.name for lvl in levels] == ["SILLY", "DEBUG", "VERBOSE", "INFO", "WARN", "ERROR"]
    assert [lvl.priority for lvl in levels] == [0, 1, 2, 3, 4, 5]
    assert sorted(levels) == levels
    assert Level.SILLY < Level.ERROR
    assert min(Level.DEBUG, Level.INFO) is Level.DEBUG


def test_tags_are_right_aligned():
    assert Level.INFO.tag == "   info"
    assert Level.ERROR.tag == "  error"
    assert Level.VERBOSE.tag == "verbose"
    assert {len(lvl.tag) for lvl in Level} == {7}


def test_colors():
    assert Level.INFO.color == "green"
    assert Level.ERROR.color == "red"
    assert Level.SILLY.color == "magenta"


def test_stdlib_numbers_keep_order():
    numbers = [lvl.logging_level for lvl in Level]
    assert numbers == sorted(numbers)
    assert Level.INFO.logging_level == logging.INFO
    assert Level.WARN.logging_level == logging.WARNING


def test_lookups():
    assert Level.from_tag("  debug") is Level.DEBUG
    assert Level.from_name(" Warn ") is Level.WARN
    assert Level.from_logging_level(logging.INFO) is Level.INFO
    assert Level.from_logging_level(logging.CRITICAL) is Level.ERROR
    assert Level.from_logging_level(12) is Level.DEBUG
    assert Level.from_logging_level(1) is Level.SILLY
    with pytest.raises(ValueError):
        Level.from_tag("info")
    with pytest.raises(ValueError):
        Level.from_name("fatal")


def test_register_levels_is_idempotent():
    register_levels()
    register_levels()
    assert logging.getLevelName(Level.SILLY.logging_level) == "SILLY"
    assert logging.getLevelName(Level.VERBOSE.logging_level) == "VERBOSE"
    assert logging.getLevelName(logging.INFO) == "INFO"
