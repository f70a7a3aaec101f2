import importlib
import logging

import pytest

import toyrobot.config as config
from toyrobot.utils.errors import ConfigError


def test_trace_level_registered():
    assert config.TRACE == 5
    assert logging.getLevelName(config.TRACE) == "TRACE"


@pytest.mark.parametrize("raw,expected", [("4", 4), (" 10 ", 10), (0, 0), (7, 7)])
def test_parse_dimension(raw, expected):
    assert config.parse_dimension(raw) == expected


@pytest.mark.parametrize("raw", ["-1", "four", "2.5", ""])
def test_parse_dimension_rejects_invalid(raw):
    with pytest.raises(ConfigError):
        config.parse_dimension(raw, "width")


def test_config_error_message():
    err = ConfigError("width must be >= 0, got -1")
    assert str(err) == "Config error: width must be >= 0, got -1"
    assert isinstance(err, ValueError)


def test_table_size_from_environment(monkeypatch):
    monkeypatch.setenv("TOYROBOT_TABLE_WIDTH", "9")
    monkeypatch.setenv("TOYROBOT_TABLE_HEIGHT", "bogus")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.TABLE_WIDTH == 9
        assert reloaded.TABLE_HEIGHT == reloaded.DEFAULT_TABLE_HEIGHT
    finally:
        monkeypatch.delenv("TOYROBOT_TABLE_WIDTH")
        monkeypatch.delenv("TOYROBOT_TABLE_HEIGHT")
        importlib.reload(config)
