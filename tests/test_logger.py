import logging

import pytest

from tablelookup.logger import ModuleFilter, json_str, request_summary, setup_logger
from tablelookup.lookup_tools.vlookup import make_request


@pytest.fixture
def root_logger():
    logger = logging.getLogger()
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers = handlers


def test_invalid_level(root_logger):
    null_level = "NOT_ALLOWED"
    with pytest.raises(ValueError):
        setup_logger(level=null_level)


def test_level_from_config(root_logger, tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / ".tablelookup.toml").write_text('[logging]\nlevel = "DEBUG"\n')
    logger = setup_logger()
    assert logger.level == logging.DEBUG


def test_default_level(root_logger, tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    nhandlers = len(root_logger.handlers)
    logger = setup_logger(logfile=str(tmp_path / "lookup.log"))
    assert logger.level == logging.INFO
    assert len(logger.handlers) == nhandlers + 2


def test_filter():
    filt = ModuleFilter(["pandas"])
    record = logging.LogRecord(
        "tablelookup.lookup_tools.vlookup", logging.DEBUG, "", 0, "msg", None, None
    )
    assert filt.filter(record)
    record.name = "pandas.io"
    assert filt.filter(record)
    record.name = "numba.core"
    assert not filt.filter(record)


def test_json_str():
    assert json_str(["b", "a"]) == '[\n    "b",\n    "a"\n]'


def test_warning_level(root_logger):
    logger = setup_logger(level="WARNING")
    assert logger.level == logging.WARNING


def test_request_summary():
    request = make_request(
        [(0, 0.13), (8_000, 0.18)],
        8_000,
        lookup_field=0,
        result_field=1,
        approx=True,
    )
    assert request_summary(request) == {
        "rows": 2,
        "result_field": 1,
        "approx": True,
        "interpolate": False,
        "lookup_field": 0,
        "lookup_value": 8_000,
    }

    def by_key(row):
        return 0

    request = make_request([(0, 0.13)], lookup_code=by_key, result_field=1)
    summary = request_summary(request)
    assert summary["lookup_code"] == "by_key"
    assert "lookup_value" not in summary
