import json
import logging

import pytest

from treeweave.logging import init_logging, init_logging_from_cfg


@pytest.fixture(autouse=True)
def reset_treeweave_logger():
    yield
    lg = logging.getLogger("treeweave")
    for h in list(lg.handlers):
        lg.removeHandler(h)
    lg.addHandler(logging.NullHandler())
    lg.setLevel(logging.NOTSET)


def test_json_format(monkeypatch, capsys):
    monkeypatch.delenv("TREEWEAVE_LOG_FORMAT", raising=False)
    monkeypatch.delenv("TREEWEAVE_LOG_LEVEL", raising=False)
    init_logging_from_cfg({"logging": {"level": "info", "format": "json"}})
    logging.getLogger("treeweave.tree").info("hello", extra={"extra": {"k": 1}})
    rec = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert rec["msg"] == "hello" and rec["k"] == 1
    assert rec["name"] == "treeweave.tree" and rec["level"] == "INFO"


def test_text_format_and_level(capsys):
    init_logging("none")
    lg = logging.getLogger("treeweave.node")
    lg.info("hidden")
    lg.warning("shown")
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "WARNING treeweave.node: shown" in err


def test_env_overrides_cfg(monkeypatch, capsys):
    monkeypatch.setenv("TREEWEAVE_LOG_FORMAT", "text")
    monkeypatch.setenv("TREEWEAVE_LOG_LEVEL", "debug")
    init_logging_from_cfg({"logging": {"level": "none", "format": "json"}})
    logging.getLogger("treeweave").debug("plain")
    err = capsys.readouterr().err.strip()
    assert not err.startswith("{") and "DEBUG treeweave: plain" in err


def test_reinit_replaces_handler():
    lg = logging.getLogger("treeweave")
    init_logging("debug")
    n = len(lg.handlers)
    init_logging("info", "json")
    assert len(lg.handlers) == n
    assert lg.level == logging.INFO
    init_logging(None)
    assert lg.level == logging.WARNING


def test_unknown_format_rejected():
    with pytest.raises(ValueError):
        init_logging("info", "xml")
