"""Tests for the check_message_keys CLI."""

import io
import sys

import pytest

from msgcache.core.config import get_settings
from scripts import check_message_keys


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_prints_decision_per_argument(monkeypatch, capsys) -> None:
    monkeypatch.setattr(
        sys, "argv", ["check_message_keys", "mainpage", "nstab-talk", "other"]
    )
    check_message_keys.main()
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "mainpage\texists",
        "nstab-talk\tdoes_not_exist",
        "other\tunknown",
    ]
    assert "1/3 keys short-circuited" in captured.err
    assert "known keys=6" in captured.err


def test_reads_keys_from_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["check_message_keys"])
    monkeypatch.setattr(sys, "stdin", io.StringIO("tooltip-search\n\nhydra-view-x\n"))
    check_message_keys.main()
    assert capsys.readouterr().out.splitlines() == [
        "tooltip-search\texists",
        "hydra-view-x\tdoes_not_exist",
    ]


def test_invalid_configuration_exits_1(monkeypatch, capsys) -> None:
    monkeypatch.setenv("MCP_CATALOG_BACKEND", "sqlite")
    monkeypatch.setattr(sys, "argv", ["check_message_keys", "mainpage"])
    with pytest.raises(SystemExit) as exc_info:
        check_message_keys.main()
    assert exc_info.value.code == 1
    assert "Invalid configuration" in capsys.readouterr().err
