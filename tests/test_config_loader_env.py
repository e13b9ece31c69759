"""Tests for config loading, DASHD_* env overrides and round-tripping."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from darkcoin.config.loader import camel_to_snake, convert_keys, load_config, save_config, snake_to_camel
from darkcoin.config.schema import Config, DashdConfig


@pytest.fixture(autouse=True)
def _clear_dashd_env(monkeypatch):
    for name in ("DASHD_URI", "DASHD_USER", "DASHD_PASSWORD", "DARKCOIN_LOG_LEVEL", "DARKCOIN_DASHD__TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "absent.json")
    assert cfg.dashd.url == "http://127.0.0.1:9998"
    assert cfg.dashd.timeout is None


def test_file_values_with_camel_case_keys(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"dashd": {"url": "http://node:19998", "user": "u", "password": "p"}, "logLevel": "DEBUG"}))
    cfg = load_config(path)
    assert cfg.dashd == DashdConfig(url="http://node:19998", user="u", password="p")
    assert cfg.log_level == "DEBUG"


def test_env_vars_override_file(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"dashd": {"url": "http://node:19998", "user": "u", "password": "p"}}))
    monkeypatch.setenv("DASHD_URI", "http://other:9998")
    monkeypatch.setenv("DASHD_PASSWORD", "from-env")
    cfg = load_config(path)
    assert cfg.dashd.url == "http://other:9998"
    assert cfg.dashd.user == "u"
    assert cfg.dashd.password == "from-env"


def test_darkcoin_prefixed_env_vars(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("DARKCOIN_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DARKCOIN_DASHD__TIMEOUT", "2.5")
    cfg = load_config(tmp_path / "absent.json")
    assert cfg.log_level == "DEBUG"
    assert cfg.dashd.timeout == 2.5
    assert cfg.dashd.url == "http://127.0.0.1:9998"


def test_malformed_file_names_the_path(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ValueError, match="config.json"):
        load_config(path)


def test_invalid_url_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"dashd": {"url": "ftp://node"}}))
    with pytest.raises(ValueError, match="http"):
        load_config(path)


def test_dashd_config_is_frozen_and_hides_password() -> None:
    cfg = DashdConfig(url="http://a:1", user="u", password="hunter2")
    with pytest.raises(ValidationError):
        cfg.user = "other"
    assert "hunter2" not in repr(cfg)


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    cfg = Config(dashd=DashdConfig(url="http://n:1", user="u", password="p", timeout=3.5), log_level="DEBUG")
    save_config(cfg, path)
    raw = json.loads(path.read_text())
    assert raw["logLevel"] == "DEBUG"
    assert load_config(path) == cfg


def test_key_conversion_helpers() -> None:
    assert camel_to_snake("logLevel") == "log_level"
    assert snake_to_camel("log_level") == "logLevel"
    assert convert_keys({"dashd": [{"fooBar": 1}]}) == {"dashd": [{"foo_bar": 1}]}
