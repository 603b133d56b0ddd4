"""Tests for dalia.core.config (config file lookup and reading)."""

from pathlib import Path

import pytest

from dalia.core.config import (
    DALIA_CONFIG_ENV_VAR,
    get_config_dir,
    get_config_path,
    read_config,
)
from dalia.errors import ConfigNotFoundError


def test_default_dir_uses_home(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    assert get_config_dir({}) == tmp_path / ".dalia"
    assert get_config_path({}) == tmp_path / ".dalia" / "config"


def test_env_var_overrides_dir(tmp_path: Path):
    env = {DALIA_CONFIG_ENV_VAR: str(tmp_path / "custom")}
    assert get_config_path(env) == tmp_path / "custom" / "config"


def test_env_var_tilde_is_expanded(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    env = {DALIA_CONFIG_ENV_VAR: "~/aliases"}
    assert get_config_dir(env) == tmp_path / "aliases"


def test_blank_env_var_falls_back_to_default(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    assert get_config_dir({DALIA_CONFIG_ENV_VAR: "  "}) == tmp_path / ".dalia"


def test_reads_os_environ_by_default(tmp_path: Path, monkeypatch):
    monkeypatch.setenv(DALIA_CONFIG_ENV_VAR, str(tmp_path))
    assert get_config_path() == tmp_path / "config"


def test_read_config_from_environment(tmp_path: Path, monkeypatch):
    (tmp_path / "config").write_text("/some/path\n", encoding="utf-8")
    monkeypatch.setenv(DALIA_CONFIG_ENV_VAR, str(tmp_path))
    assert read_config() == "/some/path\n"


def test_read_config_explicit_path(tmp_path: Path):
    cfg = tmp_path / "aliases.txt"
    cfg.write_text("~/Desktop\n", encoding="utf-8")
    assert read_config(cfg) == "~/Desktop\n"


def test_read_empty_config_is_not_an_error(tmp_path: Path):
    cfg = tmp_path / "config"
    cfg.write_text("", encoding="utf-8")
    assert read_config(cfg) == ""


def test_missing_config_names_resolved_path(tmp_path: Path):
    missing = tmp_path / "nope" / "config"
    with pytest.raises(ConfigNotFoundError) as e:
        read_config(missing)
    assert e.value.path == missing
    assert str(missing) in str(e.value)


def test_directory_is_not_a_config(tmp_path: Path):
    with pytest.raises(ConfigNotFoundError, match="is a directory"):
        read_config(tmp_path)


def test_undecodable_config(tmp_path: Path):
    cfg = tmp_path / "config"
    cfg.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(ConfigNotFoundError):
        read_config(cfg)
