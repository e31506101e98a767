"""Tests for home-relative path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from camlib.config.paths import (
    default_cache_path,
    default_config_path,
    default_credentials_path,
    home_dir,
    resolve_cache_path,
    resolve_overridable_path,
)


def test_home_dir_prefers_home_then_windows_variables() -> None:
    assert home_dir({"HOME": "/home/alex", "USERPROFILE": "C:/Users/alex"}) == Path("/home/alex")
    assert home_dir({"HOMEPATH": "/hp", "USERPROFILE": "/up"}) == Path("/hp")
    assert home_dir({"HOME": "  ", "USERPROFILE": "/up"}) == Path("/up")


def test_home_dir_falls_back_to_platform_home() -> None:
    assert home_dir({}) == Path.home()


def test_default_locations_are_home_relative(fake_home: Path) -> None:
    assert default_credentials_path() == fake_home / ".CamLib"
    assert default_cache_path() == fake_home / ".camlib.cache.json"
    assert default_config_path() == (fake_home / ".config" / "camlib" / "config.toml").resolve()


def test_config_path_honors_environment(
    fake_home: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    override = tmp_path / "custom.toml"
    monkeypatch.setenv("CAMLIB_CONFIG", str(override))

    assert default_config_path() == override.resolve()


def test_resolve_overridable_path_precedence(tmp_path: Path) -> None:
    def _default() -> Path:
        return tmp_path / "default"

    env = {"CAMLIB_TEST": str(tmp_path / "from-env")}

    explicit = resolve_overridable_path(
        explicit_path=tmp_path / "explicit", env=env, env_var="CAMLIB_TEST", default_factory=_default
    )
    from_env = resolve_overridable_path(
        explicit_path="  ", env=env, env_var="CAMLIB_TEST", default_factory=_default
    )
    fallback = resolve_overridable_path(
        explicit_path=None, env={}, env_var="CAMLIB_TEST", default_factory=_default
    )

    assert explicit == (tmp_path / "explicit").resolve()
    assert from_env == (tmp_path / "from-env").resolve()
    assert fallback == (tmp_path / "default").resolve()


def test_resolve_cache_path_uses_explicit_or_home(
    fake_home: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)

    assert resolve_cache_path("project.cache.json") == (tmp_path / "project.cache.json").resolve()
    assert resolve_cache_path(None) == (fake_home / ".camlib.cache.json").resolve()
