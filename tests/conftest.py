"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from native_platform.config import ENV_OS_ARCH, ENV_OS_NAME
from native_platform.platform import detect


@pytest.fixture(autouse=True)
def isolated_host(monkeypatch, tmp_path: Path):
    """Keep real config files and overrides out of every test."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv(ENV_OS_NAME, raising=False)
    monkeypatch.delenv(ENV_OS_ARCH, raising=False)
    monkeypatch.setattr(detect, "_cached_info", None)
    yield tmp_path


@pytest.fixture
def fake_host(monkeypatch):
    """Make the interpreter report the given OS name and machine."""

    def _set(os_name: str, os_arch: str) -> None:
        monkeypatch.setattr(detect.platform, "system", lambda: os_name)
        monkeypatch.setattr(detect.platform, "machine", lambda: os_arch)

    return _set


@pytest.fixture
def host_env(monkeypatch):
    """Override the host strings through environment variables."""

    def _set(os_name: str, os_arch: str) -> None:
        monkeypatch.setenv(ENV_OS_NAME, os_name)
        monkeypatch.setenv(ENV_OS_ARCH, os_arch)

    return _set
