"""Configuration management for Native Platform."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

# Conditional import for Python 3.10 compatibility
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found]

# Environment variables that take precedence over [host] values from TOML
ENV_OS_NAME = "NATIVE_PLATFORM_OS_NAME"
ENV_OS_ARCH = "NATIVE_PLATFORM_OS_ARCH"


@dataclass
class HostConfig:
    """Overrides for the host-reported OS strings. Empty means use the host value."""

    os_name: str = ""
    os_arch: str = ""


@dataclass
class Config:
    """Root configuration container."""

    host: HostConfig = field(default_factory=HostConfig)

    # Metadata (not from TOML)
    _source: Path | None = field(default=None, repr=False)


def get_xdg_config_home() -> Path:
    """Get XDG config home, respecting environment variable."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def get_config_paths() -> tuple[Path, Path]:
    """
    Get config file paths in priority order.

    Returns:
        (xdg_path, cwd_path) - XDG is base, CWD overrides
    """
    xdg_path = get_xdg_config_home() / "native-platform" / "config.toml"
    cwd_path = Path.cwd() / "nativeplatform.toml"
    return xdg_path, cwd_path


def _load_toml(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file."""
    with open(path, "rb") as f:
        result: dict[str, Any] = tomllib.load(f)
        return result


def _merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, override takes precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def _validate_config(data: dict[str, Any]) -> list[str]:
    """Validate TOML data and return list of errors."""
    errors: list[str] = []

    host = data.get("host", {})
    if not isinstance(host, dict):
        errors.append("Invalid [host]: expected a table")
        return errors

    for key in ("os_name", "os_arch"):
        value = host.get(key)
        if value is not None and not isinstance(value, str):
            errors.append(f"Invalid host.{key}: {value!r} (expected a string)")

    return errors


def _filter_known_keys(data: dict[str, Any], dataclass_type: type) -> dict[str, Any]:
    """Filter dict to only include keys that are valid fields for the dataclass."""
    valid_fields = {f.name for f in fields(dataclass_type)}
    return {k: v for k, v in data.items() if k in valid_fields}


# Mapping of section names to their config classes
SECTION_TYPES = {
    "host": HostConfig,
}


def _dict_to_config(data: dict[str, Any], source: Path | None = None) -> Config:
    """Convert parsed TOML dict to Config dataclass."""
    sections = {
        name: cls(**_filter_known_keys(data.get(name, {}), cls))
        for name, cls in SECTION_TYPES.items()
    }
    return Config(**sections, _source=source)


def host_config_from_env() -> HostConfig:
    """Host overrides from NATIVE_PLATFORM_OS_NAME / NATIVE_PLATFORM_OS_ARCH only. No file I/O."""
    return HostConfig(
        os_name=os.environ.get(ENV_OS_NAME, ""),
        os_arch=os.environ.get(ENV_OS_ARCH, ""),
    )


def _apply_env_overrides(config: Config) -> Config:
    """Let non-empty environment overrides win over file values."""
    env = host_config_from_env()
    if env.os_name:
        config.host.os_name = env.os_name
    if env.os_arch:
        config.host.os_arch = env.os_arch
    return config


def load_config() -> Config:
    """
    Load configuration with XDG + CWD override precedence.

    Priority (highest to lowest):
    1. NATIVE_PLATFORM_OS_NAME / NATIVE_PLATFORM_OS_ARCH environment variables
    2. ./nativeplatform.toml (CWD override)
    3. ~/.config/native-platform/config.toml (XDG base)
    4. Built-in defaults

    Returns:
        Merged Config instance

    Raises:
        ValueError: If TOML syntax is invalid in either config file
    """
    xdg_path, cwd_path = get_config_paths()

    merged_data: dict[str, Any] = {}
    active_source: Path | None = None

    # Load XDG config if exists
    if xdg_path.exists():
        try:
            merged_data = _load_toml(xdg_path)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {xdg_path}: {e}") from e
        active_source = xdg_path

    # Merge CWD config if exists (overrides XDG)
    if cwd_path.exists():
        try:
            cwd_data = _load_toml(cwd_path)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {cwd_path}: {e}") from e
        merged_data = _merge_dicts(merged_data, cwd_data)
        active_source = cwd_path

    if merged_data:
        errors = _validate_config(merged_data)
        if errors:
            raise ValueError(f"Config validation failed ({active_source}): {'; '.join(errors)}")

    return _apply_env_overrides(_dict_to_config(merged_data, active_source))


def load_config_from_file(path: Path) -> Config:
    """Load configuration from a specific file."""
    try:
        data = _load_toml(path)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {path}: {e}") from e
    errors = _validate_config(data)
    if errors:
        raise ValueError(f"Config validation failed: {'; '.join(errors)}")
    return _apply_env_overrides(_dict_to_config(data, path))


# Default config template for `config init`
DEFAULT_CONFIG_TEMPLATE = """\
# Native Platform Configuration

[host]
# Host strings the native-platform CLI classifies instead of the real ones.
# Leave empty to use what the interpreter reports.
# NATIVE_PLATFORM_OS_NAME / NATIVE_PLATFORM_OS_ARCH take precedence, and are
# the only overrides the library constants (osinfo.PLATFORM etc.) honor.
os_name = ""            # e.g. "Linux", "Mac OS X", "Windows 10"
os_arch = ""            # e.g. "amd64", "x86_64", "aarch64"
"""
