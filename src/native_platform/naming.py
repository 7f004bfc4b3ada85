"""Compose native library and executable filenames for a platform."""

from __future__ import annotations

from typing import Optional

from native_platform.platform.detect import PlatformInfo, get_platform_info


def library_filename(base_name: str, info: Optional[PlatformInfo] = None) -> str:
    """
    Build the platform-specific shared library filename.

    Args:
        base_name: Library name without prefix or suffix, e.g. "questdb"
        info: Platform to name for (defaults to the current host)

    Returns:
        e.g. "libquestdb-linux-x86-64-amd64.so" or "questdb-win32-x86-64-amd64.dll"
    """
    if info is None:
        info = get_platform_info()
    return f"{info.lib_prefix}{base_name}-{info.platform}{info.lib_suffix}"


def executable_filename(base_name: str, info: Optional[PlatformInfo] = None) -> str:
    """Append the platform executable suffix, e.g. "tool" -> "tool.exe" on Windows."""
    if info is None:
        info = get_platform_info()
    return f"{base_name}{info.exe_suffix}"
