"""Platform detection and handling."""

from __future__ import annotations

from .detect import (
    OsFamily,
    PlatformInfo,
    RawHostInfo,
    classify_os,
    filename_conventions,
    get_platform_info,
    platform_identifier,
    resolve_platform,
    universal_name,
)

__all__ = [
    "OsFamily",
    "PlatformInfo",
    "RawHostInfo",
    "classify_os",
    "filename_conventions",
    "get_platform_info",
    "platform_identifier",
    "resolve_platform",
    "universal_name",
]
