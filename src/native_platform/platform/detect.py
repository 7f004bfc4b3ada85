"""Host platform classification for native library and executable naming."""

from __future__ import annotations

import logging
import platform
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from native_platform.config import HostConfig, host_config_from_env
from native_platform.errors import UnrecognizedPlatformError

logger = logging.getLogger(__name__)


class OsFamily(Enum):
    """Coarse OS classification, matched by substrings of the lower-cased OS name."""

    MACOS = ("mac", "darwin")
    WINDOWS = ("win",)
    LINUX = ("nux",)
    UNKNOWN = ()

    @property
    def substrings(self) -> tuple[str, ...]:
        return self.value

    def matches(self, os_name: str) -> bool:
        """Check whether any of this family's substrings occurs in os_name."""
        lowered = os_name.lower()
        return any(sub in lowered for sub in self.substrings)


# Match order, first hit wins. UNKNOWN is the fallback, never matched.
FAMILY_ORDER: tuple[OsFamily, ...] = (OsFamily.MACOS, OsFamily.WINDOWS, OsFamily.LINUX)

# platform.system() values renamed so filename_conventions() sees "mac"
HOST_OS_NAMES: dict[str, str] = {
    "Darwin": "Mac OS X",
}

# (family, is_64bit) -> universal name
UNIVERSAL_NAMES: dict[tuple[OsFamily, bool], str] = {
    (OsFamily.MACOS, True): "darwin",
    (OsFamily.MACOS, False): "darwin",
    (OsFamily.WINDOWS, True): "win32-x86-64",
    (OsFamily.WINDOWS, False): "win32-x86",
    (OsFamily.LINUX, True): "linux-x86-64",
    (OsFamily.LINUX, False): "linux-x86",
}


@dataclass(frozen=True)
class RawHostInfo:
    """The two free-form strings the host reports about itself."""

    os_name: str  # e.g., "Linux", "Mac OS X", "Windows 10"
    os_arch: str  # e.g., "amd64", "x86_64", "aarch64"

    @classmethod
    def from_host(cls, host: Optional[HostConfig] = None) -> "RawHostInfo":
        """
        Read the OS name and architecture reported by the interpreter.

        Args:
            host: Overrides to apply. Defaults to the NATIVE_PLATFORM_OS_NAME /
                  NATIVE_PLATFORM_OS_ARCH environment variables; config files
                  are never read here. Empty values fall back to
                  platform.system() / platform.machine().

        Returns:
            RawHostInfo for the current process
        """
        if host is None:
            host = host_config_from_env()
        system = platform.system() or "unknown"
        return cls(
            os_name=host.os_name or HOST_OS_NAMES.get(system, system),
            os_arch=host.os_arch or platform.machine(),
        )


@dataclass(frozen=True)
class PlatformInfo:
    """Platform identifier and filename conventions derived from one RawHostInfo."""

    platform: str  # e.g., "darwin-x86_64", "win32-x86-64-amd64"
    lib_prefix: str  # "lib", or "" on Windows
    lib_suffix: str  # ".so", ".dylib" or ".dll"
    exe_suffix: str  # ".exe" on Windows, otherwise ""
    family: OsFamily


def classify_os(os_name: str) -> OsFamily:
    """Return the first OS family whose substrings occur in os_name, or UNKNOWN."""
    for family in FAMILY_ORDER:
        if family.matches(os_name):
            return family
    return OsFamily.UNKNOWN


def is_64bit(os_arch: str) -> bool:
    """Treat any architecture string containing "64" as 64-bit."""
    return "64" in os_arch


def universal_name(family: OsFamily, is_64: bool, os_name: Optional[str] = None) -> str:
    """
    Map an OS family and bit-width to its universal platform name.

    Args:
        family: Classified OS family
        is_64: Whether the architecture is 64-bit
        os_name: Raw OS name, attached to the error for UNKNOWN

    Raises:
        UnrecognizedPlatformError: If family is UNKNOWN
    """
    try:
        return UNIVERSAL_NAMES[(family, is_64)]
    except KeyError:
        raise UnrecognizedPlatformError(os_name) from None


def platform_identifier(os_name: str, os_arch: str) -> str:
    """
    Build the platform token, e.g. "linux-x86-64-amd64".

    The universal name is joined with the lower-cased raw architecture and
    spaces are replaced with underscores.

    Raises:
        UnrecognizedPlatformError: If os_name matches no known OS family
    """
    name = universal_name(classify_os(os_name), is_64bit(os_arch), os_name)
    return f"{name}-{os_arch.lower()}".replace(" ", "_")


def filename_conventions(os_name: str) -> tuple[str, str, str]:
    """
    Derive (lib_prefix, lib_suffix, exe_suffix) from the raw OS name.

    This tests the lower-cased name directly instead of going through
    classify_os(). Names that match no family get the Linux-style
    conventions rather than an error.
    """
    os_name = os_name.lower()
    if os_name.startswith("windows"):
        os_name = "windows"  # All flavours share binary conventions

    if os_name.startswith("windows"):
        return "", ".dll", ".exe"
    if "mac" in os_name:
        return "lib", ".dylib", ""
    return "lib", ".so", ""


def resolve_platform(raw: RawHostInfo) -> PlatformInfo:
    """
    Resolve a PlatformInfo from raw host strings. Pure, never cached.

    Raises:
        UnrecognizedPlatformError: If the OS name matches no known OS family
    """
    family = classify_os(raw.os_name)
    logger.debug("Classified os_name=%r os_arch=%r as %s", raw.os_name, raw.os_arch, family.name)

    identifier = platform_identifier(raw.os_name, raw.os_arch)
    lib_prefix, lib_suffix, exe_suffix = filename_conventions(raw.os_name)
    return PlatformInfo(
        platform=identifier,
        lib_prefix=lib_prefix,
        lib_suffix=lib_suffix,
        exe_suffix=exe_suffix,
        family=family,
    )


_cache_lock = threading.Lock()
_cached_info: Optional[PlatformInfo] = None


def get_platform_info() -> PlatformInfo:
    """
    Return the process-wide PlatformInfo, resolving the host on first call.

    Concurrent first callers block on a lock so the host is resolved exactly
    once and every caller sees the same object. A failed resolution is not
    cached and the error propagates to the caller.
    """
    global _cached_info

    info = _cached_info
    if info is not None:
        return info

    with _cache_lock:
        if _cached_info is None:
            raw = RawHostInfo.from_host()
            _cached_info = resolve_platform(raw)
            logger.debug("Resolved host platform: %s", _cached_info)
        return _cached_info
