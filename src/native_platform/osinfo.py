"""
Process-wide platform constants.

    from native_platform.osinfo import PLATFORM, LIB_PREFIX, LIB_SUFFIX, EXE_SUFFIX

PLATFORM is e.g. "linux-x86-64-amd64", "darwin-x86_64" or "win32-x86-64-amd64".
LIB_PREFIX is "lib", or "" on Windows.
LIB_SUFFIX is ".so", ".dylib" or ".dll".
EXE_SUFFIX is ".exe" on Windows, otherwise "".

The values are resolved on first access and never change afterwards.
Importing any of them on an unrecognized OS raises UnrecognizedPlatformError.
"""

from __future__ import annotations

from native_platform.platform.detect import get_platform_info

# Public constant name -> PlatformInfo attribute
_CONSTANTS = {
    "PLATFORM": "platform",
    "LIB_PREFIX": "lib_prefix",
    "LIB_SUFFIX": "lib_suffix",
    "EXE_SUFFIX": "exe_suffix",
}

__all__ = list(_CONSTANTS)


def __getattr__(name: str) -> str:
    try:
        field_name = _CONSTANTS[name]
    except KeyError:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from None
    value: str = getattr(get_platform_info(), field_name)
    return value


def __dir__() -> list[str]:
    return sorted(list(globals()) + __all__)
