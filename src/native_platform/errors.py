"""Exceptions raised by native_platform."""

from __future__ import annotations

from typing import Optional


class UnrecognizedPlatformError(RuntimeError):
    """The host OS name matched no known OS family."""

    def __init__(self, os_name: Optional[str] = None) -> None:
        self.os_name = os_name
        detail = f" ({os_name!r})" if os_name is not None else ""
        super().__init__(f"Unknown platform{detail}. Can't tell what platform we're running on!")
