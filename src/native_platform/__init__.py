"""Native Platform - resolve the host platform and native filename conventions."""

from __future__ import annotations

__version__ = "0.1.0"
