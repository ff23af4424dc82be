# src/colorprobe/backends/__init__.py
"""Native terminal capability backends."""

from __future__ import annotations

from .base import CapabilityLibrary, screen_session
from .ncurses import CursesLibrary

__all__ = [
    "CapabilityLibrary",
    "CursesLibrary",
    "screen_session",
]
