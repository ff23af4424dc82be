# src/colorprobe/exceptions.py
"""Exception classes for colorprobe."""
from __future__ import annotations


class ColorProbeError(Exception):
    """Base exception for colorprobe errors."""
    pass


class CommandError(ColorProbeError):
    """Raised when an external command fails to run."""
    pass


class CommandNotFoundError(CommandError):
    """Raised when an external command is not installed."""
    pass
