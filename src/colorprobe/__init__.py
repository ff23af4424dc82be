# src/colorprobe/__init__.py
"""
colorprobe - ANSI color support detection for terminal output
"""
from __future__ import annotations

from .color import command_exists, disabled, is_tty, is_windows, support
from .exceptions import ColorProbeError, CommandError, CommandNotFoundError
from .models import ProbeOutcome, ProbeReport, ProbeResult
from .platform import SubprocessRunner, SystemPlatform
from .support import Support

__version__ = "0.1.0"
__all__ = [
    "Support",
    "ProbeResult",
    "ProbeOutcome",
    "ProbeReport",
    "SystemPlatform",
    "SubprocessRunner",
    "support",
    "disabled",
    "is_tty",
    "is_windows",
    "command_exists",
    "ColorProbeError",
    "CommandError",
    "CommandNotFoundError",
]
