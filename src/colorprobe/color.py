# src/colorprobe/color.py
"""Module-level shortcuts around Support for the running process."""

from __future__ import annotations

from typing import Any, Mapping, Optional, TextIO

from .platform import SubprocessRunner, SystemPlatform
from .support import Support


def support(
    env: Optional[Mapping[str, Any]] = None,
    verbose: Optional[bool] = None,
    output: Optional[TextIO] = None,
) -> bool:
    """Check if ``output`` (default: standard output) supports colors."""
    platform = SystemPlatform() if output is None else SystemPlatform(output=output)
    return Support(env, verbose=verbose, platform=platform).support()


def disabled(env: Optional[Mapping[str, Any]] = None) -> bool:
    """Check if colors are switched off with NO_COLOR."""
    return Support(env).disabled()


def is_tty(output: Optional[TextIO] = None) -> bool:
    platform = SystemPlatform() if output is None else SystemPlatform(output=output)
    return platform.is_tty()


def is_windows() -> bool:
    return SystemPlatform().is_windows()


def command_exists(command: str) -> bool:
    """Check if the executable of ``command`` is on PATH."""
    return SubprocessRunner().available(command)
