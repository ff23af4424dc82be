# src/colorprobe/platform.py
"""Platform and external command collaborators."""

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
import sys
from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import CommandError, CommandNotFoundError


@runtime_checkable
class PlatformProbe(Protocol):
    """Protocol for operating system and stream checks."""

    def is_windows(self) -> bool:
        """Check if running on Windows."""
        ...

    def is_tty(self) -> bool:
        """Check if the output stream is an interactive terminal."""
        ...


@runtime_checkable
class CommandRunner(Protocol):
    """Protocol for running external commands."""

    def available(self, command: str) -> bool:
        """Check if the command's executable can be found."""
        ...

    def run(self, command: str, env: Optional[Mapping[str, str]] = None) -> str:
        """Run command and return its trimmed standard output.

        ``env`` replaces the process environment for the child when given.
        """
        ...


class SystemPlatform(BaseModel):
    """Platform probe backed by the running interpreter."""

    output: Any = Field(default_factory=lambda: sys.stdout)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def is_windows(self) -> bool:
        return os.name == "nt" or sys.platform == "win32"

    def is_tty(self) -> bool:
        isatty = getattr(self.output, "isatty", None)
        if isatty is None:
            return False
        try:
            return bool(isatty())
        except ValueError:
            # Closed stream
            return False


class SubprocessRunner(BaseModel):
    """Runs commands with subprocess, without a shell."""

    timeout: Optional[float] = None

    def available(self, command: str) -> bool:
        args = shlex.split(command)
        return bool(args) and shutil.which(args[0]) is not None

    def run(self, command: str, env: Optional[Mapping[str, str]] = None) -> str:
        args = shlex.split(command)
        if not args:
            raise CommandNotFoundError("Empty command")

        # Resolved against the process PATH, as in available()
        executable = shutil.which(args[0])
        if executable is None:
            raise CommandNotFoundError(f"Command not found: {args[0]}")

        try:
            completed = subprocess.run(
                [executable, *args[1:]],
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                timeout=self.timeout,
                env=None if env is None else dict(env),
                check=True,
            )
        except FileNotFoundError as e:
            raise CommandNotFoundError(f"Command not found: {args[0]}") from e
        except (OSError, subprocess.SubprocessError) as e:
            raise CommandError(f"Failed to run '{command}': {e}") from e

        return completed.stdout.strip()
