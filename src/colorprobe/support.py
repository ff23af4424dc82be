# src/colorprobe/support.py
"""Color support detection for terminal output."""

from __future__ import annotations

import os
import re
from importlib import import_module
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.console import Console
from rich.markup import escape

from .backends import CapabilityLibrary, CursesLibrary, screen_session
from .exceptions import CommandNotFoundError
from .models import ProbeOutcome, ProbeReport, ProbeResult, resolve
from .platform import CommandRunner, PlatformProbe, SubprocessRunner, SystemPlatform
from .settings import VERBOSE


def _is_present(value: Any) -> bool:
    return not (value is None or value is False)


class Support(BaseModel):
    """Decides whether the output stream can render ANSI colors.

    The decision runs two pre-empt checks (non-interactive stream and the
    ``NO_COLOR`` opt-out) and then asks each probe in ``PROBES`` in turn,
    stopping at the first one with a definite answer.
    """

    PROBES: ClassVar[Tuple[str, ...]] = ("from_term", "from_tput", "from_env", "from_curses")
    ENV_VARS: ClassVar[Tuple[str, ...]] = ("COLORTERM", "ANSICON")
    TPUT_COMMAND: ClassVar[str] = "tput colors"
    TERM_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"xterm|screen|vt100|vt220|rxvt|color|linux|cygwin|konsole|bvterm"
        r"|dtterm|gnome|ansi|tmux|256color"
    )

    env: Mapping[str, Any]
    verbose: bool = False
    platform: PlatformProbe = Field(default_factory=SystemPlatform)
    runner: CommandRunner = Field(default_factory=SubprocessRunner)
    console: Console = Field(default_factory=lambda: Console(stderr=True))

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    def __init__(
        self,
        env: Optional[Mapping[str, Any]] = None,
        verbose: Optional[bool] = None,
        **kwargs
    ):
        super().__init__(
            env=os.environ if env is None else env,
            verbose=VERBOSE if verbose is None else verbose,
            **kwargs
        )

    @field_validator("env")
    def freeze_env(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(v))

    def support(self) -> bool:
        """Return True if color output is supported."""
        if not self.platform.is_tty():
            return False
        if self.disabled():
            return False

        return resolve(getattr(self, name)() for name in self.PROBES)

    def disabled(self) -> bool:
        """Check if color is switched off with a non-empty NO_COLOR."""
        no_color = self.env.get("NO_COLOR")
        return not (no_color is None or no_color is False or no_color == "")

    def explain(self) -> ProbeReport:
        """Run every probe and report each result next to the decision."""
        tty = self.platform.is_tty()
        disabled = self.disabled()
        if not tty or disabled:
            return ProbeReport(tty=tty, disabled=disabled, supported=False)

        outcomes = [ProbeOutcome(name=name, result=getattr(self, name)()) for name in self.PROBES]
        return ProbeReport(
            tty=tty,
            disabled=disabled,
            outcomes=outcomes,
            supported=resolve(outcome.result for outcome in outcomes),
        )

    def from_term(self) -> ProbeResult:
        """Inspect the TERM variable for a known color terminal."""
        term = self.env.get("TERM")
        if not isinstance(term, str):
            return ProbeResult.UNKNOWN
        if term == "dumb":
            return ProbeResult.NEGATIVE
        if self.TERM_PATTERN.search(term):
            return ProbeResult.AFFIRMATIVE
        return ProbeResult.UNKNOWN

    def from_tput(self) -> ProbeResult:
        """Ask tput for the number of colors the terminal supports."""
        try:
            if not self.runner.available(self.TPUT_COMMAND):
                return ProbeResult.UNKNOWN
            colors = int(self.runner.run(self.TPUT_COMMAND, env=self._command_env()).strip())
        except CommandNotFoundError:
            return ProbeResult.UNKNOWN
        except Exception as e:
            self._warn(f"tput colors failed: {e}")
            return ProbeResult.UNKNOWN

        return ProbeResult.from_bool(colors > 2)

    def from_env(self) -> ProbeResult:
        """Look for environment variables set by color capable terminals."""
        if any(_is_present(self.env.get(key)) for key in self.ENV_VARS):
            return ProbeResult.AFFIRMATIVE
        return ProbeResult.UNKNOWN

    def from_curses(self, library: Optional[CapabilityLibrary] = None) -> ProbeResult:
        """Query the native curses library for color capability.

        A ``library`` can be passed in place of the system curses module.
        """
        if self.platform.is_windows():
            return ProbeResult.UNKNOWN

        if library is None:
            try:
                module = import_module("curses")
            except ImportError:
                self._warn("no native curses support")
                return ProbeResult.UNKNOWN

            library = CursesLibrary.resolve(module)
            if library is None:
                return ProbeResult.UNKNOWN

        try:
            with screen_session(library) as screen:
                return ProbeResult.from_bool(screen.has_colors())
        except Exception as e:
            self._warn(f"curses color query failed: {e}")
            return ProbeResult.UNKNOWN

    def _command_env(self) -> Dict[str, str]:
        """String-valued part of the environment snapshot, for subprocesses."""
        return {key: value for key, value in self.env.items() if isinstance(value, str)}

    def _warn(self, message: str) -> None:
        """Print a diagnostic warning in verbose mode."""
        if self.verbose:
            self.console.print(f"[yellow]warning:[/yellow] {escape(message)}")
