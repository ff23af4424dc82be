# src/colorprobe/backends/base.py
"""Base protocol for native terminal capability libraries."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class CapabilityLibrary(Protocol):
    """Protocol for libraries that can answer color capability queries."""

    def init_screen(self) -> None:
        """Start a screen session."""
        ...

    def has_colors(self) -> bool:
        """Return the terminal's color capability flag."""
        ...

    def close_screen(self) -> None:
        """End the screen session."""
        ...


@contextmanager
def screen_session(library: CapabilityLibrary) -> Iterator[CapabilityLibrary]:
    """Open a screen session and always close it once it was opened."""
    library.init_screen()
    try:
        yield library
    finally:
        library.close_screen()
