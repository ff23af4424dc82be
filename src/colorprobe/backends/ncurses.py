# src/colorprobe/backends/ncurses.py
"""Capability library backed by the standard library curses module."""

from __future__ import annotations

from typing import Any, ClassVar, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class CursesLibrary(BaseModel):
    """Adapts a loaded curses module to the CapabilityLibrary protocol."""

    module: Any

    model_config = ConfigDict(arbitrary_types_allowed=True)

    REQUIRED_ATTRIBUTES: ClassVar[Tuple[str, ...]] = ("initscr", "has_colors", "endwin")

    def init_screen(self) -> None:
        self.module.initscr()

    def has_colors(self) -> bool:
        return bool(self.module.has_colors())

    def close_screen(self) -> None:
        self.module.endwin()

    @classmethod
    def resolve(cls, module: Any) -> Optional[CursesLibrary]:
        """Wrap module, or return None if it lacks the curses API."""
        if not all(hasattr(module, name) for name in cls.REQUIRED_ATTRIBUTES):
            return None
        return cls(module=module)
