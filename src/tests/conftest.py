# tests/conftest.py
"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import io
from unittest.mock import Mock

import pytest
from rich.console import Console

from colorprobe.platform import SubprocessRunner, SystemPlatform


@pytest.fixture
def console_buffer():
    """Console writing into an in-memory buffer."""
    buffer = io.StringIO()
    return Console(file=buffer, width=200, no_color=True)


@pytest.fixture
def tty_platform():
    """Non-Windows platform with an interactive output stream."""
    platform = Mock(spec=SystemPlatform)
    platform.is_tty.return_value = True
    platform.is_windows.return_value = False
    return platform


@pytest.fixture
def pipe_platform():
    """Platform whose output stream is redirected."""
    platform = Mock(spec=SystemPlatform)
    platform.is_tty.return_value = False
    platform.is_windows.return_value = False
    return platform


@pytest.fixture
def windows_platform():
    """Windows platform with an interactive output stream."""
    platform = Mock(spec=SystemPlatform)
    platform.is_tty.return_value = True
    platform.is_windows.return_value = True
    return platform


@pytest.fixture
def missing_tput():
    """Command runner without tput installed."""
    runner = Mock(spec=SubprocessRunner)
    runner.available.return_value = False
    return runner


@pytest.fixture
def curses_double():
    """Capability library double reporting color support."""
    library = Mock()
    library.has_colors.return_value = True
    return library
