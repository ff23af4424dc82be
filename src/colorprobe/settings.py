from __future__ import annotations
import os


def _env_bool(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


VERBOSE: bool = _env_bool("COLORPROBE_VERBOSE", False)
NO_COLOR: bool = _env_bool("COLORPROBE_NO_COLOR", False)  # plain CLI output
