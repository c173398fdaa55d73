from __future__ import annotations

import logging
import os as _os
from typing import Optional

_TRUTHY = {"1", "true", "yes", "on"}

def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean switch from the process environment."""
    raw = _os.environ.get(name)
    if raw is None:
        return default

    return raw.strip().lower() in _TRUTHY

def env_int(name: str) -> Optional[int]:
    raw = _os.environ.get(name)
    if raw is None or not raw.strip():
        return None

    try:
        return int(raw.strip())
    except ValueError:
        return None

def strict_unbound_enabled() -> bool:
    return env_flag("FWJS_STRICT_UNBOUND")

def debug_py_trace_enabled() -> bool:
    return env_flag("FWJS_DEBUG_PY_TRACE")

def recursion_limit() -> Optional[int]:
    return env_int("FWJS_RECURSION_LIMIT")

def log_level() -> int:
    raw = _os.environ.get("FWJS_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(raw)

    return level if isinstance(level, int) else logging.WARNING
