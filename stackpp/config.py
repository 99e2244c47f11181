from __future__ import annotations
import logging
import os
from typing import Optional

from stackpp.errors import StackppConfigError


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

# Defaults
_DEFAULT_TRACE = True
_DEFAULT_LOG_LEVEL = "WARNING"


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise StackppConfigError(f"{var} must be a boolean flag, got {raw!r}")


def int_from_env(var: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise StackppConfigError(f"{var} must be an integer, got {raw!r}") from None


def get_trace() -> bool:
    """Whether the REPL echoes the parsed program and the machine state."""
    return flag_from_env('STACKPP_TRACE', _DEFAULT_TRACE)


def get_recursion_limit() -> Optional[int]:
    return int_from_env('STACKPP_RECURSION_LIMIT', None)


def get_log_level() -> int:
    raw = os.environ.get('STACKPP_LOG_LEVEL') or _DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise StackppConfigError(f"STACKPP_LOG_LEVEL is not a logging level: {raw!r}")
    return level
