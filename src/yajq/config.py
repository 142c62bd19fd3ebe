from __future__ import annotations

import os
from typing import Literal, cast, get_args

ColorMode = Literal["auto", "always", "never"]

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


class YajqConfig:
    """Process-wide output and logging settings.

    Defaults come from ``YAJQ_*`` environment variables; command-line flags
    override them for a single run.
    """

    def __init__(self) -> None:
        self.indent: int | None = _env_indent("YAJQ_INDENT", default=2)
        self.sort_keys: bool = _env_bool("YAJQ_SORT_KEYS", default=False)
        self.color: ColorMode = _env_color("YAJQ_COLOR", default="auto")
        self.log_level: str = _env_log_level("YAJQ_LOG_LEVEL", default="WARNING")


def _env_indent(name: str, *, default: int) -> int | None:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value or None


def _env_bool(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_color(name: str, *, default: ColorMode) -> ColorMode:
    raw = os.getenv(name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered not in get_args(ColorMode):
        raise ValueError(
            f"{name} must be one of {', '.join(get_args(ColorMode))}, got {raw!r}"
        )
    return cast(ColorMode, lowered)


def _env_log_level(name: str, *, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    return normalize_log_level(raw, source=name)


def normalize_log_level(raw: str, *, source: str = "log level") -> str:
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(
            f"{source} must be one of {', '.join(_LOG_LEVELS)}, got {raw!r}"
        )
    return level


YAJQ_CONFIG = YajqConfig()
