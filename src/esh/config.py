"""Process-wide settings, read from the environment.

``ESH_DEBUG``      enable per-token debug logging (1/true/yes/on)
``ESH_LOG_LEVEL``  level name for the CLI's log handler (default WARNING)
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

_TRUTHY = ("1", "true", "yes", "on")

DEFAULT_LOG_LEVEL = "WARNING"


def _parse_bool(raw: Optional[str]) -> bool:
    if not raw:
        return False
    return raw.strip().lower() in _TRUTHY


class Config:
    def __init__(self, enable_debug_logs: bool = False, log_level: str = DEFAULT_LOG_LEVEL) -> None:
        self.enable_debug_logs = enable_debug_logs
        self.log_level = log_level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        env = os.environ if environ is None else environ
        level = (env.get("ESH_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            level = DEFAULT_LOG_LEVEL
        return cls(
            enable_debug_logs=_parse_bool(env.get("ESH_DEBUG")),
            log_level=level,
        )

    @property
    def effective_level(self) -> int:
        """Numeric logging level; debug logs force DEBUG."""
        if self.enable_debug_logs:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)

    def __repr__(self) -> str:
        return f"Config(enable_debug_logs={self.enable_debug_logs}, log_level={self.log_level!r})"


config = Config.from_env()
