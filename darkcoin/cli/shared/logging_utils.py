"""Loguru helpers for consistent logging in CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

_SINK_IDS: dict[str, int] = {}


def _stderr_sink(message: str) -> None:
    # Resolved per write so redirected/captured stderr keeps working.
    sys.stderr.write(message)


def configure_stderr(level: str = "WARNING") -> None:
    """Reset loguru to a single stderr sink at ``level``."""
    logger.remove()
    _SINK_IDS.clear()
    logger.add(_stderr_sink, level=level.upper(), backtrace=False, diagnose=False)


def ensure_rotating_log_file(name: str, level: str = "INFO") -> Path:
    """Ensure a rotating log sink for the given command name."""
    log_dir = Path.home() / ".darkcoin" / "logs"
    log_path = log_dir / f"{name}.log"
    if name in _SINK_IDS:
        return log_path
    log_dir.mkdir(parents=True, exist_ok=True)
    _SINK_IDS[name] = logger.add(
        str(log_path),
        level=level.upper(),
        rotation="10 MB",
        retention="14 days",
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    return log_path
