from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

_CONFIGURED = False

FILE_LEVELS = ("DEBUG", "INFO", "ERROR")


def _only(level: str) -> Callable[[dict], bool]:
    return lambda record: record["level"].name == level


def _add_file_sinks(root: Path) -> None:
    day_dir = root / datetime.now(timezone.utc).strftime("%Y-%m-%d")
    day_dir.mkdir(parents=True, exist_ok=True)
    for level in FILE_LEVELS:
        logger.add(
            day_dir / f"{level.lower()}.json",
            level=level,
            filter=_only(level),
            serialize=True,
            rotation="10 MB",
            retention="30 days",
            enqueue=True,
        )


def configure_logging(
    service: str = "optvalue",
    version: Optional[str] = None,
    environment: Optional[str] = None,
) -> None:
    """
    Install Loguru sinks for an application using optvalue. Only the first call has effect.

    OPTVALUE_DISABLE_FILE_LOGS=1 logs to stderr at OPTVALUE_LOG_LEVEL (default INFO).
    Otherwise each level in FILE_LEVELS goes to its own JSON-lines file,
    logs/YYYY-MM-DD/<level>.json. Every record carries service/version/env extras.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger.remove()
    if os.getenv("OPTVALUE_DISABLE_FILE_LOGS") == "1":
        level = os.getenv("OPTVALUE_LOG_LEVEL", "INFO").upper()
        logger.add(sys.stderr, level=level, colorize=sys.stderr.isatty())
    else:
        _add_file_sinks(Path("logs"))

    logger.configure(
        extra={
            "service": service,
            "version": version or os.getenv("OPTVALUE_VERSION", "0.1.0"),
            "env": environment or os.getenv("OPTVALUE_ENV", "dev"),
        }
    )
    _CONFIGURED = True


def reset_logging() -> None:
    """Drop all sinks so the next configure_logging() call starts over."""
    global _CONFIGURED
    logger.remove()
    _CONFIGURED = False
