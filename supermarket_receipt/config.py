"""Runtime configuration and logging setup.

Environment variables:
    RECEIPT_COLUMNS: Width of the printed receipt (default: 40)
    LOG_LEVEL: Minimum level logged, e.g. DEBUG or INFO (default: WARNING)
    LOG_FORMAT: "json" (default) or "console"
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

import structlog

from .receipt_printer import DEFAULT_COLUMNS

LOG_FORMATS = ("json", "console")


@dataclass(frozen=True)
class Settings:
    receipt_columns: int = DEFAULT_COLUMNS
    log_level: str = "WARNING"
    log_format: str = "json"


def _parse_level(name: str, variable: str) -> str:
    level = name.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{variable} must be a logging level name, got {name!r}")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment, falling back to defaults."""
    env = os.environ if environ is None else environ

    raw_columns = env.get("RECEIPT_COLUMNS", str(DEFAULT_COLUMNS))
    try:
        columns = int(raw_columns)
    except ValueError:
        raise ValueError(f"RECEIPT_COLUMNS must be an integer, got {raw_columns!r}") from None
    if columns <= 0:
        raise ValueError(f"RECEIPT_COLUMNS must be positive, got {columns}")

    log_level = _parse_level(env.get("LOG_LEVEL", "WARNING"), "LOG_LEVEL")

    log_format = env.get("LOG_FORMAT", "json").lower()
    if log_format not in LOG_FORMATS:
        raise ValueError(f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}")

    return Settings(receipt_columns=columns, log_level=log_level, log_format=log_format)


def configure_logging(level: str = "WARNING", fmt: str = "json") -> None:
    """Configure structlog with ISO timestamps, writing to stderr."""
    renderer = (
        structlog.dev.ConsoleRenderer()
        if fmt == "console"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(_parse_level(level, "level"))),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
