"""
Loguru sinks for the extractor API.

Console and file sinks are described by the ``logging`` section of
config.yaml. Records emitted through the standard ``logging`` module (uvicorn,
urllib3) are forwarded to Loguru so they land in the same sinks.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from core.config import Config, find_project_root

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}"
CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")
QUIET_PREFIXES = ("urllib3", "charset_normalizer")

_configured = False


class StdlibToLoguru(logging.Handler):
    """Forward a stdlib LogRecord to Loguru, keeping the caller's location."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _file_filter(record) -> bool:
    return not (record["level"].no < 20 and record["name"].startswith(QUIET_PREFIXES))


def _log_path(config: Config) -> Path:
    path = Path(config.get('logging.file', 'logs/backend.log'))
    return path if path.is_absolute() else find_project_root() / path


def setup_logging(config: Optional[Config] = None) -> None:
    """Replace Loguru's default sink with the configured ones; later calls are no-ops."""
    global _configured
    if _configured:
        return

    config = config or Config()
    logger.remove()

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=config.get('logging.console_level', 'INFO'),
        colorize=sys.stderr.isatty(),
    )

    if config.get_bool('logging.file_enabled', True):
        path = _log_path(config)
        logger.debug(f"[Logging] Writing log file to {path}")
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(path),
            format=FILE_FORMAT,
            level=config.get('logging.file_level', 'DEBUG'),
            rotation=config.get('logging.rotation', '10 MB'),
            retention=config.get('logging.retention', '7 days'),
            enqueue=True,
            filter=_file_filter,
        )

    handler = StdlibToLoguru()
    logging.basicConfig(handlers=[handler], level=0, force=True)
    for name in UVICORN_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [handler]
        std_logger.propagate = False

    _configured = True
