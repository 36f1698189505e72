"""
Logging setup for the ``streamcipher`` package logger.
"""

__all__ = ["setup_logging"]

import logging
import sys
from datetime import datetime
from pathlib import Path

from streamcipher.infra.paths import PACKAGE_NAME

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str | int = "INFO",
    log_dir: str | Path | None = None,
) -> logging.Logger:
    """Configure console (and optionally file) logging.

    Calling it again replaces the handlers installed by a previous call.

    Args:
        level: Console level name or number.
        log_dir: If given, also write DEBUG logs to
            ``<log_dir>/streamcipher_YYYYMMDD.log``.

    Returns:
        The configured package logger.

    Raises:
        ValueError: If ``level`` is not a known logging level name.
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level}")
        level = numeric

    logger = logging.getLogger(PACKAGE_NAME)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(fmt)
    logger.addHandler(console)

    if log_dir:
        path = Path(log_dir).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        log_file = path / f"{PACKAGE_NAME}_{datetime.now():%Y%m%d}.log"
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger
