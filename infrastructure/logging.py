"""Logging initialization utilities using loguru."""

from __future__ import annotations

from pathlib import Path
import sys

from loguru import logger

DEFAULT_LOG_DIR = Path("logs")
LOG_FILE_PATTERN = "slideshow_*.log"


def init_logging(
    log_dir: str | Path | None = None, level: str = "INFO", enqueue: bool = True
) -> None:
    """Log to stderr and to a rotating file under `log_dir`.

    With `enqueue` the sinks are fed through a queue so several processes can
    share the log file.
    """
    log_path = Path(log_dir) if log_dir is not None else DEFAULT_LOG_DIR
    log_path.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
        enqueue=enqueue,
    )
    logger.add(
        str(log_path / "slideshow_{time:YYYYMMDD}.log"),
        rotation="10 MB",
        retention="10 days",
        compression="zip",
        enqueue=enqueue,
        backtrace=False,
        diagnose=False,
        level=level,
    )


def init_worker_logging(log_dir: str | Path | None, level: str) -> None:
    """Pool initializer giving each worker process the configured sinks.

    Workers exit without running atexit handlers, so their records are
    written directly instead of through a queue.
    """
    init_logging(log_dir, level=level, enqueue=False)


def find_latest_log_file(log_dir: str | Path | None = None) -> Path | None:
    """Find the latest log file in the specified directory."""
    log_path = Path(log_dir) if log_dir is not None else DEFAULT_LOG_DIR
    try:
        if not log_path.exists():
            return None

        log_files = list(log_path.glob(LOG_FILE_PATTERN))
        if not log_files:
            return None

        # Return the most recently modified file
        return max(log_files, key=lambda p: p.stat().st_mtime)
    except (OSError, ValueError):
        return None
