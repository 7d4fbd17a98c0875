# product_grid/config/logging_config.py

"""Logging for product_grid runs.

Every launch writes to its own ``logs/run_<timestamp>.log``; only the
newest ``Settings.LOG_RETENTION`` run logs are kept.  The Textual UI owns
the terminal, so the stderr handler is limited to warnings by default.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from product_grid.config.settings import Settings

ROOT_LOGGER = "product_grid"

_FILE_FORMAT = (
    "%(asctime)s %(levelname)s [%(name)s] "
    "%(filename)s:%(lineno)d %(message)s"
)
_STDERR_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def _file_handler(path: Path) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt="%H:%M:%S")
    )
    return handler


def _stderr_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_STDERR_FORMAT))
    return handler


def prune_run_logs(logs_dir: Path, keep: int) -> list[Path]:
    """Delete all but the newest *keep* run logs; return what was removed."""
    runs = sorted(logs_dir.glob("run_*.log"), reverse=True)
    stale = runs[keep:] if keep > 0 else runs
    for path in stale:
        path.unlink(missing_ok=True)
    return stale


def setup_logging(
    logs_dir: Path | None = None,
    console_level: int = logging.WARNING,
) -> Path:
    """Attach run-file and stderr handlers to the ``product_grid`` logger.

    Calling it again while handlers are attached changes nothing and
    returns the path a fresh run would have used.
    """
    logs_dir = logs_dir or Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / datetime.now().strftime("run_%Y%m%d_%H%M%S.log")

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return log_file

    # Make room for this run before its file exists
    removed = prune_run_logs(logs_dir, Settings.LOG_RETENTION - 1)

    logger.addHandler(_file_handler(log_file))
    logger.addHandler(_stderr_handler(console_level))
    logger.info("Run log %s (pruned %d old logs)", log_file, len(removed))
    return log_file
