"""Logging setup for CLI runs."""

import logging
import os
import sys
from typing import List, Optional

LOG_LEVEL_ENV = "NBAMATCHUP_LOG_LEVEL"


def resolve_level(level: Optional[str] = None) -> int:
    """Level from an explicit name, else NBAMATCHUP_LOG_LEVEL, else INFO; unknown names mean INFO."""
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "INFO").strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    run_id: Optional[str] = None,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """Send records to stderr (and optionally a file), tagging each line with the run id."""
    tag = f"[{run_id}] " if run_id else ""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=resolve_level(level),
        format=f"%(asctime)s [%(levelname)s] {tag}%(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )
