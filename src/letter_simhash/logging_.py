"""Logging utilities.

We use Python's standard `logging` module with a plain `time level logger | message` line format.

- Logs go to: `<log_dir>/<run_name>.log` when a log directory is given
- Also prints concise progress to stderr.
"""

from __future__ import annotations
import logging
import os
from typing import Optional, Union

def setup_logging(
    log_dir: Optional[str] = None,
    run_name: str = "letter_simhash",
    level: Union[int, str] = "INFO",
) -> None:
    """
    Setup logging configuration.

    Args:
        log_dir: Directory for the log file (console only if None)
        run_name: Log file stem
        level: Root log level name or number
    """
    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    # File
    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(os.path.join(log_dir, f"{run_name}.log"), encoding="utf-8")
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Console
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    root.addHandler(ch)
