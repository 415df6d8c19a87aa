"""Logging setup for the QB collector and validation scripts."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import get_log_dir, get_log_level

FILE_FORMAT = logging.Formatter(
    '%(asctime)s %(levelname)-7s %(name)s [%(filename)s:%(lineno)d] %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
CONSOLE_FORMAT = logging.Formatter('%(levelname)s: %(message)s')


def _run_log_path(log_dir: Path, run_name: str) -> Path:
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f'{run_name}_{datetime.now():%Y%m%d_%H%M%S}.log'


def setup_logging(
    run_name: str = 'nflquiz',
    level: Optional[int] = None,
    log_dir: Optional[Path] = None,
    log_to_file: bool = True,
) -> logging.Logger:
    """
    Attach handlers to the `nflquiz` logger for one collector run.

    Level and log directory fall back to `log_level` and `log_dir` in
    data/quiz_config.json. Console output always goes to stdout; the file
    log is named after the run and its start time.

    Returns:
        The configured `nflquiz` logger
    """
    if level is None:
        level = get_log_level()

    logger = logging.getLogger('nflquiz')
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    handlers[0].setFormatter(CONSOLE_FORMAT)

    if log_to_file:
        log_path = _run_log_path(log_dir or get_log_dir(), run_name)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setFormatter(FILE_FORMAT)
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)

    if log_to_file:
        logger.debug(f'Logging {run_name} run to {log_path}')
    return logger
