"""Quiz configuration management."""

import logging
from datetime import date
from functools import lru_cache
from pathlib import Path

from .schemas import QuizConfig
from .utils import load_json

PROJECT_ROOT = Path(__file__).parent.parent
CONFIG_PATH = PROJECT_ROOT / 'data' / 'quiz_config.json'


@lru_cache(maxsize=1)
def get_config() -> QuizConfig:
    """
    Load quiz configuration from data/quiz_config.json.

    Configuration is cached after first load.

    Returns:
        QuizConfig object with validated settings

    Raises:
        FileNotFoundError: If quiz_config.json doesn't exist
        ValueError: If config file has invalid structure
    """
    return load_json(CONFIG_PATH, schema=QuizConfig)


def get_season() -> int:
    """Get the NFL season to collect, defaulting to the current year."""
    return get_config().season or date.today().year


def get_qb_data_path() -> Path:
    """Get the QB snapshot path, resolved against the project root."""
    path = Path(get_config().qb_data_path)
    return path if path.is_absolute() else PROJECT_ROOT / path


def get_api_delay() -> float:
    """Get the delay between ESPN requests in seconds."""
    return get_config().api_delay_seconds


def get_api_max_retries() -> int:
    """Get the number of attempts per ESPN request."""
    return get_config().api_max_retries


def get_api_timeout() -> float:
    """Get the ESPN request timeout in seconds."""
    return get_config().api_timeout_seconds


def get_log_dir() -> Path:
    """Get the collector log directory, resolved against the project root."""
    path = Path(get_config().log_dir)
    return path if path.is_absolute() else PROJECT_ROOT / path


def get_log_level() -> int:
    """Get the configured log level as a `logging` constant."""
    return getattr(logging, get_config().log_level)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
