"""
Launcher configuration, read from the environment
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .constants import (
    DEFAULT_TARGET,
    LOG_FORMAT,
    LOG_LEVEL_ENV_VAR,
    TARGET_ENV_VAR,
    TEST_MODE_ENV_VAR,
)

TRUE_VALUES = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class LauncherConfig:
    target: str = DEFAULT_TARGET
    log_level: int = logging.WARNING
    test_mode: bool = False

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] = None) -> 'LauncherConfig':
        if environ is None:
            environ = os.environ
        return cls(
            target=environ.get(TARGET_ENV_VAR) or DEFAULT_TARGET,
            log_level=parse_log_level(environ.get(LOG_LEVEL_ENV_VAR)),
            test_mode=environ.get(TEST_MODE_ENV_VAR, '').strip().lower() in TRUE_VALUES,
        )


def parse_log_level(value: str = None, default: int = logging.WARNING) -> int:
    """
    Level name ('debug', 'INFO', ...) or number → logging level.

    Unknown or missing values give default.
    """
    if not value:
        return default
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int = logging.WARNING):
    """Root logging setup for the launcher process (stderr)"""
    logging.basicConfig(level=level, format=LOG_FORMAT)
