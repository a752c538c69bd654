"""Runtime settings for the pageset CLI.

Values come from the environment; command-line flags override them.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_PAGE_SIZE = "PAGESET_PAGE_SIZE"
ENV_LOG_LEVEL = "PAGESET_LOG_LEVEL"
ENV_EMPTY_FALLBACK = "PAGESET_EMPTY_FALLBACK"

DEFAULT_PAGE_SIZE = 20
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class ConfigError(ValueError):
    """Error related to configuration."""


@dataclass(frozen=True)
class PagerSettings:
    default_page_size: int = DEFAULT_PAGE_SIZE
    log_level: str = DEFAULT_LOG_LEVEL
    empty_fallback: bool = False


def _parse_page_size(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigError(f"{ENV_PAGE_SIZE} must be an integer, got {raw!r}") from None


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"{ENV_LOG_LEVEL} must be one of {', '.join(_LOG_LEVELS)}, got {raw!r}")
    return level


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {raw!r}")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> PagerSettings:
    """Build settings from ``environ`` (defaults to os.environ).

    The page size is not range-checked here; PaginationSet rejects a
    non-positive size when it is actually used.
    """
    env = os.environ if environ is None else environ

    settings = PagerSettings(
        default_page_size=_parse_page_size(env[ENV_PAGE_SIZE]) if ENV_PAGE_SIZE in env else DEFAULT_PAGE_SIZE,
        log_level=_parse_log_level(env[ENV_LOG_LEVEL]) if ENV_LOG_LEVEL in env else DEFAULT_LOG_LEVEL,
        empty_fallback=_parse_bool(ENV_EMPTY_FALLBACK, env[ENV_EMPTY_FALLBACK]) if ENV_EMPTY_FALLBACK in env else False,
    )
    logger.debug("Loaded settings: %s", settings)
    return settings
