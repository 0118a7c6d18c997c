from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"
_LEVEL_ENV_VARS = ("FETCHFLOW_LOG_LEVEL",)
_DEBUG_FLAGS = ("FETCHFLOW_DEBUG",)


def _coerce_level(value: Optional[str], fallback: int) -> int:
    if not value:
        return fallback
    text = value.strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    candidate = getattr(logging, text.upper(), None)
    if isinstance(candidate, int):
        return candidate
    return fallback


def _env_truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def resolve_env_level(env: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Return the level forced by environment variables, if any."""
    source = os.environ if env is None else env
    for var in _LEVEL_ENV_VARS:
        value = source.get(var)
        if value:
            return _coerce_level(value, logging.INFO)
    if any(_env_truthy(source.get(flag)) for flag in _DEBUG_FLAGS):
        return logging.DEBUG
    return None


def configure_root(
    default_level: int | str = logging.INFO,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """
    Configure the root logger with a compact format.

    Environment overrides:
      - FETCHFLOW_LOG_LEVEL: explicit log level (name or number)
      - FETCHFLOW_DEBUG: truthy -> DEBUG
    """
    fallback = (
        _coerce_level(default_level, logging.INFO)
        if isinstance(default_level, str)
        else int(default_level)
    )
    env_level = resolve_env_level(env)
    effective = env_level if env_level is not None else fallback

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    root.setLevel(effective)
    return effective


def level_name(level: int) -> str:
    """Return logging level name for diagnostics."""
    return logging.getLevelName(level)
