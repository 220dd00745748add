"""Library configuration: PolarisConfig, init and get_config."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from polaris._logging import configure_logging, get_logger

__all__ = [
    'DEFAULT_ERROR_SEPARATOR',
    'PolarisConfig',
    'check_async_limit',
    'get_config',
    'init',
    'reset_config',
]

DEFAULT_ERROR_SEPARATOR = ', '


@dataclass(frozen=True)
class PolarisConfig:
    """Configuration for polaris.

    Attributes:
        error_separator: Separator used by aggregate when none is given.
        async_limit: Default concurrency limit for async aggregation (None = unbounded).
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
    """

    error_separator: str = DEFAULT_ERROR_SEPARATOR
    async_limit: int | None = None
    log_level: str | None = None


# Global configuration (set by init())
_config: PolarisConfig | None = None


def _detect_separator() -> str:
    """Read POLARIS_ERROR_SEPARATOR, falling back to ', '."""
    return os.environ.get('POLARIS_ERROR_SEPARATOR', DEFAULT_ERROR_SEPARATOR)


def _detect_async_limit() -> int | None:
    """Read POLARIS_ASYNC_LIMIT; unset, invalid or non-positive values mean unbounded."""
    raw = os.environ.get('POLARIS_ASYNC_LIMIT', '').strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        logging.warning("Invalid POLARIS_ASYNC_LIMIT value '%s', ignoring", raw)
        return None
    if limit < 1:
        logging.warning("Non-positive POLARIS_ASYNC_LIMIT value '%s', ignoring", raw)
        return None
    return limit


def _detect_log_level() -> str | None:
    return os.environ.get('POLARIS_LOG_LEVEL') or None


def check_async_limit(limit: int | None) -> None:
    """Raise ValueError unless limit is None or at least 1."""
    if limit is not None and limit < 1:
        msg = f'async_limit must be at least 1, got {limit}'
        raise ValueError(msg)


def _resolve(
    error_separator: str | None = None,
    async_limit: int | None = None,
    log_level: str | None = None,
) -> PolarisConfig:
    """Build a PolarisConfig from arguments, then environment, then defaults."""
    check_async_limit(async_limit)
    return PolarisConfig(
        error_separator=error_separator if error_separator is not None else _detect_separator(),
        async_limit=async_limit if async_limit is not None else _detect_async_limit(),
        log_level=log_level if log_level is not None else _detect_log_level(),
    )


def init(
    error_separator: str | None = None,
    async_limit: int | None = None,
    log_level: str | None = None,
) -> PolarisConfig:
    """Initialize polaris with the specified configuration.

    Each field comes from the explicit argument, else the environment
    (POLARIS_ERROR_SEPARATOR, POLARIS_ASYNC_LIMIT, POLARIS_LOG_LEVEL),
    else the default.

    Args:
        error_separator: Default separator for aggregate.
        async_limit: Default concurrency limit for aggregate_async/choose_async.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The PolarisConfig that was set.

    Raises:
        ValueError: If async_limit is given and is less than 1.

    Example:
        ```python
        import polaris

        polaris.init(error_separator='; ', async_limit=8, log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    _config = _resolve(error_separator, async_limit, log_level)

    if _config.log_level is not None:
        configure_logging(_config.log_level)

    get_logger(__name__).debug(
        'config.initialized',
        error_separator=_config.error_separator,
        async_limit=_config.async_limit,
        log_level=_config.log_level,
    )
    return _config


def get_config() -> PolarisConfig:
    """Get the current configuration, initializing from the environment on first use.

    The lazy path only reads settings. Logging is configured by an explicit
    `init()` call, never as a side effect of using a combinator.

    Example:
        ```python
        from polaris import init, get_config

        init(async_limit=8)
        get_config().async_limit  # 8
        ```
    """
    global _config  # noqa: PLW0603
    if _config is None:
        _config = _resolve()
    return _config


def reset_config() -> None:
    """Forget the current configuration; the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
