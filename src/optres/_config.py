"""Library configuration: Config, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from optres._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
    'reset',
]

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class Config:
    """Configuration for optres.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render logs as JSON (True) or console text (False).
        catch: Exception types captured by ``try_``, ``from_awaitable`` and
            ``@safe`` when no explicit tuple is passed.
    """

    log_level: str | None = None
    json_output: bool = True
    catch: tuple[type[BaseException], ...] = (Exception,)


# Global configuration (set by init())
_config: Config | None = None


def _detect_log_level() -> str | None:
    """Read the log level from OPTRES_LOG_LEVEL."""
    env_level = os.environ.get('OPTRES_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LOG_LEVELS:
        logging.warning("Unknown OPTRES_LOG_LEVEL value '%s', ignoring", env_level)
        return None
    return env_level


def _detect_json_output() -> bool:
    """Read the log format from OPTRES_LOG_FORMAT ("json" or "console")."""
    env_format = os.environ.get('OPTRES_LOG_FORMAT', '').lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        logging.warning("Unknown OPTRES_LOG_FORMAT value '%s', defaulting to json", env_format)
    return True


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
    catch: tuple[type[BaseException], ...] | None = None,
) -> Config:
    """Initialize optres with the given configuration.

    Unset arguments fall back to the environment (``OPTRES_LOG_LEVEL``,
    ``OPTRES_LOG_FORMAT``) and then to the ``Config`` defaults.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: JSON (True) or console (False) log rendering.
        catch: Default exception types captured by the exception bridges.

    Returns:
        The Config that was set.

    Example:
        ```python
        from optres import init

        init(log_level='DEBUG', json_output=False)
        init(catch=(ValueError, OSError))
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = Config(
        log_level=resolved_level,
        json_output=resolved_json,
        catch=catch if catch is not None else Config.catch,
    )

    # Configure logging if level specified
    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> Config:
    """Get the current configuration, or the defaults if init() was never called."""
    if _config is None:
        return Config()
    return _config


def reset() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
