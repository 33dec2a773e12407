"""Library configuration: FallibleConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fallible._logging import configure_logging

__all__ = [
    "FallibleConfig",
    "get_config",
    "init",
    "reset",
]

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class FallibleConfig:
    """Configuration for the fallible library.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render logs as JSON (True) or for the console (False).
        log_captures: Log every exception captured into an Err at the
            interop boundary (from_try_catch, from_promise, @safe).
    """

    log_level: str | None = None
    json_output: bool = True
    log_captures: bool = False


# Set by init(); None means "read from the environment on first use"
_config: FallibleConfig | None = None


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logging.getLogger("fallible").warning(
        "Unknown %s value '%s', defaulting to %s", name, raw, default
    )
    return default


def _config_from_env() -> FallibleConfig:
    """Build a configuration from FALLIBLE_* environment variables.

    - FALLIBLE_LOG_LEVEL: logging level, unset = silent
    - FALLIBLE_LOG_JSON: "1"/"0", default JSON output
    - FALLIBLE_LOG_CAPTURES: "1"/"0", defaults to on when a level is set
    """
    level = os.environ.get("FALLIBLE_LOG_LEVEL") or None
    return FallibleConfig(
        log_level=level,
        json_output=_env_flag("FALLIBLE_LOG_JSON", True),
        log_captures=_env_flag("FALLIBLE_LOG_CAPTURES", level is not None),
    )


def init(
    log_level: str | None = None,
    *,
    json_output: bool = True,
    log_captures: bool | None = None,
) -> FallibleConfig:
    """Initialize fallible with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: Emit JSON logs (True) or console logs (False).
        log_captures: Log captured exceptions. Defaults to True when a
            log level is given.

    Returns:
        The FallibleConfig that was set.

    Example:
        ```python
        import fallible

        fallible.init("DEBUG", json_output=False)
        fallible.from_try_catch(lambda: 1 / 0)  # logged at DEBUG
        ```
    """
    global _config  # noqa: PLW0603

    if log_captures is None:
        log_captures = log_level is not None

    _config = FallibleConfig(
        log_level=log_level,
        json_output=json_output,
        log_captures=log_captures,
    )

    if log_level is not None:
        configure_logging(log_level, json_output=json_output)

    return _config


def get_config() -> FallibleConfig:
    """Get the current configuration.

    When init() has not been called, the configuration is read from the
    FALLIBLE_* environment variables once and applied as if passed to
    init(), so a level set there also configures the library logger.
    """
    if _config is None:
        env = _config_from_env()
        return init(
            env.log_level,
            json_output=env.json_output,
            log_captures=env.log_captures,
        )
    return _config


def reset() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
