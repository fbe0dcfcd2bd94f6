"""Library configuration: VariantConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_variant._logging import configure_logging

__all__ = [
    "VariantConfig",
    "get_config",
    "init",
]

_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class VariantConfig:
    """Configuration for klaw-variant.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render log lines as JSON instead of console output.
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: VariantConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from KLAW_VARIANT_LOG_LEVEL.

    Unknown values are reported and ignored.
    """
    env_level = os.environ.get("KLAW_VARIANT_LOG_LEVEL", "").strip().upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.warning("Unknown KLAW_VARIANT_LOG_LEVEL value '%s', ignoring", env_level)
        return None
    return env_level


def _detect_json_output() -> bool:
    """Read the output format from KLAW_VARIANT_LOG_JSON (default: JSON)."""
    env_json = os.environ.get("KLAW_VARIANT_LOG_JSON", "").strip().lower()
    if env_json in _FALSY:
        return False
    if env_json and env_json not in _TRUTHY:
        logging.warning("Unknown KLAW_VARIANT_LOG_JSON value '%s', defaulting to JSON", env_json)
    return True


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> VariantConfig:
    """Initialize klaw-variant with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            KLAW_VARIANT_LOG_LEVEL if None; None there too means silent.
        json_output: Emit JSON logs. Read from KLAW_VARIANT_LOG_JSON if None.

    Returns:
        The VariantConfig that was set.

    Example:
        ```python
        from klaw_variant import init

        # Environment-driven
        init()

        # Explicit configuration
        init(log_level="DEBUG", json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = VariantConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> VariantConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = "klaw-variant not initialized. Call init() first."
        raise RuntimeError(msg)
    return _config
