"""Dev-mode diagnostics for the view pipelines.

The pipelines are pure functions that never receive a config object, so the
active configuration is held here and installed once at startup via
:func:`configure`. Outside dev mode every call is a no-op.
"""

from __future__ import annotations

from typing import Any, Mapping

from .config import BaseConfig
from .logging_config import get_logger

logger = get_logger("devtools")

_ACTIVE_CONFIG: BaseConfig | None = None


def configure(config: BaseConfig | None) -> None:
    """Install the configuration consulted by :func:`dev_log`."""

    global _ACTIVE_CONFIG  # noqa: PLW0603
    _ACTIVE_CONFIG = config


def active_config() -> BaseConfig:
    """Return the installed configuration, building one from the environment if needed."""

    global _ACTIVE_CONFIG  # noqa: PLW0603
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = BaseConfig()
    return _ACTIVE_CONFIG


def in_dev_mode(config: BaseConfig | None = None) -> bool:
    """Return True when dev mode diagnostics are enabled."""

    cfg = config if config is not None else active_config()
    return bool(getattr(cfg, "DEV_MODE", False))


def dev_log(
    config: BaseConfig | None,
    message: str,
    *,
    exc: BaseException | None = None,
    context: Mapping[str, Any] | None = None,
) -> None:
    """Record a developer diagnostic when dev mode is enabled."""

    if not in_dev_mode(config):
        return

    text = f"[DEV] {message}"
    if context:
        extras = " ".join(f"{k}={v}" for k, v in context.items())
        if extras:
            text = f"{text} ({extras})"
    logger.info(text, exc_info=exc, extra={"diagnostic": dict(context or {})})
