"""Back-office console views: tables, breadcrumbs and account ledgers."""

from __future__ import annotations

from .config import BaseConfig, DevConfig

__all__ = ["BaseConfig", "DevConfig"]
