"""Project core.

This package hosts the stable, non-domain-specific building blocks (errors and
the clock helpers).
"""

from __future__ import annotations

from .errors import CatalogError, ConfigError, GuideError, RouteError

__all__ = [
    "CatalogError",
    "ConfigError",
    "GuideError",
    "RouteError",
]
