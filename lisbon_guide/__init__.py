"""Lisbon guide: browse a small catalog of places by category."""

from __future__ import annotations

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
