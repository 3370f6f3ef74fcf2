"""Static place catalog: records, seed data and the read-only store."""

from __future__ import annotations

from .model import Place
from .seed import BUILTIN_CATEGORIES, BUILTIN_PLACES, load_seed_file
from .store import CatalogStore

__all__ = [
    "BUILTIN_CATEGORIES",
    "BUILTIN_PLACES",
    "CatalogStore",
    "Place",
    "load_seed_file",
]
