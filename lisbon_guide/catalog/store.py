from __future__ import annotations

import logging
from typing import Iterable

from lisbon_guide.core.errors import CatalogError

from .model import Place
from .seed import BUILTIN_CATEGORIES, BUILTIN_PLACES


logger = logging.getLogger(__name__)


class CatalogStore:
    """Read-only catalog of places.

    Categories are kept in their enumerated order rather than derived from the
    places, so the order stays stable whatever the seed order is. Every place
    must use one of the enumerated categories; this is checked on construction.
    """

    def __init__(self, *, categories: Iterable[str], places: Iterable[Place]) -> None:
        cats = tuple(categories)
        if len(set(cats)) != len(cats):
            raise CatalogError(f"Duplicate category names: {list(cats)!r}")

        known = set(cats)
        by_id: dict[int, Place] = {}
        ordered: list[Place] = []
        for place in places:
            if isinstance(place.id, bool) or not isinstance(place.id, int) or place.id <= 0:
                raise CatalogError(f"id must be a positive integer, got {place.id!r}")
            if place.id in by_id:
                raise CatalogError("duplicate place id", place_id=place.id)
            if place.category not in known:
                raise CatalogError(f"unknown category {place.category!r}", place_id=place.id)
            by_id[place.id] = place
            ordered.append(place)

        self._categories = cats
        self._places = tuple(ordered)
        self._by_id = by_id

        logger.info(
            "catalog_loaded",
            extra={"categories": len(self._categories), "places": len(self._places)},
        )

    @classmethod
    def builtin(cls) -> "CatalogStore":
        return cls(categories=BUILTIN_CATEGORIES, places=BUILTIN_PLACES)

    @property
    def places(self) -> tuple[Place, ...]:
        return self._places

    def list_categories(self) -> tuple[str, ...]:
        return self._categories

    def list_places_by_category(self, category: str) -> tuple[Place, ...]:
        """Places in `category`, in catalog order. Unknown categories yield ()."""

        return tuple(p for p in self._places if p.category == category)

    def get_place_by_id(self, place_id: int) -> Place | None:
        return self._by_id.get(place_id)
