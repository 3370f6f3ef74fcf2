from __future__ import annotations

import logging

from lisbon_guide.catalog.store import CatalogStore
from lisbon_guide.navigation.screens import PlaceDetail, Push

from .state import PlaceListState, PlaceSummary, StateHolder


logger = logging.getLogger(__name__)


class PlaceListFlow:
    """Places of one category.

    The catalog is static, so the list is fetched once per category; activating
    again with the same category republishes the cached state.
    """

    def __init__(self, store: CatalogStore) -> None:
        self._store = store
        self.state: StateHolder[PlaceListState] = StateHolder()

    def activate(self, category: str) -> PlaceListState:
        current = self.state.value
        if current is not None and current.category == category:
            self.state.set(current)
            return current

        places = self._store.list_places_by_category(category)
        state = PlaceListState(category=category, items=tuple(PlaceSummary.of(p) for p in places))
        logger.debug("places_loaded", extra={"category": category, "count": len(state.items)})
        self.state.set(state)
        return state

    def select(self, place_id: int) -> Push:
        return Push(PlaceDetail(place_id))
