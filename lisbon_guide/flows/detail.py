from __future__ import annotations

import logging

from lisbon_guide.catalog.store import CatalogStore
from lisbon_guide.navigation.screens import Pop

from .state import PlaceDetailState, PlaceNotFoundState, StateHolder


logger = logging.getLogger(__name__)


def coerce_place_id(value: object) -> int | None:
    """Return a usable place id, or None for anything malformed."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            return None
        return parsed if parsed > 0 else None
    return None


class PlaceDetailFlow:
    def __init__(self, store: CatalogStore) -> None:
        self._store = store
        self.state: StateHolder[PlaceDetailState | PlaceNotFoundState] = StateHolder()

    def activate(self, place_id: object) -> PlaceDetailState | PlaceNotFoundState:
        pid = coerce_place_id(place_id)
        place = self._store.get_place_by_id(pid) if pid is not None else None

        state: PlaceDetailState | PlaceNotFoundState
        if place is None:
            logger.info("place_not_found", extra={"place_id": repr(place_id)})
            state = PlaceNotFoundState(place_id=place_id)
        else:
            state = PlaceDetailState(place=place)

        self.state.set(state)
        return state

    def back(self) -> Pop:
        return Pop()
