from __future__ import annotations

from lisbon_guide.catalog.store import CatalogStore
from lisbon_guide.navigation.screens import PlaceList, Push

from .state import CategoryListState, StateHolder


class CategoryListFlow:
    def __init__(self, store: CatalogStore) -> None:
        self._store = store
        self.state: StateHolder[CategoryListState] = StateHolder()

    def activate(self) -> CategoryListState:
        state = CategoryListState(categories=self._store.list_categories())
        self.state.set(state)
        return state

    def select(self, category: str) -> Push:
        return Push(PlaceList(category))
