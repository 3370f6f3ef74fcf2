from __future__ import annotations

import pytest

from lisbon_guide.catalog.store import CatalogStore
from lisbon_guide.flows import (
    CategoryListFlow,
    CategoryListState,
    PlaceDetailFlow,
    PlaceDetailState,
    PlaceListFlow,
    PlaceNotFoundState,
    PlaceSummary,
)
from lisbon_guide.flows.detail import coerce_place_id
from lisbon_guide.navigation.screens import PlaceDetail, PlaceList, Pop, Push


class CountingStore(CatalogStore):
    def __init__(self) -> None:
        base = CatalogStore.builtin()
        super().__init__(categories=base.list_categories(), places=base.places)
        self.calls = 0

    def list_places_by_category(self, category: str):  # type: ignore[override]
        self.calls += 1
        return super().list_places_by_category(category)


def test_category_flow_lists_and_selects(store: CatalogStore) -> None:
    flow = CategoryListFlow(store)
    state = flow.activate()

    assert state == CategoryListState(("Достопримечательности", "Парки", "Рестораны"))
    assert flow.state.value == state
    assert flow.select("Парки") == Push(PlaceList("Парки"))


def test_place_list_flow_summaries(store: CatalogStore) -> None:
    flow = PlaceListFlow(store)
    state = flow.activate("Рестораны")

    assert state.items == (PlaceSummary(id=3, name="Ресторан Ramiro", rating=4.7, image="ramiro_restaurants"),)
    assert flow.select(3) == Push(PlaceDetail(3))


def test_place_list_flow_empty_category_is_valid(store: CatalogStore) -> None:
    state = PlaceListFlow(store).activate("Unknown")
    assert state.items == ()
    assert state.is_empty


def test_place_list_flow_fetches_once_per_category() -> None:
    store = CountingStore()
    flow = PlaceListFlow(store)

    flow.activate("Парки")
    flow.activate("Парки")
    assert store.calls == 1

    flow.activate("Рестораны")
    assert store.calls == 2


def test_place_list_flow_notifies_subscribers(store: CatalogStore) -> None:
    flow = PlaceListFlow(store)
    seen: list[object] = []
    unsubscribe = flow.state.subscribe(seen.append)

    flow.activate("Парки")
    unsubscribe()
    flow.activate("Рестораны")

    assert len(seen) == 1
    assert seen[0].category == "Парки"


def test_detail_flow_found(store: CatalogStore) -> None:
    state = PlaceDetailFlow(store).activate(1)
    assert isinstance(state, PlaceDetailState)
    assert state.place.name == "Башня Белен"


@pytest.mark.parametrize("place_id", [999, 0, -1, "abc", "", None, True, 2.0, [2]])
def test_detail_flow_not_found(store: CatalogStore, place_id: object) -> None:
    state = PlaceDetailFlow(store).activate(place_id)
    assert state == PlaceNotFoundState(place_id=place_id)


def test_detail_flow_accepts_numeric_string(store: CatalogStore) -> None:
    state = PlaceDetailFlow(store).activate(" 2 ")
    assert isinstance(state, PlaceDetailState)
    assert state.place.id == 2


def test_detail_flow_back_is_pop(store: CatalogStore) -> None:
    assert PlaceDetailFlow(store).back() == Pop()


def test_coerce_place_id() -> None:
    assert coerce_place_id(3) == 3
    assert coerce_place_id("7") == 7
    assert coerce_place_id("x7") is None
    assert coerce_place_id(False) is None
