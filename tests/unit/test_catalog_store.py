from __future__ import annotations

import pytest

from lisbon_guide.catalog.model import Place
from lisbon_guide.catalog.store import CatalogStore
from lisbon_guide.core.errors import CatalogError


def _place(pid: int, category: str = "Парки") -> Place:
    return Place(id=pid, name=f"p{pid}", category=category, description="", image="img")


def test_categories_in_enumerated_order(store: CatalogStore) -> None:
    assert store.list_categories() == ("Достопримечательности", "Парки", "Рестораны")


def test_places_by_category_only_match(store: CatalogStore) -> None:
    for category in store.list_categories():
        places = store.list_places_by_category(category)
        assert places
        assert all(p.category == category for p in places)


def test_restaurants_holds_ramiro(store: CatalogStore) -> None:
    (place,) = store.list_places_by_category("Рестораны")
    assert place.name == "Ресторан Ramiro"
    assert place.rating == pytest.approx(4.7)


def test_get_place_by_id_returns_same_record(store: CatalogStore) -> None:
    for place in store.places:
        assert store.get_place_by_id(place.id) is place


@pytest.mark.parametrize("pid", [0, -1, 4, 999])
def test_get_place_by_id_absent_is_none(store: CatalogStore, pid: int) -> None:
    assert store.get_place_by_id(pid) is None


def test_unknown_category_is_empty(store: CatalogStore) -> None:
    assert store.list_places_by_category("Unknown") == ()


def test_insertion_order_kept() -> None:
    s = CatalogStore(categories=["Парки"], places=[_place(5), _place(2), _place(9)])
    assert [p.id for p in s.list_places_by_category("Парки")] == [5, 2, 9]


def test_known_category_without_places_is_empty() -> None:
    s = CatalogStore(categories=["Парки", "Музеи"], places=[_place(1)])
    assert s.list_places_by_category("Музеи") == ()


def test_duplicate_id_rejected() -> None:
    with pytest.raises(CatalogError) as ei:
        CatalogStore(categories=["Парки"], places=[_place(1), _place(1)])
    assert ei.value.place_id == 1


def test_place_with_unlisted_category_rejected() -> None:
    with pytest.raises(CatalogError) as ei:
        CatalogStore(categories=["Парки"], places=[_place(3, category="Пляжи")])
    assert "Пляжи" in str(ei.value)


@pytest.mark.parametrize("pid", [0, -2, True])
def test_non_positive_or_bool_id_rejected(pid: object) -> None:
    with pytest.raises(CatalogError):
        CatalogStore(categories=["Парки"], places=[_place(pid)])  # type: ignore[arg-type]


def test_duplicate_category_rejected() -> None:
    with pytest.raises(CatalogError):
        CatalogStore(categories=["Парки", "Парки"], places=[])


def test_place_is_immutable(store: CatalogStore) -> None:
    place = store.places[0]
    with pytest.raises(AttributeError):
        place.rating = 1.0  # type: ignore[misc]
