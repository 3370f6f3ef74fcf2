from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from lisbon_guide.catalog.model import Place


@dataclass(frozen=True, slots=True)
class CategoryListState:
    categories: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PlaceSummary:
    id: int
    name: str
    rating: float
    image: str

    @classmethod
    def of(cls, place: Place) -> "PlaceSummary":
        return cls(id=place.id, name=place.name, rating=place.rating, image=place.image)


@dataclass(frozen=True, slots=True)
class PlaceListState:
    category: str
    items: tuple[PlaceSummary, ...]

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True, slots=True)
class PlaceDetailState:
    place: Place


@dataclass(frozen=True, slots=True)
class PlaceNotFoundState:
    # The id as received, which may be malformed.
    place_id: object


RenderState = Union[CategoryListState, PlaceListState, PlaceDetailState, PlaceNotFoundState]

S = TypeVar("S")


class StateHolder(Generic[S]):
    """A current value plus plain-callback subscribers.

    Renderers may poll `value` or subscribe; `subscribe` returns a function
    that removes the callback.
    """

    def __init__(self, initial: S | None = None) -> None:
        self._value = initial
        self._subscribers: list[Callable[[S], None]] = []

    @property
    def value(self) -> S | None:
        return self._value

    def set(self, value: S) -> None:
        self._value = value
        for cb in list(self._subscribers):
            cb(value)

    def subscribe(self, callback: Callable[[S], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe
