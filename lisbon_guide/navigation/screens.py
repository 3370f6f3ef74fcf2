"""Screens are tagged variants carrying typed parameters.

Route strings only exist at the edges (deep links, logs); inside the app a
screen is always one of the dataclasses below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union
from urllib.parse import quote, unquote

from lisbon_guide.core.errors import RouteError


@dataclass(frozen=True, slots=True)
class CategoryList:
    @property
    def route(self) -> str:
        return "categories"


@dataclass(frozen=True, slots=True)
class PlaceList:
    category: str

    @property
    def route(self) -> str:
        return f"places/{quote(self.category, safe='')}"


@dataclass(frozen=True, slots=True)
class PlaceDetail:
    place_id: int

    @property
    def route(self) -> str:
        return f"details/{self.place_id}"


Screen = Union[CategoryList, PlaceList, PlaceDetail]


@dataclass(frozen=True, slots=True)
class Push:
    screen: Screen


@dataclass(frozen=True, slots=True)
class Pop:
    pass


Intent = Union[Push, Pop]

# Sentinel id for a details route whose id does not parse; no place has it.
INVALID_PLACE_ID = -1


def parse_route(route: str) -> Screen:
    """Map a route string (`categories`, `places/<c>`, `details/<id>`) to a screen.

    A malformed id in a details route maps to a detail screen that renders
    as not-found. Any other unrecognised route raises RouteError.
    """

    text = route.strip().lstrip("/")
    head, sep, tail = text.partition("/")

    if head == "categories" and not tail:
        return CategoryList()
    if head == "places" and sep and tail:
        return PlaceList(unquote(tail))
    if head == "details":
        try:
            place_id = int(tail.rstrip("/"))
        except ValueError:
            place_id = INVALID_PLACE_ID
        return PlaceDetail(place_id)

    raise RouteError(route)
