"""Plain-text renderer for the terminal host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from lisbon_guide.config.model import UiStrings
from lisbon_guide.flows.state import (
    CategoryListState,
    PlaceDetailState,
    PlaceListState,
    PlaceNotFoundState,
    RenderState,
)


def render_text(state: RenderState, *, strings: UiStrings | None = None) -> list[str]:
    s = strings or UiStrings()

    if isinstance(state, CategoryListState):
        lines = [s.categories_title]
        lines.extend(f"{i}. {name}" for i, name in enumerate(state.categories, start=1))
        return lines

    if isinstance(state, PlaceListState):
        lines = [state.category]
        if state.is_empty:
            lines.append(s.empty_category)
            return lines
        for i, item in enumerate(state.items, start=1):
            lines.append(f"{i}. {item.name} [{item.image}]")
            lines.append(f"   {s.rating_label}: {item.rating}")
        return lines

    if isinstance(state, PlaceDetailState):
        place = state.place
        return [
            place.name,
            f"{s.rating_label}: {place.rating}",
            f"[{place.image}]",
            "",
            place.description,
        ]

    if isinstance(state, PlaceNotFoundState):
        return [s.not_found]

    raise TypeError(f"Unsupported render state: {state!r}")


@dataclass(frozen=True, slots=True)
class SelectCategory:
    category: str


@dataclass(frozen=True, slots=True)
class SelectPlace:
    place_id: int


@dataclass(frozen=True, slots=True)
class GoBack:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class Invalid:
    reason: str


Command = Union[SelectCategory, SelectPlace, GoBack, Quit, Invalid]


def parse_command(line: str, state: RenderState) -> Command:
    """Turn one line of user input into a command for the current screen.

    A number picks the n-th row of a list; `b`/`back` and `q`/`quit` are
    accepted on every screen.
    """

    text = line.strip().lower()
    if text in {"q", "quit", "exit"}:
        return Quit()
    if text in {"b", "back"}:
        return GoBack()
    if not text.isdigit():
        return Invalid(f"unknown command: {line.strip()!r}")

    index = int(text) - 1
    if isinstance(state, CategoryListState):
        if 0 <= index < len(state.categories):
            return SelectCategory(state.categories[index])
        return Invalid(f"no category #{text}")
    if isinstance(state, PlaceListState):
        if 0 <= index < len(state.items):
            return SelectPlace(state.items[index].id)
        return Invalid(f"no place #{text}")
    return Invalid("nothing to select here")
