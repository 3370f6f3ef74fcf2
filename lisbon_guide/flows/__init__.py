"""Per-screen flows: each owns a render state and turns selections into intents."""

from __future__ import annotations

from .categories import CategoryListFlow
from .detail import PlaceDetailFlow
from .places import PlaceListFlow
from .state import (
    CategoryListState,
    PlaceDetailState,
    PlaceListState,
    PlaceNotFoundState,
    PlaceSummary,
    RenderState,
    StateHolder,
)

__all__ = [
    "CategoryListFlow",
    "CategoryListState",
    "PlaceDetailFlow",
    "PlaceDetailState",
    "PlaceListFlow",
    "PlaceListState",
    "PlaceNotFoundState",
    "PlaceSummary",
    "RenderState",
    "StateHolder",
]
