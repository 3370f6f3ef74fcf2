"""Typed screens, intents and the stack navigator."""

from __future__ import annotations

from .navigator import Navigator
from .screens import CategoryList, Intent, PlaceDetail, PlaceList, Pop, Push, Screen, parse_route

__all__ = [
    "CategoryList",
    "Intent",
    "Navigator",
    "PlaceDetail",
    "PlaceList",
    "Pop",
    "Push",
    "Screen",
    "parse_route",
]
