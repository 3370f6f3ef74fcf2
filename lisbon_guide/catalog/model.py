from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Place:
    """A single point of interest.

    `image` is an opaque handle resolved by the rendering layer.
    `rating` is expected in 0.0-5.0 but not enforced.
    """

    id: int
    name: str
    category: str
    description: str
    image: str
    rating: float = 0.0
