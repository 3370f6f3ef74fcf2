from __future__ import annotations


class GuideError(Exception):
    """Base exception for this project."""


class ConfigError(GuideError):
    """Raised when configuration is invalid or incomplete."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class CatalogError(GuideError):
    """Raised when seed data violates a catalog invariant at load time."""

    def __init__(self, message: str, *, place_id: int | None = None):
        super().__init__(f"place {place_id}: {message}" if place_id is not None else message)
        self.place_id = place_id


class RouteError(GuideError):
    """Raised for a route string that names no known screen."""

    def __init__(self, route: str):
        super().__init__(f"Unknown route: {route!r}")
        self.route = route
