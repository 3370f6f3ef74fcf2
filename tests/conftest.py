from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    root = Path(__file__).resolve().parents[1]
    if (root / "lisbon_guide").exists():
        sys.path.insert(0, str(root))


@pytest.fixture
def store():
    from lisbon_guide.catalog.store import CatalogStore

    return CatalogStore.builtin()


@pytest.fixture
def app(store):
    from lisbon_guide.app import GuideApp

    return GuideApp(store)
