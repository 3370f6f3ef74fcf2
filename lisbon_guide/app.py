"""Application assembly.

Wires the catalog store, the three flows, the navigator and the intent queue.
The navigator only knows screens; this module activates the flow matching the
top screen and republishes that flow's render state to the renderer.
"""

from __future__ import annotations

import logging
from typing import Callable

from lisbon_guide.bus.queue import IntentQueue
from lisbon_guide.catalog.seed import load_seed_file
from lisbon_guide.catalog.store import CatalogStore
from lisbon_guide.config.model import GuideConfig
from lisbon_guide.core.clock import monotonic_ms
from lisbon_guide.flows import (
    CategoryListFlow,
    PlaceDetailFlow,
    PlaceListFlow,
    RenderState,
    StateHolder,
)
from lisbon_guide.navigation.navigator import Navigator
from lisbon_guide.navigation.screens import (
    CategoryList,
    Intent,
    PlaceDetail,
    PlaceList,
    Screen,
    parse_route,
)
from lisbon_guide.observability.context import bind_session, set_screen
from lisbon_guide.observability.ids import new_session_id


logger = logging.getLogger(__name__)


def build_store(config: GuideConfig | None = None) -> CatalogStore:
    """Catalog from the configured seed file, or the built-in seed."""

    if config is not None and config.seed_path is not None:
        categories, places = load_seed_file(config.seed_path)
        return CatalogStore(categories=categories, places=places)
    return CatalogStore.builtin()


class GuideApp:
    def __init__(self, store: CatalogStore, *, config: GuideConfig | None = None) -> None:
        self.config = config or GuideConfig()
        self.session_id = new_session_id()
        bind_session(self.session_id)

        self._navigator = Navigator()
        self._queue = IntentQueue(maxsize=self.config.intent_queue_size)

        self.categories = CategoryListFlow(store)
        self.places = PlaceListFlow(store)
        self.detail = PlaceDetailFlow(store)

        self._render: StateHolder[RenderState] = StateHolder()
        self._navigator.add_listener(self._on_screen)
        self._on_screen(self._navigator.current)

    @property
    def current_screen(self) -> Screen:
        return self._navigator.current

    @property
    def stack(self) -> tuple[Screen, ...]:
        return self._navigator.stack

    @property
    def pending(self) -> int:
        return len(self._queue)

    def render_state(self) -> RenderState:
        state = self._render.value
        if state is None:
            raise RuntimeError("No screen has been activated yet")
        return state

    def subscribe(self, callback: Callable[[RenderState], None]) -> Callable[[], None]:
        return self._render.subscribe(callback)

    # User intents from the renderer.

    def select_category(self, category: str) -> bool:
        if not isinstance(self.current_screen, CategoryList):
            logger.warning("intent_ignored", extra={"intent": "select_category", "category": category})
            return False
        self._navigator.apply(self.categories.select(category))
        return True

    def select_place(self, place_id: int) -> bool:
        if not isinstance(self.current_screen, PlaceList):
            logger.warning("intent_ignored", extra={"intent": "select_place", "place_id": place_id})
            return False
        self._navigator.apply(self.places.select(place_id))
        return True

    def go_back(self) -> bool:
        if isinstance(self.current_screen, PlaceDetail):
            return self._navigator.apply(self.detail.back())
        return self._navigator.pop()

    def open_route(self, route: str) -> Screen:
        """Navigate to a deep link. `categories` returns to the root."""

        screen = parse_route(route)
        if isinstance(screen, CategoryList):
            while self._navigator.pop():
                pass
        else:
            self._navigator.push(screen)
        return screen

    # Intents delivered from other threads.

    def submit(self, intent: Intent) -> bool:
        return self._queue.put(intent)

    def process_pending(self) -> int:
        return self._queue.drain(self._navigator.apply)

    def _on_screen(self, screen: Screen) -> None:
        t0 = monotonic_ms()
        set_screen(screen.route, depth=len(self._navigator.stack))

        state: RenderState
        if isinstance(screen, CategoryList):
            state = self.categories.activate()
        elif isinstance(screen, PlaceList):
            state = self.places.activate(screen.category)
        elif isinstance(screen, PlaceDetail):
            state = self.detail.activate(screen.place_id)
        else:  # pragma: no cover
            raise TypeError(f"Unsupported screen: {screen!r}")

        logger.debug(
            "flow_activated",
            extra={"route": screen.route, "latency_ms": monotonic_ms() - t0},
        )
        self._render.set(state)
