from __future__ import annotations

from contextvars import ContextVar


_session_id: ContextVar[str | None] = ContextVar("session_id", default=None)
_screen: ContextVar[str | None] = ContextVar("screen", default=None)
_depth: ContextVar[int | None] = ContextVar("depth", default=None)


def bind_session(session_id: str) -> None:
    _session_id.set(session_id)


def set_screen(route: str, *, depth: int) -> None:
    _screen.set(route)
    _depth.set(depth)


def snapshot() -> dict[str, object]:
    """Return a snapshot of current observability context for logging."""

    out: dict[str, object] = {}
    if (v := _session_id.get()) is not None:
        out["session_id"] = v
    if (v := _screen.get()) is not None:
        out["screen"] = v
    if (v := _depth.get()) is not None:
        out["depth"] = v
    return out
