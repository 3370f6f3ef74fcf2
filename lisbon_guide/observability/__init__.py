from __future__ import annotations

from .context import bind_session, set_screen
from .logging import configure_logging

__all__ = ["bind_session", "configure_logging", "set_screen"]
