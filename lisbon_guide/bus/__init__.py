from __future__ import annotations

from .queue import IntentQueue

__all__ = ["IntentQueue"]
