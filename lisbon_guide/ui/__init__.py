"""Terminal rendering collaborator."""

from __future__ import annotations

from .console import parse_command, render_text

__all__ = ["parse_command", "render_text"]
