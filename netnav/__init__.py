"""netnav: natural-language query orchestration over a professional network graph."""

from __future__ import annotations

__version__ = "0.1.0"
