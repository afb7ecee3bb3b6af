from __future__ import annotations

from apk_lifecycle.phase0.entrypoint_discovery import (
    discover_entrypoints,
    filter_entrypoints,
    load_callgraph,
)

__all__ = [
    "discover_entrypoints",
    "filter_entrypoints",
    "load_callgraph",
]
