from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_SETTINGS: Dict[str, Any] = {
    "lifecycle": {"catalog_path": None},
    "telemetry": {"enabled": False},
}


def load_settings(path: Optional[str | Path]) -> Dict[str, Any]:
    """Read the YAML settings file (missing file means defaults) and apply env overrides."""
    settings: Dict[str, Any] = {key: dict(value) for key, value in DEFAULT_SETTINGS.items()}
    if path:
        path = Path(path)
        if path.exists():
            with path.open("r", encoding="utf-8") as handle:
                loaded = yaml.safe_load(handle) or {}
            if not isinstance(loaded, dict):
                raise ValueError(f"Settings file {path} must contain a mapping")
            for key, value in loaded.items():
                if isinstance(value, dict) and isinstance(settings.get(key), dict):
                    settings[key].update(value)
                else:
                    settings[key] = value
    catalog_path = os.environ.get("LIFECYCLE_CATALOG_PATH")
    if catalog_path:
        settings.setdefault("lifecycle", {})["catalog_path"] = catalog_path
    return settings
