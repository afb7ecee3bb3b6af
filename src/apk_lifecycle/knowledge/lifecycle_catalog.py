from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping

import yaml

from apk_lifecycle.data.lifecycle_constants import LIFECYCLE_METHODS_MAP, LIFECYCLE_ROLES
from apk_lifecycle.models.component import ComponentRole
from apk_lifecycle.utils.signature_normalize import normalize_subsignature

_EMPTY: FrozenSet[str] = frozenset()


class LifecycleCatalog:
    """Read-only table of lifecycle subsignatures per component role."""

    def __init__(self, version: str, tables: Mapping[ComponentRole, Iterable[str]]) -> None:
        self.version = version
        normalized: Dict[ComponentRole, FrozenSet[str]] = {}
        for role, methods in tables.items():
            if role not in LIFECYCLE_ROLES:
                raise ValueError(f"Role {role.value} has no lifecycle table")
            normalized[role] = frozenset(normalize_subsignature(m) for m in methods)
        self._tables = MappingProxyType(normalized)

    @staticmethod
    def default() -> "LifecycleCatalog":
        return LifecycleCatalog(version="builtin", tables=LIFECYCLE_METHODS_MAP)

    @staticmethod
    def load(path: str | Path) -> "LifecycleCatalog":
        path = Path(path)
        with path.open("r", encoding="utf-8") as handle:
            if path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(handle) or {}
            else:
                data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError(f"Lifecycle catalog {path} must be a mapping")
        version = data.get("version")
        if not version:
            raise ValueError("Lifecycle catalog missing version")
        raw_roles = data.get("roles")
        if not isinstance(raw_roles, dict) or not raw_roles:
            raise ValueError("Lifecycle catalog missing roles")
        tables: Dict[ComponentRole, set[str]] = {}
        if data.get("extend_defaults"):
            tables = {role: set(methods) for role, methods in LIFECYCLE_METHODS_MAP.items()}
        for role_name, methods in raw_roles.items():
            tables.setdefault(ComponentRole.from_name(str(role_name)), set()).update(
                _parse_methods(role_name, methods)
            )
        return LifecycleCatalog(version=str(version), tables=tables)

    @property
    def tables(self) -> Mapping[ComponentRole, FrozenSet[str]]:
        return self._tables

    def methods_for(self, role: ComponentRole) -> FrozenSet[str]:
        return self._tables.get(role, _EMPTY)

    def contains(self, role: ComponentRole, subsignature: str) -> bool:
        return normalize_subsignature(subsignature) in self.methods_for(role)


def _parse_methods(role_name: Any, methods: Any) -> list[str]:
    if not isinstance(methods, list):
        raise ValueError(f"Role {role_name} must list subsignatures")
    return [str(m) for m in methods if m]
