from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Set

logger = logging.getLogger(__name__)

OBJECT_CLASS = "java.lang.Object"


class ClassHierarchy:
    """Subtype oracle and type resolver over the Soot extractor's class hierarchy.

    The artifact maps each class name to its direct or transitive supertypes::

        {"classes": {"com.example.Main": {"superclass": "android.app.Activity",
                                          "interfaces": [],
                                          "supertypes": ["android.app.Activity", ...]}}}

    Class handles are fully qualified class names. Subtyping is reflexive and
    transitive, and every class is a subtype of ``java.lang.Object``.
    """

    def __init__(self, direct_supertypes: Dict[str, Set[str]]) -> None:
        self._direct = direct_supertypes
        self._known: Set[str] = set(direct_supertypes)
        for supers in direct_supertypes.values():
            self._known.update(supers)
        self._known.add(OBJECT_CLASS)
        self._closure: Dict[str, FrozenSet[str]] = {}

    @classmethod
    def from_dict(cls, class_hierarchy: Dict[str, Any]) -> "ClassHierarchy":
        classes = class_hierarchy.get("classes") if isinstance(class_hierarchy, dict) else None
        if not isinstance(classes, dict):
            raise ValueError("Class hierarchy missing classes")
        direct: Dict[str, Set[str]] = {}
        for class_name, info in classes.items():
            supers: Set[str] = set()
            if isinstance(info, dict):
                supers.update(str(t) for t in info.get("supertypes", []) or [] if t)
                supers.update(str(t) for t in info.get("interfaces", []) or [] if t)
                if info.get("superclass"):
                    supers.add(str(info["superclass"]))
            elif isinstance(info, list):
                supers.update(str(t) for t in info if t)
            supers.discard(str(class_name))
            direct[str(class_name)] = supers
        return cls(direct)

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._known

    def __len__(self) -> int:
        return len(self._direct)

    def resolve(self, class_name: str) -> Optional[str]:
        return class_name if class_name in self._known else None

    def can_store_type(self, child: str, parent: str) -> bool:
        if child == parent or parent == OBJECT_CLASS:
            return True
        return parent in self.supertypes(child)

    def supertypes(self, class_name: str) -> FrozenSet[str]:
        cached = self._closure.get(class_name)
        if cached is not None:
            return cached
        seen: Set[str] = set()
        stack = list(self._direct.get(class_name, ()))
        while stack:
            current = stack.pop()
            if current in seen or current == class_name:
                continue
            seen.add(current)
            stack.extend(self._direct.get(current, ()))
        closure = frozenset(seen)
        self._closure[class_name] = closure
        return closure


def load_class_hierarchy(path: str | Path) -> Optional[ClassHierarchy]:
    """Load ``class_hierarchy.json``; None when the artifact is missing or malformed."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        return ClassHierarchy.from_dict(data)
    except (OSError, json.JSONDecodeError, ValueError) as exc:
        logger.warning(f"Class hierarchy unavailable at {path}: {exc}")
        return None
