from __future__ import annotations

from apk_lifecycle.hierarchy.class_hierarchy import ClassHierarchy, load_class_hierarchy
from apk_lifecycle.hierarchy.oracle import SubtypeOracle, TypeResolver

__all__ = [
    "ClassHierarchy",
    "SubtypeOracle",
    "TypeResolver",
    "load_class_hierarchy",
]
