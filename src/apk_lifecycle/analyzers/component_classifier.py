"""Hierarchy-based component classification.

Each class is tested against the recognised framework base types in a fixed
precedence order; the first base type the class can be stored as decides its
role. Results are memoised per classifier instance for the lifetime of one
analysis run, since the hierarchy does not change once analysis starts.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from apk_lifecycle.data.lifecycle_constants import APPLICATION_CLASS, COMPONENT_BASE_TYPES
from apk_lifecycle.hierarchy.oracle import SubtypeOracle, TypeResolver
from apk_lifecycle.models.component import ClassHandle, ComponentRole

logger = logging.getLogger(__name__)


class ComponentClassifier:
    """Assigns a ``ComponentRole`` to classes of the analysed program.

    Args:
        oracle: Subtype query capability. None means no hierarchy could be
            built; every class then degrades to ``Plain``.
        resolver: Maps framework base type names to handles. Base types it
            cannot resolve are left out of the rule list.

    The cache is not synchronised. Populate it from one thread; concurrent
    readers are safe only once no further classes are being classified.
    """

    def __init__(self, oracle: Optional[SubtypeOracle], resolver: TypeResolver) -> None:
        self._oracle = oracle
        self._cache: Dict[ClassHandle, ComponentRole] = {}
        self._rules: List[Tuple[ComponentRole, ClassHandle]] = []
        for role, class_name in COMPONENT_BASE_TYPES:
            handle = resolver.resolve(class_name)
            if handle is None:
                logger.debug(f"Base type {class_name} not in hierarchy; {role.value} rule disabled")
                continue
            self._rules.append((role, handle))
        self._application = resolver.resolve(APPLICATION_CLASS)

    @property
    def degraded(self) -> bool:
        return self._oracle is None

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def get_component_type(self, clazz: ClassHandle) -> ComponentRole:
        cached = self._cache.get(clazz)
        if cached is not None:
            return cached

        role = ComponentRole.PLAIN
        if self._oracle is None:
            logger.warning(f"No class hierarchy, assuming {clazz} is a plain class")
        else:
            for candidate, base in self._rules:
                if self._oracle.can_store_type(clazz, base):
                    role = candidate
                    break

        self._cache[clazz] = role
        return role

    def is_application_class(self, clazz: ClassHandle) -> bool:
        if self._oracle is None or self._application is None:
            return False
        return self._oracle.can_store_type(clazz, self._application)

    def classify_classes(self, classes: Iterable[ClassHandle]) -> Dict[ClassHandle, ComponentRole]:
        return {clazz: self.get_component_type(clazz) for clazz in classes}
