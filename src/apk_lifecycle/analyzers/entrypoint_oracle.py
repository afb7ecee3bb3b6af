from __future__ import annotations

from typing import Optional

from apk_lifecycle.analyzers.component_classifier import ComponentClassifier
from apk_lifecycle.knowledge.lifecycle_catalog import LifecycleCatalog
from apk_lifecycle.models.component import ComponentRole, MethodRef


class EntryPointOracle:
    """Decides whether a method is a lifecycle callback the framework invokes.

    A method is an entry point when its declaring class has a component role
    with a lifecycle table and the method's subsignature is in that table.
    ``Application`` and ``Plain`` classes never contribute entry points.
    """

    def __init__(self, classifier: ComponentClassifier, catalog: Optional[LifecycleCatalog] = None) -> None:
        self.classifier = classifier
        self.catalog = catalog or LifecycleCatalog.default()

    def is_entry_point_method(self, method: Optional[MethodRef]) -> bool:
        if method is None:
            raise ValueError("Given method is None")
        role = self.classifier.get_component_type(method.declaring_class)
        if role in (ComponentRole.APPLICATION, ComponentRole.PLAIN):
            return False
        return self.catalog.contains(role, method.subsignature)

    def is_entry_point_signature(self, signature: str) -> bool:
        """Same as ``is_entry_point_method`` for a Soot or DEX signature string."""
        return self.is_entry_point_method(MethodRef.from_signature(signature))
