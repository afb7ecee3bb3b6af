"""Capabilities the classifier consumes from the surrounding analysis.

Both are usually backed by the same object (see ``ClassHierarchy``), but
they are kept apart so tests can substitute either one.
"""
from __future__ import annotations

from typing import Optional, Protocol

from apk_lifecycle.models.component import ClassHandle


class SubtypeOracle(Protocol):
    def can_store_type(self, child: ClassHandle, parent: ClassHandle) -> bool:
        """True if a value of ``child`` can be stored where ``parent`` is expected."""
        ...


class TypeResolver(Protocol):
    def resolve(self, class_name: str) -> Optional[ClassHandle]:
        """Handle for ``class_name``, or None if the hierarchy does not contain it."""
        ...
