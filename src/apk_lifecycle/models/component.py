"""Component roles and method references used by the lifecycle analysis.

A class in the analysed APK plays exactly one ``ComponentRole``. Roles are
assigned by the hierarchy classifier; ``Plain`` is the fallback for classes
that do not derive from any recognised framework base type.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Tuple

from apk_lifecycle.utils.signature_normalize import (
    build_subsignature,
    parse_soot_signature,
)

# Opaque class identity. The bundled hierarchy adapter uses the fully
# qualified class name; any stable hashable value works.
ClassHandle = Hashable


class ComponentRole(str, Enum):
    """Android component roles, in the vocabulary of the entry point creator."""

    APPLICATION = "Application"
    ACTIVITY = "Activity"  # UI screen; MapActivity subclasses collapse here
    SERVICE = "Service"
    FRAGMENT = "Fragment"
    BROADCAST_RECEIVER = "BroadcastReceiver"
    CONTENT_PROVIDER = "ContentProvider"
    GCM_BASE_INTENT_SERVICE = "GCMBaseIntentService"
    GCM_LISTENER_SERVICE = "GCMListenerService"
    SERVICE_CONNECTION = "ServiceConnection"
    PLAIN = "Plain"

    @classmethod
    def from_name(cls, name: str) -> "ComponentRole":
        for role in cls:
            if name in (role.value, role.name):
                return role
        raise ValueError(f"Unknown component role: {name}")


@dataclass(frozen=True)
class MethodRef:
    """A method as seen by the analysis: declaring class plus its signature parts.

    Attributes:
        declaring_class: Handle of the class that declares the method.
        name: Method name (``<init>`` for constructors).
        param_types: Java type names of the parameters, in order.
        return_type: Java type name of the return value.
    """

    declaring_class: ClassHandle
    name: str
    param_types: Tuple[str, ...] = ()
    return_type: str = "void"

    @property
    def subsignature(self) -> str:
        return build_subsignature(self.name, self.param_types, self.return_type)

    @property
    def signature(self) -> str:
        return f"<{self.declaring_class}: {self.subsignature}>"

    @classmethod
    def from_signature(cls, signature: str) -> "MethodRef":
        """Build a reference from a Soot (``<cls: ret name(args)>``) or DEX signature."""
        parts = parse_soot_signature(signature)
        if not parts:
            raise ValueError(f"Unparseable method signature: {signature}")
        class_name, ret_type, method_name, params = parts
        return cls(
            declaring_class=class_name,
            name=method_name,
            param_types=tuple(params),
            return_type=ret_type,
        )
