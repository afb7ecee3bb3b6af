from __future__ import annotations

import pytest

from apk_lifecycle.analyzers.component_classifier import ComponentClassifier
from apk_lifecycle.analyzers.entrypoint_oracle import EntryPointOracle
from apk_lifecycle.data import lifecycle_constants as lc
from apk_lifecycle.hierarchy import ClassHierarchy
from apk_lifecycle.knowledge.lifecycle_catalog import LifecycleCatalog
from apk_lifecycle.models.component import ComponentRole, MethodRef


def _hierarchy() -> ClassHierarchy:
    return ClassHierarchy.from_dict({
        "classes": {
            "com.example.Foo": {"superclass": lc.ACTIVITY_CLASS},
            "com.example.App": {"superclass": lc.APPLICATION_CLASS},
            "com.example.Sync": {"superclass": lc.SERVICE_CLASS},
            "com.example.Util": {"superclass": "java.lang.Object"},
            "com.example.Conn": {"interfaces": [lc.SERVICE_CONNECTION_INTERFACE]},
            "com.example.Frag": {"superclass": lc.ANDROIDX_FRAGMENT_CLASS},
            lc.ACTIVITY_CLASS: {"superclass": "android.view.ContextThemeWrapper"},
            lc.APPLICATION_CLASS: {"superclass": "android.content.ContextWrapper"},
            lc.SERVICE_CLASS: {"superclass": "android.content.ContextWrapper"},
            lc.SERVICE_CONNECTION_INTERFACE: {},
            lc.ANDROIDX_FRAGMENT_CLASS: {},
        }
    })


def _oracle() -> EntryPointOracle:
    hierarchy = _hierarchy()
    return EntryPointOracle(ComponentClassifier(hierarchy, hierarchy))


def test_activity_on_create_is_entry_point() -> None:
    oracle = _oracle()
    method = MethodRef("com.example.Foo", "onCreate", ("android.os.Bundle",), "void")
    assert oracle.is_entry_point_method(method) is True


def test_method_outside_table_is_not_entry_point() -> None:
    oracle = _oracle()
    assert oracle.is_entry_point_method(MethodRef("com.example.Foo", "randomMethod")) is False


def test_none_method_raises() -> None:
    with pytest.raises(ValueError):
        _oracle().is_entry_point_method(None)


def test_plain_class_never_matches_other_role_tables() -> None:
    oracle = _oracle()
    for subsig in sorted(set().union(*lc.LIFECYCLE_METHODS_MAP.values())):
        sig = f"<com.example.Util: {subsig}>"
        assert oracle.is_entry_point_signature(sig) is False


def test_application_methods_are_not_entry_points() -> None:
    oracle = _oracle()
    assert oracle.is_entry_point_method(MethodRef("com.example.App", "onCreate")) is False
    assert oracle.is_entry_point_method(MethodRef("com.example.App", "onTerminate")) is False


def test_tables_are_role_specific() -> None:
    oracle = _oracle()
    # Service onCreate takes no Bundle; the Activity signature does not apply.
    assert oracle.is_entry_point_signature("<com.example.Sync: void onCreate()>") is True
    assert oracle.is_entry_point_signature("<com.example.Sync: void onCreate(android.os.Bundle)>") is False
    assert oracle.is_entry_point_signature("<com.example.Foo: void onCreate()>") is False


def test_interface_and_fragment_roles() -> None:
    oracle = _oracle()
    assert oracle.is_entry_point_signature(
        "<com.example.Conn: void onServiceConnected(android.content.ComponentName,android.os.IBinder)>"
    )
    assert oracle.is_entry_point_signature(
        "<com.example.Frag: android.view.View onCreateView(android.view.LayoutInflater,android.view.ViewGroup,android.os.Bundle)>"
    )


def test_dex_signature_is_accepted() -> None:
    oracle = _oracle()
    assert oracle.is_entry_point_signature("Lcom/example/Foo;->onResume()V") is True


def test_unparseable_signature_raises() -> None:
    with pytest.raises(ValueError):
        _oracle().is_entry_point_signature("not a signature")


def test_custom_catalog_replaces_tables() -> None:
    hierarchy = _hierarchy()
    catalog = LifecycleCatalog("test", {ComponentRole.ACTIVITY: ["void onNewIntent(android.content.Intent)"]})
    oracle = EntryPointOracle(ComponentClassifier(hierarchy, hierarchy), catalog)
    assert oracle.is_entry_point_method(MethodRef("com.example.Foo", "onResume")) is False
    assert oracle.is_entry_point_signature("<com.example.Foo: void onNewIntent(android.content.Intent)>") is True


def test_degraded_hierarchy_yields_no_entry_points() -> None:
    oracle = EntryPointOracle(ComponentClassifier(None, _hierarchy()))
    method = MethodRef("com.example.Foo", "onCreate", ("android.os.Bundle",), "void")
    assert oracle.is_entry_point_method(method) is False
