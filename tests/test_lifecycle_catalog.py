from __future__ import annotations

import json
from pathlib import Path

import pytest

from apk_lifecycle.data.lifecycle_constants import ACTIVITY_LIFECYCLE_METHODS, LIFECYCLE_ROLES
from apk_lifecycle.knowledge.lifecycle_catalog import LifecycleCatalog
from apk_lifecycle.models.component import ComponentRole


def test_default_catalog_covers_lifecycle_roles() -> None:
    catalog = LifecycleCatalog.default()
    assert set(catalog.tables) == set(LIFECYCLE_ROLES)
    assert len(LIFECYCLE_ROLES) == 8
    assert catalog.methods_for(ComponentRole.ACTIVITY) == ACTIVITY_LIFECYCLE_METHODS
    assert catalog.methods_for(ComponentRole.APPLICATION) == frozenset()
    assert catalog.methods_for(ComponentRole.PLAIN) == frozenset()


def test_contains_normalizes_whitespace() -> None:
    catalog = LifecycleCatalog.default()
    assert catalog.contains(ComponentRole.BROADCAST_RECEIVER, "void onReceive(android.content.Context, android.content.Intent)")
    assert not catalog.contains(ComponentRole.SERVICE, "void onReceive(android.content.Context,android.content.Intent)")


def test_tables_are_read_only() -> None:
    catalog = LifecycleCatalog.default()
    with pytest.raises(TypeError):
        catalog.tables[ComponentRole.PLAIN] = frozenset({"void run()"})  # type: ignore[index]


def test_load_json_replaces_defaults(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({
        "version": "test",
        "roles": {"BroadcastReceiver": ["void onReceive(android.content.Context, android.content.Intent)"]},
    }), encoding="utf-8")
    catalog = LifecycleCatalog.load(path)
    assert catalog.version == "test"
    assert set(catalog.tables) == {ComponentRole.BROADCAST_RECEIVER}
    assert catalog.contains(ComponentRole.BROADCAST_RECEIVER, "void onReceive(android.content.Context,android.content.Intent)")


def test_load_yaml_extends_defaults(tmp_path: Path) -> None:
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "\n".join([
            "version: ext",
            "extend_defaults: true",
            "roles:",
            "  Activity:",
            "    - void onNewIntent(android.content.Intent)",
        ]),
        encoding="utf-8",
    )
    catalog = LifecycleCatalog.load(path)
    assert catalog.contains(ComponentRole.ACTIVITY, "void onNewIntent(android.content.Intent)")
    assert catalog.contains(ComponentRole.ACTIVITY, "void onResume()")
    assert catalog.contains(ComponentRole.SERVICE, "void onCreate()")


@pytest.mark.parametrize(
    "payload",
    [
        {"roles": {"Activity": ["void onStart()"]}},
        {"version": "x"},
        {"version": "x", "roles": {"Widget": ["void onStart()"]}},
        {"version": "x", "roles": {"Plain": ["void run()"]}},
        {"version": "x", "roles": {"Application": ["void onCreate()"]}},
        {"version": "x", "roles": {"Activity": "void onStart()"}},
    ],
)
def test_load_rejects_malformed_catalogs(tmp_path: Path, payload: dict) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ValueError):
        LifecycleCatalog.load(path)


def test_role_lookup_accepts_member_names() -> None:
    assert ComponentRole.from_name("GCM_LISTENER_SERVICE") is ComponentRole.GCM_LISTENER_SERVICE
    assert ComponentRole.from_name("ContentProvider") is ComponentRole.CONTENT_PROVIDER
