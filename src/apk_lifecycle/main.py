from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from apk_lifecycle.analyzers.component_classifier import ComponentClassifier
from apk_lifecycle.analyzers.entrypoint_oracle import EntryPointOracle
from apk_lifecycle.hierarchy import ClassHierarchy, load_class_hierarchy
from apk_lifecycle.knowledge.lifecycle_catalog import LifecycleCatalog
from apk_lifecycle.phase0 import discover_entrypoints, load_callgraph
from apk_lifecycle.telemetry import init_telemetry, set_run_context, span
from apk_lifecycle.utils.config import load_settings


def _apply_overrides(settings: Dict[str, Any], args: argparse.Namespace) -> None:
    if args.catalog:
        settings.setdefault("lifecycle", {})["catalog_path"] = args.catalog


def build_oracle(settings: Dict[str, Any], hierarchy: Optional[ClassHierarchy]) -> EntryPointOracle:
    catalog_path = settings.get("lifecycle", {}).get("catalog_path")
    catalog = LifecycleCatalog.load(catalog_path) if catalog_path else LifecycleCatalog.default()
    # Without a hierarchy nothing resolves and every class degrades to Plain.
    resolver = hierarchy if hierarchy is not None else ClassHierarchy({})
    return EntryPointOracle(ComponentClassifier(hierarchy, resolver), catalog)


def run(settings: Dict[str, Any], class_hierarchy_path: str, callgraph_path: str) -> Dict[str, Any]:
    set_run_context(Path(callgraph_path).stem)
    with span("lifecycle.run", class_hierarchy=class_hierarchy_path, callgraph=callgraph_path):
        hierarchy = load_class_hierarchy(class_hierarchy_path)
        oracle = build_oracle(settings, hierarchy)
        report = discover_entrypoints(load_callgraph(callgraph_path), oracle)
    report["hierarchy"] = {
        "available": hierarchy is not None,
        "class_count": len(hierarchy) if hierarchy is not None else 0,
        "catalog_version": oracle.catalog.version,
    }
    return report


def main() -> None:
    parser = argparse.ArgumentParser(description="Android lifecycle entry point discovery")
    parser.add_argument("--class-hierarchy", required=True, help="Path to class_hierarchy.json")
    parser.add_argument("--callgraph", required=True, help="Path to callgraph.json")
    parser.add_argument("--settings", default="config/settings.yaml", help="Settings YAML path")
    parser.add_argument("--catalog", help="Lifecycle catalog (JSON or YAML) replacing the built-in tables")
    parser.add_argument("--out", help="Write the report JSON here instead of stdout")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    settings = load_settings(args.settings)
    _apply_overrides(settings, args)
    init_telemetry(settings)

    report = run(settings, args.class_hierarchy, args.callgraph)
    payload = json.dumps(report, indent=2, sort_keys=True)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(payload, encoding="utf-8")
        summary = report["callgraph_summary"]
        print(f"{summary['entrypoint_count']} entry points written to {out_path}")
    else:
        print(payload)


if __name__ == "__main__":
    main()
