from __future__ import annotations

import json
import logging
from collections import deque
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set

from apk_lifecycle.analyzers.entrypoint_oracle import EntryPointOracle
from apk_lifecycle.models.component import ComponentRole, MethodRef
from apk_lifecycle.telemetry import span

logger = logging.getLogger(__name__)


def discover_entrypoints(
    callgraph: Dict[str, Any],
    oracle: EntryPointOracle,
    entrypoints_override: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """
    Find lifecycle entry points among the call graph's methods.

    Each node's declaring class is classified through the oracle's classifier;
    nodes whose subsignature is in the role's lifecycle table become roots.
    When the caller already has a root list (e.g. from the Soot dummy main),
    ``entrypoints_override`` is filtered through the same test instead.

    Returns the roots, the non-plain component map, and the methods reachable
    from the roots over the call graph's edges.
    """
    nodes = callgraph.get("nodes", []) or []
    edges = callgraph.get("edges", []) or []
    with span("phase0.entrypoints", node_count=len(nodes), edge_count=len(edges)):
        if entrypoints_override is not None:
            candidates = list(entrypoints_override)
            source = "override"
        else:
            candidates = [node.get("method", "") for node in nodes if isinstance(node, dict)]
            source = "callgraph"

        entrypoints, unparsed = _select_entrypoints(candidates, oracle)
        classes = _declaring_classes(nodes)
        classes.update(MethodRef.from_signature(sig).declaring_class for sig in entrypoints)
        components = {
            class_name: role.value
            for class_name, role in sorted(oracle.classifier.classify_classes(sorted(classes)).items())
            if role is not ComponentRole.PLAIN
        }
        reachable = _reachable_from(_build_adjacency(edges), entrypoints)

    if unparsed:
        logger.debug(f"Skipped {unparsed} call graph methods with unparseable signatures")
    return {
        "entrypoints": entrypoints,
        "components": components,
        "reachable_methods": sorted(reachable),
        "callgraph_summary": {
            "node_count": len(nodes),
            "edge_count": len(edges),
            "entrypoint_count": len(entrypoints),
            "reachable_count": len(reachable),
            "unparsed_methods": unparsed,
            "entrypoints_source": source,
        },
    }


def filter_entrypoints(signatures: Iterable[str], oracle: EntryPointOracle) -> List[str]:
    entrypoints, _ = _select_entrypoints(signatures, oracle)
    return entrypoints


def load_callgraph(path: str | Path) -> Dict[str, Any]:
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def _select_entrypoints(signatures: Iterable[str], oracle: EntryPointOracle) -> tuple[List[str], int]:
    selected: Set[str] = set()
    unparsed = 0
    for raw in signatures:
        if not raw:
            continue
        try:
            method = MethodRef.from_signature(raw)
        except ValueError:
            unparsed += 1
            continue
        if oracle.is_entry_point_method(method):
            selected.add(method.signature)
    return sorted(selected), unparsed


def _declaring_classes(nodes: Iterable[Dict[str, Any]]) -> Set[str]:
    classes: Set[str] = set()
    for node in nodes:
        if not isinstance(node, dict):
            continue
        class_name = node.get("class")
        if not class_name:
            try:
                class_name = MethodRef.from_signature(node.get("method", "")).declaring_class
            except ValueError:
                continue
        classes.add(str(class_name))
    return classes


def _build_adjacency(edges: Iterable[Dict[str, Any]]) -> Dict[str, List[str]]:
    adjacency: Dict[str, List[str]] = {}
    for edge in edges:
        if not isinstance(edge, dict):
            continue
        caller = _canonical_signature(edge.get("caller", ""))
        callee = _canonical_signature(edge.get("callee", ""))
        if not caller or not callee:
            continue
        adjacency.setdefault(caller, []).append(callee)
    return adjacency


def _canonical_signature(raw: str) -> Optional[str]:
    # Same form as the roots, so "(int, int)" and "(int,int)" share one key.
    if not raw:
        return None
    try:
        return MethodRef.from_signature(raw).signature
    except ValueError:
        return None


def _reachable_from(adjacency: Dict[str, List[str]], entrypoints: List[str]) -> Set[str]:
    seen: Set[str] = set(entrypoints)
    queue = deque(entrypoints)
    while queue:
        current = queue.popleft()
        for callee in adjacency.get(current, []):
            if callee in seen:
                continue
            seen.add(callee)
            queue.append(callee)
    return seen
