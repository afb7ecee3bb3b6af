from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

PRIMITIVE_MAP = {
    "V": "void",
    "Z": "boolean",
    "B": "byte",
    "S": "short",
    "C": "char",
    "I": "int",
    "J": "long",
    "F": "float",
    "D": "double",
}

DEX_METHOD_RE = re.compile(r"^(L[^;]+;)->([^\(]+)(\(.*\).*)$")
SOOT_SIG_RE = re.compile(r"^<([^:]+):\s+([^\s]+)\s+([^(\s]+)\((.*)\)>$")
SUBSIG_RE = re.compile(r"^([^\s]+)\s+([^(\s]+)\s*\((.*)\)$")


def dex_descriptor_to_java(desc: str) -> str:
    array_dim = 0
    while desc.startswith("["):
        array_dim += 1
        desc = desc[1:]
    if desc in PRIMITIVE_MAP:
        base = PRIMITIVE_MAP[desc]
    elif desc.startswith("L") and desc.endswith(";"):
        base = desc[1:-1].replace("/", ".")
    else:
        base = desc
    return base + "[]" * array_dim


def parse_method_descriptor(desc: str) -> Tuple[List[str], str]:
    if not desc.startswith("(") or ")" not in desc:
        raise ValueError(f"Invalid descriptor: {desc}")
    args_desc, ret_desc = desc.split(")", 1)
    args_desc = args_desc[1:]
    args = []
    i = 0
    while i < len(args_desc):
        start = i
        while i < len(args_desc) and args_desc[i] == "[":
            i += 1
        if i >= len(args_desc):
            raise ValueError(f"Invalid descriptor: {desc}")
        if args_desc[i] == "L":
            end = args_desc.find(";", i)
            if end == -1:
                raise ValueError(f"Invalid descriptor: {desc}")
            i = end + 1
        else:
            i += 1
        args.append(dex_descriptor_to_java(args_desc[start:i]))
    if not ret_desc:
        raise ValueError(f"Invalid descriptor: {desc}")
    ret = dex_descriptor_to_java(ret_desc)
    return args, ret


def dex_method_to_soot(class_desc: str, method_name: str, proto_desc: str) -> str:
    args, ret = parse_method_descriptor(proto_desc)
    class_name = dex_descriptor_to_java(class_desc)
    return f"<{class_name}: {build_subsignature(method_name, args, ret)}>"


def normalize_signature(sig: str) -> str:
    sig = sig.strip()
    if sig.startswith("<") and sig.endswith(">"):
        return sig
    match = DEX_METHOD_RE.match(sig)
    if match:
        class_desc, method_name, proto_desc = match.groups()
        return dex_method_to_soot(class_desc, method_name, proto_desc)
    return sig


def parse_soot_signature(signature: str) -> Optional[Tuple[str, str, str, List[str]]]:
    """Split a Soot method signature into (class, return type, name, params)."""
    match = SOOT_SIG_RE.match(normalize_signature(signature))
    if not match:
        return None
    class_name, ret_type, method_name, params = match.groups()
    return class_name.strip(), ret_type.strip(), method_name.strip(), _split_params(params)


def build_subsignature(method_name: str, param_types: Sequence[str], return_type: str) -> str:
    """Canonical Soot subsignature, e.g. ``void onReceive(android.content.Context,android.content.Intent)``."""
    params = ",".join(p.strip() for p in param_types)
    return f"{return_type.strip()} {method_name.strip()}({params})"


def normalize_subsignature(subsig: str) -> str:
    """Collapse the whitespace variations people write in hand-maintained tables."""
    match = SUBSIG_RE.match(subsig.strip())
    if not match:
        return subsig.strip()
    ret_type, method_name, params = match.groups()
    return build_subsignature(method_name, _split_params(params), ret_type)


def _split_params(params: str) -> List[str]:
    params = params.strip()
    if not params:
        return []
    return [p.strip() for p in params.split(",") if p.strip()]
