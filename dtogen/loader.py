"""Load and parse the OpenAPI spec.

Reads a local JSON or YAML file (or fetches one over HTTP) and validates it
into the typed document tree.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import httpx
import yaml
from pydantic import ValidationError

from .document import SUPPORTED_METHODS, ApiDocument
from .errors import SpecLoadError

_REMOTE_PREFIXES = ("http://", "https://")

PARAMETER_REF_PREFIX = "#/components/parameters/"
REQUEST_BODY_REF_PREFIX = "#/components/requestBodies/"


def _fetch(url: str, client: httpx.Client | None) -> str:
    try:
        if client is None:
            response = httpx.get(url, follow_redirects=True, timeout=30.0)
        else:
            response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise SpecLoadError(f"could not fetch spec from {url}: {exc}") from exc
    return response.text


def load_spec(source: str | Path, client: httpx.Client | None = None) -> dict[str, Any]:
    """Load the OpenAPI spec from disk or a URL."""
    source_str = str(source)
    try:
        if source_str.startswith(_REMOTE_PREFIXES):
            text = _fetch(source_str, client)
            is_json = source_str.split("?")[0].endswith(".json")
        else:
            spec_file = Path(source)
            text = spec_file.read_text(encoding="utf-8")
            is_json = spec_file.suffix == ".json"
        raw = json.loads(text) if is_json else yaml.safe_load(text)
    except OSError as exc:
        raise SpecLoadError(f"could not read spec {source_str}: {exc}") from exc
    except (ValueError, yaml.YAMLError) as exc:
        raise SpecLoadError(f"could not parse spec {source_str}: {exc}") from exc

    if not isinstance(raw, dict):
        raise SpecLoadError(f"spec {source_str} is not a mapping at the top level")
    return raw


def resolve_ref(spec: dict[str, Any], ref: str) -> dict[str, Any]:
    """Resolve a $ref pointer in the spec."""
    parts = ref.lstrip("#/").split("/")
    node = spec
    for part in parts:
        node = node[part]
    return node


def _inline(spec: dict[str, Any], node: Any, prefix: str) -> Any:
    if not isinstance(node, dict) or not str(node.get("$ref", "")).startswith(prefix):
        return node
    ref = node["$ref"]
    try:
        target = resolve_ref(spec, ref)
    except (KeyError, TypeError) as exc:
        raise SpecLoadError(f"unresolved reference {ref}") from exc
    if not isinstance(target, dict):
        raise SpecLoadError(f"reference {ref} does not point to a mapping")
    return target


def inline_component_refs(raw: dict[str, Any]) -> dict[str, Any]:
    """Replace parameter and request body references with their targets.

    Only operation-level entries are rewritten; schema references stay as
    they are. The input mapping is left untouched.
    """
    spec = copy.deepcopy(raw)
    paths = spec.get("paths")
    if not isinstance(paths, dict):
        return spec
    for path_item in paths.values():
        if not isinstance(path_item, dict):
            continue
        for method in SUPPORTED_METHODS:
            operation = path_item.get(method)
            if not isinstance(operation, dict):
                continue
            if isinstance(operation.get("parameters"), list):
                operation["parameters"] = [
                    _inline(spec, p, PARAMETER_REF_PREFIX) for p in operation["parameters"]
                ]
            if "requestBody" in operation:
                operation["requestBody"] = _inline(spec, operation["requestBody"], REQUEST_BODY_REF_PREFIX)
    return spec


def parse_document(raw: dict[str, Any]) -> ApiDocument:
    """Validate a raw spec mapping into an ApiDocument.

    Parameter and request body references are inlined first.
    """
    spec = inline_component_refs(raw)
    try:
        return ApiDocument.model_validate(spec)
    except ValidationError as exc:
        raise SpecLoadError(f"spec does not match the expected structure: {exc}") from exc


def load_document(source: str | Path, client: httpx.Client | None = None) -> ApiDocument:
    return parse_document(load_spec(source, client))
