"""Load the GitHub OpenAPI description.

Reads the JSON document and resolves $ref pointers inside it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

SPEC_PATH = Path("spec") / "api.github.com.json"


def load_spec(path: Path | str | None = None) -> dict[str, Any]:
    """Load the OpenAPI spec from disk."""
    spec_file = Path(path) if path else SPEC_PATH
    with open(spec_file, encoding="utf-8") as f:
        return json.load(f)


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract the paths object of the document."""
    return spec.get("paths", {})


def resolve_ref(spec: dict[str, Any], ref: str) -> dict[str, Any]:
    """Resolve a local $ref pointer, e.g. #/components/parameters/owner."""
    parts = ref.lstrip("#/").split("/")
    node = spec
    for part in parts:
        node = node[part.replace("~1", "/").replace("~0", "~")]
    return node


def resolve(spec: dict[str, Any], node: dict[str, Any]) -> dict[str, Any]:
    """Follow $ref chains until a concrete node is reached."""
    while isinstance(node, dict) and "$ref" in node:
        node = resolve_ref(spec, node["$ref"])
    return node
