"""Read-only view of GitHub OpenAPI operations.

Turns one operation dict into an Endpoint:
- path-level and operation-level parameters (path-level first, operation wins)
- $ref resolution for parameters, request bodies, properties and responses
- request body properties for application/json
- x-github preview flags
- externalDocs URL
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .loader import resolve

JSON = "application/json"


@dataclass(frozen=True)
class Parameter:
    name: str
    type: str
    required: bool = False
    # A body property that is itself an object with mandatory subkeys
    required_keys: tuple[str, ...] | None = None
    enum: tuple[Any, ...] | None = None
    default: Any = None
    description: str = ""
    location: str = "query"


@dataclass(frozen=True)
class Response:
    status: str
    content: dict[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.status.startswith("2")

    def schema_type(self, content_type: str = JSON) -> str | None:
        """Return the declared type of the schema for *content_type*."""
        return self.content[content_type].get("schema", {}).get("type")


@dataclass(frozen=True)
class Endpoint:
    """One HTTP operation of the API description."""

    method: str
    path: str
    operation_id: str
    summary: str = ""
    tags: tuple[str, ...] = ()
    parameters: tuple[Parameter, ...] = ()
    # None when the operation declares no JSON request body
    body_properties: tuple[Parameter, ...] | None = None
    responses: tuple[Response, ...] = ()
    previews: tuple[dict[str, Any], ...] = ()
    docs_url: str | None = None

    @property
    def verb(self) -> str:
        return self.method.upper()

    @property
    def statuses(self) -> set[str]:
        return {r.status for r in self.responses}

    @property
    def requires_preview(self) -> bool:
        return any(p.get("required") for p in self.previews)

    def has_parameter(self, name: str) -> bool:
        return any(p.name == name for p in self.parameters)


def _schema_type(schema: dict[str, Any]) -> str:
    """Return the primary JSON type name of a schema."""
    schema_type = schema.get("type")
    if isinstance(schema_type, list):
        schema_type = next((t for t in schema_type if t != "null"), None)
    return schema_type or "object"


def _enum(schema: dict[str, Any]) -> tuple[Any, ...] | None:
    values = schema.get("enum")
    if values is None:
        return None
    return tuple(v for v in values if v is not None)


def parse_parameter(spec: dict[str, Any], raw: dict[str, Any]) -> Parameter:
    """Build a Parameter from a path/query/header parameter object."""
    raw = resolve(spec, raw)
    schema = resolve(spec, raw.get("schema", {}))
    return Parameter(
        name=raw["name"],
        type=_schema_type(schema),
        required=bool(raw.get("required", False)),
        enum=_enum(schema),
        default=schema.get("default"),
        description=raw.get("description") or "",
        location=raw.get("in", "query"),
    )


def parse_body_properties(
    spec: dict[str, Any],
    request_body: dict[str, Any] | None,
) -> tuple[Parameter, ...] | None:
    """Flatten the JSON request body schema into body Parameters."""
    if not request_body:
        return None
    request_body = resolve(spec, request_body)
    json_content = request_body.get("content", {}).get(JSON)
    if json_content is None:
        return ()

    schema = resolve(spec, json_content.get("schema", {}))
    required_fields = set(schema.get("required", []))
    params = []
    for prop_name, prop_schema in schema.get("properties", {}).items():
        prop_schema = resolve(spec, prop_schema)
        subkeys = prop_schema.get("required")
        params.append(Parameter(
            name=prop_name,
            type=_schema_type(prop_schema),
            required=prop_name in required_fields,
            required_keys=tuple(subkeys) if isinstance(subkeys, list) and subkeys else None,
            enum=_enum(prop_schema),
            default=prop_schema.get("default"),
            description=prop_schema.get("description") or "",
            location="body",
        ))
    return tuple(params)


def parse_responses(spec: dict[str, Any], responses: dict[str, Any]) -> tuple[Response, ...]:
    """Keep responses in declaration order, with resolved content schemas."""
    parsed = []
    for status, raw in responses.items():
        raw = resolve(spec, raw)
        content = {
            content_type: {**media, "schema": resolve(spec, media.get("schema", {}))}
            for content_type, media in (raw.get("content") or {}).items()
        }
        parsed.append(Response(status=str(status), content=content))
    return tuple(parsed)


def parse_endpoint(
    spec: dict[str, Any],
    path: str,
    method: str,
    operation: dict[str, Any],
    path_item: dict[str, Any] | None = None,
) -> Endpoint:
    """Build an Endpoint from one operation of a path item."""
    merged: dict[tuple[str, str], Parameter] = {}
    for raw in [*(path_item or {}).get("parameters", []), *operation.get("parameters", [])]:
        param = parse_parameter(spec, raw)
        merged[(param.name, param.location)] = param

    x_github = operation.get("x-github") or {}
    return Endpoint(
        method=method.lower(),
        path=path,
        operation_id=operation.get("operationId", ""),
        summary=operation.get("summary", ""),
        tags=tuple(operation.get("tags", [])),
        parameters=tuple(merged.values()),
        body_properties=parse_body_properties(spec, operation.get("requestBody")),
        responses=parse_responses(spec, operation.get("responses", {})),
        previews=tuple(x_github.get("previews", [])),
        docs_url=(operation.get("externalDocs") or {}).get("url"),
    )
