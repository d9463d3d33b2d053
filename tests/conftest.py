"""Shared fixtures for octogen tests.

The fixture document under tests/fixtures/ is a trimmed GitHub OpenAPI
description covering every resource module and the naming edge cases.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from octogen.loader import load_spec
from octogen.schema_parser import Endpoint, Parameter, Response, parse_endpoint

FIXTURE_SPEC = Path(__file__).parent / "fixtures" / "openapi.json"

REPO = Parameter("repo", "string", required=True, location="path")
OWNER = Parameter("owner", "string", required=True, location="path")


@pytest.fixture(scope="session")
def spec() -> dict[str, Any]:
    return load_spec(FIXTURE_SPEC)


@pytest.fixture(scope="session")
def endpoint_for(spec):
    """Return a callable that parses the endpoint at (method, path)."""
    def _endpoint(method: str, path: str) -> Endpoint:
        path_item = spec["paths"][path]
        return parse_endpoint(spec, path, method, path_item[method], path_item)
    return _endpoint


def json_response(status: str = "200", schema_type: str = "object") -> Response:
    return Response(status, {"application/json": {"schema": {"type": schema_type}}})


def make_endpoint(**overrides: Any) -> Endpoint:
    """Build an Endpoint with sensible defaults for synthesizer tests."""
    fields: dict[str, Any] = {
        "method": "get",
        "path": "/repos/{owner}/{repo}/issues",
        "operation_id": "issues/list-for-repo",
        "summary": "List repository issues",
        "tags": ("issues",),
        "parameters": (OWNER, REPO),
        "responses": (json_response("200", "array"),),
        "docs_url": "https://docs.github.com/rest/issues/issues#list-repository-issues",
    }
    fields.update(overrides)
    return Endpoint(**fields)
