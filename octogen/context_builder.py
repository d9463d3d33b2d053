"""Group endpoints into resource modules.

Assigns each path to a resource by position:
  /orgs/{org}/hooks                 -> hooks     (third segment)
  /repos/{owner}/{repo}/releases    -> releases  (fourth segment)
  /reactions/{reaction_id}          -> reactions (first segment)

Paths whose resource is not supported are dropped silently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .config import GeneratorConfig
from .inflector import capitalize
from .ir import MethodDef
from .loader import get_paths
from .schema_parser import Endpoint, parse_endpoint
from .synthesizer import SynthesizedEndpoint, synthesize

logger = logging.getLogger(__name__)

SUPPORTED_RESOURCES = (
    "deployments",
    "pages",
    "hooks",
    "releases",
    "labels",
    "milestones",
    "issues",
    "reactions",
)

# Position of the resource segment, keyed by the top-level segment
_RESOURCE_POSITIONS: dict[str, int] = {
    "orgs": 2,
    "repos": 3,
}

_METHODS = ("get", "post", "put", "delete", "patch")


@dataclass(frozen=True)
class ResourceModule:
    resource: str
    endpoints: tuple[SynthesizedEndpoint, ...]
    documentation_url: str

    @property
    def title(self) -> str:
        return capitalize(self.resource)

    @property
    def methods(self) -> list[MethodDef]:
        return [m for endpoint in self.endpoints for m in endpoint.methods]


def resource_for_path(path: str) -> str | None:
    """Map an API path to its resource, or None when unsupported."""
    segments = [s for s in path.split("/") if s]
    if not segments:
        return None
    position = _RESOURCE_POSITIONS.get(segments[0], 0)
    resource = segments[position] if position < len(segments) else None
    return resource if resource in SUPPORTED_RESOURCES else None


def group_endpoints(spec: dict[str, Any]) -> dict[str, list[Endpoint]]:
    """Collect endpoints per supported resource, in document order."""
    grouped: dict[str, list[Endpoint]] = {}
    for path, path_item in get_paths(spec).items():
        resource = resource_for_path(path)
        if resource is None:
            logger.debug("Skipping unsupported path %s", path)
            continue
        for method in _METHODS:
            if method not in path_item:
                continue
            endpoint = parse_endpoint(spec, path, method, path_item[method], path_item)
            grouped.setdefault(resource, []).append(endpoint)
    return grouped


def documentation_url(endpoint: Endpoint) -> str:
    """Module-level docs link: the endpoint's docs URL without its fragment."""
    return endpoint.docs_url.split("#", 1)[0]


def build_module(
    resource: str,
    endpoints: list[Endpoint],
    config: GeneratorConfig | None = None,
) -> ResourceModule:
    """Synthesize and order all endpoints of one resource."""
    config = config or GeneratorConfig()
    synthesized = [
        synthesize(endpoint, config.parameterizer, config.primary_tag, config.org_tag)
        for endpoint in endpoints
    ]
    ordered = sorted(synthesized, key=lambda s: s.priority)
    logger.info("%s: %d endpoints", resource, len(ordered))
    return ResourceModule(
        resource=resource,
        endpoints=tuple(ordered),
        documentation_url=documentation_url(endpoints[0]),
    )


def build_modules(spec: dict[str, Any], config: GeneratorConfig | None = None) -> list[ResourceModule]:
    """Build one ResourceModule per supported resource that has endpoints."""
    config = config or GeneratorConfig()
    return [
        build_module(resource, endpoints, config)
        for resource, endpoints in group_endpoints(spec).items()
        if endpoints
    ]
