"""Synthesize one client method from one endpoint.

For an Endpoint this derives the namespace, method name, required/optional
parameters, method body (as IR statements), YARD documentation, helper
methods for small enums, and the priority used to order methods in a module.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import cached_property
from typing import Callable

from . import naming
from .exceptions import SpecDefectError
from .inflector import capitalize, pluralize, singularize
from .ir import (
    BOOLEAN,
    PAGINATE,
    VERB,
    AssignOption,
    Dispatch,
    DocBlock,
    Interpolation,
    Literal,
    MediaTypeOverride,
    MethodDef,
    OwnerPath,
    ParamDoc,
    PathPart,
    PresetOption,
    RequireKeys,
    Statement,
)
from .naming import Rule, apply_rules
from .parameterizer import Parameterizer, positional
from .schema_parser import JSON, Endpoint, Parameter

logger = logging.getLogger(__name__)

VERB_PRIORITY = ("GET", "POST", "PUT", "PATCH", "DELETE")

NO_CONTENT = "204"

# Never part of the generated signature or options docs
IMPLICIT_REQUIRED = ("owner", "accept")
IMPLICIT_OPTIONAL = ("accept", "per_page", "page")

OWNER_PATHS: dict[str, OwnerPath] = {
    "repos/{owner}/{repo}": OwnerPath("Repository", "repo"),
    "orgs/{org}": OwnerPath("Organization", "org"),
}

_PATH_TOKENS = re.compile(r"(repos/\{owner\}/\{repo\}|orgs/\{org\}|\{[^}/]+\})")

PARAMETER_TYPES: dict[str, str] = {
    "repo": "[Integer, String, Repository, Hash]",
    "org": "[Integer, String]",
}

RESOURCE_TYPE = "[Sawyer::Resource]"
RESOURCE_LIST_TYPE = "[Array<Sawyer::Resource>]"
BOOLEAN_TYPE = "[Boolean]"

# Subkey constraints on a required map argument are enforced at call time
EMPTY_MAP = "{}"


def collapse_lists(description: str) -> str:
    """Inline a markdown bullet list of `code` items as a comma-joined list."""
    head, *items = description.split("\\*")
    inline = [item.split("`")[1] if item.count("`") >= 2 else item.strip() for item in items]
    return (head + ", ".join(inline)).replace("\n", "")


def _ends_with_parameter(param: Parameter) -> bool:
    words = param.description.split()
    return bool(words) and words[-1] == "parameter"


def _placeholder_description(param: Parameter, namespace: str) -> str:
    name_words = param.name.split("_")
    owner = name_words[0] if len(name_words) > 1 else namespace.split("_")[0]
    return f"The {name_words[-1]} of the {owner}"


PARAMETER_DESCRIPTION_RULES: list[Rule] = [
    (lambda p, ns: p.name == "repo", lambda p, ns: "A GitHub repository"),
    (lambda p, ns: p.name == "org", lambda p, ns: "A GitHub organization"),
    (
        lambda p, ns: p.name.endswith("_id"),
        lambda p, ns: f"The ID of the {p.name.replace('_id', '').replace('_', ' ')}",
    ),
    (lambda p, ns: _ends_with_parameter(p), _placeholder_description),
    (lambda p, ns: True, lambda p, ns: collapse_lists(p.description)),
]


def parameter_description(param: Parameter, namespace: str) -> str:
    return apply_rules(PARAMETER_DESCRIPTION_RULES, param, namespace)


def parameter_type(param: Parameter) -> str:
    return PARAMETER_TYPES.get(param.name) or f"[{capitalize(param.type)}]"


# POST endpoints that modify an existing resource instead of creating one
POST_RETURN_DESCRIPTIONS: dict[str, Callable[..., str]] = {
    "assignees": lambda s: f"The updated {singularize(s.endpoint.tags[0])}",
}


def _spaced(namespace: str) -> str:
    return namespace.replace("_", " ")


RETURN_DESCRIPTION_RULES: list[Rule] = [
    (lambda s: s.no_content, lambda s: "True on success, false otherwise"),
    (
        lambda s: s.verb == "GET" and "latest" in s.base_namespace,
        lambda s: f"The {_spaced(s.base_namespace)}",
    ),
    (
        lambda s: s.verb == "GET" and (not s.singular or s.paginated),
        lambda s: f"A list of {_spaced(s.base_namespace)}",
    ),
    (lambda s: s.verb == "GET", lambda s: f"A single {_spaced(s.base_namespace)}"),
    (
        lambda s: s.verb == "POST" and s.base_namespace in POST_RETURN_DESCRIPTIONS,
        lambda s: POST_RETURN_DESCRIPTIONS[s.base_namespace](s),
    ),
    (lambda s: s.verb == "POST", lambda s: f"The new {singularize(_spaced(s.base_namespace))}"),
    (lambda s: s.verb == "PATCH", lambda s: f"The updated {_spaced(singularize(s.base_namespace))}"),
    (
        lambda s: s.returns_array,
        lambda s: f"An array of the remaining {pluralize(s.base_namespace)}",
    ),
    (lambda s: True, lambda s: f"The updated {singularize(s.resource_tag)}"),
]


@dataclass(frozen=True)
class SynthesizedEndpoint:
    """Everything generated for one endpoint."""

    endpoint: Endpoint
    namespace: str
    method_name: str
    required: tuple[Parameter, ...]
    optional: tuple[Parameter, ...]
    method: MethodDef
    helpers: tuple[MethodDef, ...]
    priority: tuple[int, int, int, int]

    @property
    def methods(self) -> tuple[MethodDef, ...]:
        return (self.method, *self.helpers)


class EndpointSynthesizer:
    """Derives names, parameters, body and docs for a single endpoint."""

    def __init__(
        self,
        endpoint: Endpoint,
        parameterizer: Parameterizer = positional,
        primary_tag: str = "repos",
        org_tag: str = "orgs",
    ):
        self.endpoint = endpoint
        self.parameterizer = parameterizer
        self.primary_tag = primary_tag
        self.org_tag = org_tag

    # -- classification ----------------------------------------------------

    @property
    def verb(self) -> str:
        return self.endpoint.verb

    @property
    def resource_tag(self) -> str:
        return self.endpoint.operation_id.split("/")[0]

    @property
    def no_content(self) -> bool:
        return NO_CONTENT in self.endpoint.statuses

    @property
    def paginated(self) -> bool:
        return self.endpoint.has_parameter("per_page")

    @cached_property
    def first_success(self):
        return next((r for r in self.endpoint.responses if r.is_success), None)

    @cached_property
    def singular(self) -> bool:
        """False only when the first success response is a JSON array."""
        response = self.first_success
        if response is None or not response.content:
            return True
        if JSON not in response.content:
            raise SpecDefectError(
                self.endpoint.operation_id,
                f"response {response.status} has no {JSON} content",
            )
        return response.schema_type() != "array"

    @property
    def returns_array(self) -> bool:
        response = self.first_success
        if response is None or JSON not in response.content:
            raise SpecDefectError(self.endpoint.operation_id, "no JSON response schema to describe")
        return response.schema_type() == "array"

    # -- naming ------------------------------------------------------------

    @cached_property
    def base_namespace(self) -> str:
        return naming.derive_namespace(self.endpoint.operation_id, self.singular)

    @cached_property
    def namespace(self) -> str:
        return naming.qualify_namespace(self.base_namespace, self.endpoint.operation_id, self.org_tag)

    @cached_property
    def method_name(self) -> str:
        return naming.method_name(self.verb, self.namespace, self.endpoint.operation_id)

    @property
    def is_org(self) -> bool:
        return naming.is_org(self.endpoint.operation_id, self.org_tag)

    # -- parameters --------------------------------------------------------

    @cached_property
    def required(self) -> tuple[Parameter, ...]:
        params = [
            p for p in self.endpoint.parameters
            if p.required and p.name not in IMPLICIT_REQUIRED
        ]
        params += [p for p in self.endpoint.body_properties or () if p.required]
        # Map arguments defaulted to {} follow every plain required argument
        return tuple(
            [p for p in params if not p.required_keys] + [p for p in params if p.required_keys]
        )

    @cached_property
    def optional(self) -> tuple[Parameter, ...]:
        params = [
            p for p in self.endpoint.parameters
            if not p.required and p.name not in IMPLICIT_OPTIONAL
        ]
        params += [p for p in self.endpoint.body_properties or () if not p.required]
        return tuple(params)

    @cached_property
    def parameters(self) -> str:
        names = [p.name for p in self.required]
        defaults = {p.name: EMPTY_MAP for p in self.required if p.required_keys}
        return self.parameterizer(names, defaults)

    # -- body --------------------------------------------------------------

    @property
    def preview_type(self) -> str:
        last_segment = self.base_namespace.split("_")[-1]
        if self.resource_tag == pluralize(last_segment):
            return self.resource_tag
        return self.base_namespace

    def option_overrides(self, skip: str | None = None) -> list[Statement]:
        """Statements that copy required body arguments into the options."""
        statements: list[Statement] = []
        for param in self.endpoint.body_properties or ():
            if not param.required or param.name == skip:
                continue
            statements.append(AssignOption(param.name, param.name, normalize=param.enum is not None))
            if param.required_keys:
                statements.append(RequireKeys(param.name, param.required_keys))
        if self.endpoint.requires_preview:
            statements.append(MediaTypeOverride(self.preview_type))
        return statements

    @cached_property
    def api_path(self) -> tuple[PathPart, ...]:
        """Path template with owner helpers and interpolated arguments."""
        required = {p.name for p in self.required}
        parts: list[PathPart] = []
        for piece in _PATH_TOKENS.split(self.endpoint.path[1:]):
            if not piece:
                continue
            if piece in OWNER_PATHS:
                part: PathPart = OWNER_PATHS[piece]
            elif piece.startswith("{") and piece[1:-1] in required:
                part = Interpolation(piece[1:-1])
            else:
                part = Literal(piece)
            if isinstance(part, Literal) and parts and isinstance(parts[-1], Literal):
                part = Literal(parts.pop().text + part.text)
            parts.append(part)
        return tuple(parts)

    @cached_property
    def dispatch(self) -> Dispatch:
        if self.no_content:
            kind = BOOLEAN
        elif self.paginated:
            kind = PAGINATE
        else:
            kind = VERB
        options_var = "opts" if self.endpoint.requires_preview else "options"
        return Dispatch(kind, self.endpoint.method, self.api_path, options_var)

    # -- documentation -----------------------------------------------------

    @property
    def summary(self) -> str:
        summary = self.endpoint.summary
        if self.is_org:
            summary = summary.replace(self.base_namespace, f"org {self.base_namespace}")
            summary = summary.replace("a org", "an org")
        return summary

    @cached_property
    def param_docs(self) -> tuple[ParamDoc, ...]:
        docs = [
            ParamDoc("param", p.name, parameter_type(p), parameter_description(p, self.base_namespace))
            for p in self.required
        ]
        docs += [
            ParamDoc(
                "option",
                p.name,
                f"[{capitalize(p.type)}]",
                parameter_description(p, self.base_namespace).replace("\n", ""),
            )
            for p in self.optional
        ]
        return tuple(docs)

    @property
    def return_type(self) -> str:
        if self.verb == "GET" and not self.singular:
            return RESOURCE_LIST_TYPE
        if self.no_content:
            return BOOLEAN_TYPE
        return RESOURCE_TYPE

    @cached_property
    def return_description(self) -> str:
        if (
            self.verb == "POST"
            and not self.no_content
            and self.base_namespace not in POST_RETURN_DESCRIPTIONS
            and singularize(self.base_namespace) != self.base_namespace
        ):
            logger.warning(
                "%s: POST on plural namespace %r is described as a new resource; review",
                self.endpoint.operation_id,
                self.base_namespace,
            )
        return apply_rules(RETURN_DESCRIPTION_RULES, self)

    @property
    def see(self) -> str:
        if not self.endpoint.docs_url:
            raise SpecDefectError(self.endpoint.operation_id, "missing externalDocs url")
        return self.endpoint.docs_url

    def doc_block(self, summary: str, params: tuple[ParamDoc, ...]) -> DocBlock:
        return DocBlock(
            summary=summary,
            params=params,
            return_type=self.return_type,
            return_description=self.return_description,
            see=self.see,
        )

    # -- methods -----------------------------------------------------------

    @cached_property
    def method(self) -> MethodDef:
        return MethodDef(
            name=self.method_name,
            parameters=self.parameters,
            doc=self.doc_block(self.summary, self.param_docs),
            body=(*self.option_overrides(), self.dispatch),
        )

    @cached_property
    def enum_helpers(self) -> tuple[MethodDef, ...]:
        """One shortcut per literal of each small, default-less body enum."""
        helpers = []
        for prop in self.endpoint.body_properties or ():
            if not prop.enum or len(prop.enum) >= 3 or prop.default is not None:
                continue
            docs = tuple(d for d in self.param_docs if d.name != prop.name)
            for literal in prop.enum:
                verb = naming.enum_action(literal)
                noun = _spaced(self.base_namespace)
                article = "an" if noun[:1] in "aeiou" else "a"
                helpers.append(MethodDef(
                    name=f"{verb}_{self.namespace}",
                    parameters=self.parameters,
                    doc=self.doc_block(f"{capitalize(verb)} {article} {noun}", docs),
                    body=(
                        PresetOption(prop.name, literal),
                        *self.option_overrides(skip=prop.name),
                        self.dispatch,
                    ),
                ))
        return tuple(helpers)

    @property
    def priority(self) -> tuple[int, int, int, int]:
        parts = [s for s in self.endpoint.path.split("/") if s and "id" not in s]
        return (
            0 if self.primary_tag in self.endpoint.tags else 1,
            len(parts),
            VERB_PRIORITY.index(self.verb),
            0 if self.singular else 1,
        )

    def synthesize(self) -> SynthesizedEndpoint:
        result = SynthesizedEndpoint(
            endpoint=self.endpoint,
            namespace=self.namespace,
            method_name=self.method_name,
            required=self.required,
            optional=self.optional,
            method=self.method,
            helpers=self.enum_helpers,
            priority=self.priority,
        )
        logger.debug("%s %s -> %s", self.verb, self.endpoint.path, result.method_name)
        return result


def synthesize(
    endpoint: Endpoint,
    parameterizer: Parameterizer = positional,
    primary_tag: str = "repos",
    org_tag: str = "orgs",
) -> SynthesizedEndpoint:
    """Synthesize the client method(s) for one endpoint."""
    return EndpointSynthesizer(endpoint, parameterizer, primary_tag, org_tag).synthesize()
