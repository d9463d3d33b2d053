"""Derive namespaces and method names from GitHub operation ids.

Operation ids look like "{resource}/{verb-phrase}":

  issues/list-labels             GET  -> labels
  issues/get                     GET  -> issue          (singular result)
  repos/list-releases            GET  -> releases
  issues/list-labels-on-issue    GET  -> issue_labels   ("on" splits the phrase)
  issues/create-label           POST  -> create_label
  orgs/list-webhooks             GET  -> org_webhooks

Each decision is an ordered table of (predicate, transform) pairs; the first
matching predicate wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from .exceptions import UnsupportedOperationError
from .inflector import singularize

Rule = tuple[Callable[..., bool], Callable[..., str]]

CONNECTIVES = ("for", "on", "about")

TOKEN_REWRITES: dict[str, str] = {
    "repo": "repository",
    "repos": "repositories",
}

MUTATING_VERBS = ("POST", "PUT", "PATCH", "DELETE")

ORG_PREFIX = "org"


def apply_rules(rules: Sequence[Rule], *args: Any) -> str:
    """Return the transform of the first rule whose predicate holds."""
    for predicate, transform in rules:
        if predicate(*args):
            return transform(*args)
    raise LookupError(f"no rule matched {args!r}")


@dataclass(frozen=True)
class OperationWords:
    """An operation id split into its resource tag and verb-phrase words."""

    resource: str
    words: tuple[str, ...]
    singular: bool

    @classmethod
    def parse(cls, operation_id: str, singular: bool) -> OperationWords:
        segments = operation_id.split("/")
        return cls(segments[0], tuple(segments[-1].split("-")), singular)

    @property
    def connective(self) -> str | None:
        return next((w for w in self.words if w in CONNECTIVES), None)

    @property
    def connective_index(self) -> int:
        return self.words.index(self.connective)


def _rewrite(words: Sequence[str]) -> str:
    return "_".join(TOKEN_REWRITES.get(w, w) for w in words)


def _about_namespace(op: OperationWords) -> str:
    return _rewrite(op.words[op.connective_index + 1:])


def _qualified_namespace(op: OperationWords) -> str:
    head = op.words[:op.connective_index]
    qualifier = op.resource if len(head) <= 1 else "_".join(head[1:])
    if op.singular:
        qualifier = singularize(qualifier)
    return f"{_about_namespace(op)}_{qualifier}"


def _resource_namespace(op: OperationWords) -> str:
    return singularize(op.resource) if op.singular else op.resource


def _phrase_namespace(op: OperationWords) -> str:
    return "_".join(op.words[1:])


NAMESPACE_RULES: list[Rule] = [
    (lambda op: op.connective == "about", _about_namespace),
    (lambda op: op.connective is not None, _qualified_namespace),
    (lambda op: len(op.words) == 1, _resource_namespace),
    (lambda op: True, _phrase_namespace),
]


def derive_namespace(operation_id: str, singular: bool) -> str:
    """Derive the resource-oriented namespace of an operation."""
    return apply_rules(NAMESPACE_RULES, OperationWords.parse(operation_id, singular))


def action(operation_id: str) -> str:
    """First word of the verb phrase: "issues/create-label" -> "create"."""
    return operation_id.split("/")[-1].split("-")[0]


def is_org(operation_id: str, org_tag: str = "orgs") -> bool:
    return operation_id.split("/")[0] == org_tag


def qualify_namespace(namespace: str, operation_id: str, org_tag: str = "orgs") -> str:
    """Prefix org-scoped namespaces so they do not collide with repo ones."""
    if is_org(operation_id, org_tag):
        return f"{ORG_PREFIX}_{namespace}"
    return namespace


def method_name(verb: str, namespace: str, operation_id: str) -> str:
    """Build the client method name for an endpoint."""
    verb = verb.upper()
    if verb == "GET":
        return namespace
    if verb in MUTATING_VERBS:
        return f"{action(operation_id)}_{namespace}"
    raise UnsupportedOperationError(verb, operation_id)


# Enum literals that need an explicit helper verb
ENUM_ACTIONS: dict[str, str] = {
    "locked": "lock",
}

ENUM_ACTION_RULES: list[Rule] = [
    (lambda lit: lit in ENUM_ACTIONS, lambda lit: ENUM_ACTIONS[lit]),
    (lambda lit: lit.endswith("d"), lambda lit: lit[:-1]),
    (lambda lit: True, lambda lit: lit),
]


def enum_action(literal: Any) -> str:
    """Helper verb for an enum literal: "closed" -> "close", "open" -> "open"."""
    text = str(literal)
    text = re.sub(r"[^0-9A-Za-z_]", "_", text[:1].lower() + text[1:])
    return apply_rules(ENUM_ACTION_RULES, text)
