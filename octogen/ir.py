"""Intermediate representation of generated client methods.

The synthesizer decides names, order and content; printer.py decides syntax.
A method body is an ordered list of statements:

  AssignOption       options[:state] = state.to_s.downcase
  PresetOption       options[:state] = "closed"
  RequireKeys        raise Octokit::MissingKey.new unless config.key? :url
  MediaTypeOverride  opts = ensure_api_media_type(:reactions, options)
  Dispatch           paginate "#{Repository.path repo}/labels", options
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

# Dispatch kinds
BOOLEAN = "boolean"
PAGINATE = "paginate"
VERB = "verb"


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class OwnerPath:
    """A call to an owner-resolution helper, e.g. Repository.path repo."""

    helper: str
    arg: str


@dataclass(frozen=True)
class Interpolation:
    name: str


PathPart = Union[Literal, OwnerPath, Interpolation]


@dataclass(frozen=True)
class AssignOption:
    key: str
    value: str
    normalize: bool = False


@dataclass(frozen=True)
class PresetOption:
    key: str
    literal: Any


@dataclass(frozen=True)
class RequireKeys:
    param: str
    keys: tuple[str, ...]


@dataclass(frozen=True)
class MediaTypeOverride:
    preview_type: str
    source: str = "options"
    target: str = "opts"


@dataclass(frozen=True)
class Dispatch:
    kind: str
    verb: str
    path: tuple[PathPart, ...]
    options_var: str = "options"


Statement = Union[AssignOption, PresetOption, RequireKeys, MediaTypeOverride, Dispatch]


@dataclass(frozen=True)
class ParamDoc:
    """One documented argument; kind is "param" (required) or "option"."""

    kind: str
    name: str
    type: str
    description: str


@dataclass(frozen=True)
class DocBlock:
    summary: str
    params: tuple[ParamDoc, ...] = ()
    return_type: str | None = None
    return_description: str | None = None
    see: str | None = None


@dataclass(frozen=True)
class MethodDef:
    name: str
    parameters: str
    doc: DocBlock
    body: tuple[Statement, ...]
