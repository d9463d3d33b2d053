"""Calling conventions for generated method signatures.

Both strategies end the clause with a catch-all options container:
  positional(["repo", "number"]) -> "repo, number, options = {}"
  keyword(["repo", "number"])    -> "repo:, number:, **options"
"""

from __future__ import annotations

from typing import Callable, Mapping, Sequence

from .exceptions import ConfigError

Parameterizer = Callable[..., str]


def positional(names: Sequence[str], defaults: Mapping[str, str] | None = None) -> str:
    defaults = defaults or {}
    args = [f"{name} = {defaults[name]}" if name in defaults else name for name in names]
    return ", ".join([*args, "options = {}"])


def keyword(names: Sequence[str], defaults: Mapping[str, str] | None = None) -> str:
    defaults = defaults or {}
    args = [f"{name}: {defaults[name]}" if name in defaults else f"{name}:" for name in names]
    return ", ".join([*args, "**options"])


PARAMETERIZERS: dict[str, Parameterizer] = {
    "positional": positional,
    "keyword": keyword,
}


def get_parameterizer(name: str) -> Parameterizer:
    """Look up a calling convention by name."""
    try:
        return PARAMETERIZERS[name]
    except KeyError:
        choices = ", ".join(sorted(PARAMETERIZERS))
        raise ConfigError(f"Unknown calling convention {name!r} (expected one of: {choices})") from None
