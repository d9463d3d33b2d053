"""Render IR nodes as Ruby source for the Octokit client.

Everything Ruby-specific lives here; the synthesizer only produces IR.
"""

from __future__ import annotations

import re
from typing import Any

from .ir import (
    BOOLEAN,
    PAGINATE,
    AssignOption,
    Dispatch,
    DocBlock,
    Interpolation,
    Literal,
    MediaTypeOverride,
    MethodDef,
    OwnerPath,
    PathPart,
    PresetOption,
    RequireKeys,
    Statement,
)

INDENT = "  "

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*[?!]?$")


def symbol(name: str) -> str:
    """Ruby symbol literal: :state, or :"x-y" when quoting is needed."""
    if _IDENTIFIER.match(name):
        return f":{name}"
    return f":{ruby_literal(name)}"


def ruby_literal(value: Any) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"').replace("#{", "\\#{")
    return f'"{escaped}"'


def render_path_part(part: PathPart) -> str:
    if isinstance(part, OwnerPath):
        return f"#{{{part.helper}.path {part.arg}}}"
    if isinstance(part, Interpolation):
        return f"#{{{part.name}}}"
    if isinstance(part, Literal):
        return ruby_literal(part.text)[1:-1]
    raise TypeError(f"Unknown path part: {part!r}")


def render_path(parts: tuple[PathPart, ...]) -> str:
    return '"' + "".join(render_path_part(p) for p in parts) + '"'


def render_dispatch(node: Dispatch) -> str:
    path = render_path(node.path)
    if node.kind == BOOLEAN:
        return f"boolean_from_response :{node.verb}, {path}, {node.options_var}"
    if node.kind == PAGINATE:
        return f"paginate {path}, {node.options_var}"
    return f"{node.verb} {path}, {node.options_var}"


def render_statement(node: Statement) -> list[str]:
    """Render one statement; guards expand to one line per required key."""
    if isinstance(node, AssignOption):
        value = f"{node.value}.to_s.downcase" if node.normalize else node.value
        return [f"options[{symbol(node.key)}] = {value}"]
    if isinstance(node, PresetOption):
        return [f"options[{symbol(node.key)}] = {ruby_literal(node.literal)}"]
    if isinstance(node, RequireKeys):
        return [
            f"raise Octokit::MissingKey.new unless {node.param}.key? {symbol(key)}"
            for key in node.keys
        ]
    if isinstance(node, MediaTypeOverride):
        return [f"{node.target} = ensure_api_media_type({symbol(node.preview_type)}, {node.source})"]
    if isinstance(node, Dispatch):
        return [render_dispatch(node)]
    raise TypeError(f"Unknown statement: {node!r}")


def render_doc(doc: DocBlock) -> list[str]:
    """YARD comment lines, without the leading '# '."""
    lines = [doc.summary, ""]
    for param in doc.params:
        if param.kind == "option":
            lines.append(f"@option options {param.type} {symbol(param.name)} {param.description}")
        else:
            lines.append(f"@param {param.name} {param.type} {param.description}")
    if doc.return_type:
        lines.append(f"@return {doc.return_type} {doc.return_description}")
    if doc.see:
        lines.append(f"@see {doc.see}")
    return lines


def render_method(method: MethodDef) -> str:
    """Full method text (comment block + def) at zero indentation."""
    lines = [f"# {line}".rstrip() for line in render_doc(method.doc)]
    lines.append(f"def {method.name}({method.parameters})")
    for statement in method.body:
        lines.extend(INDENT + line for line in render_statement(statement))
    lines.append("end")
    return "\n".join(lines)
