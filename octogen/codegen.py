"""Render templates and write generated output.

Takes the ResourceModules from context_builder and produces one
<resource>.rb file per module.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from .context_builder import ResourceModule
from .printer import render_method

TEMPLATE_DIR = Path(__file__).parent / "templates"


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["ruby_method"] = render_method
    return env


def render_module(module: ResourceModule) -> str:
    """Render one resource module as Ruby source."""
    template = _environment().get_template("module.rb.j2")
    return template.render(module=module)


def generate(modules: list[ResourceModule], output_dir: Path) -> list[Path]:
    """Render every module and write it to output_dir/<resource>.rb."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for module in modules:
        output_path = output_dir / f"{module.resource}.rb"
        output_path.write_text(render_module(module), encoding="utf-8")
        written.append(output_path)

    method_count = sum(len(m.methods) for m in modules)
    print(f"Generated {len(written)} modules in {output_dir} ({method_count} methods)")
    return written
