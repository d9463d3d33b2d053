"""Entry point: python -m octogen

Reads the GitHub OpenAPI description, generates lib/octokit/client/*.rb.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import GeneratorConfig, get_config
from .context_builder import build_modules
from .codegen import generate
from .loader import load_spec


def parse_args(argv: list[str] | None = None) -> GeneratorConfig:
    """Flags override OCTOGEN_* environment variables, which override defaults."""
    parser = argparse.ArgumentParser(prog="octogen", description=__doc__)
    parser.add_argument("--spec", type=Path, dest="spec_path", help="OpenAPI JSON document")
    parser.add_argument("--output", type=Path, dest="output_dir", help="output directory")
    parser.add_argument(
        "--keyword",
        action="store_const",
        const="keyword",
        dest="calling_convention",
        help="generate keyword arguments instead of positional ones",
    )
    args = parser.parse_args(argv)
    return get_config(**{k: v for k, v in vars(args).items() if v is not None})


def main(argv: list[str] | None = None) -> None:
    config = parse_args(argv)
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    spec = load_spec(config.spec_path)
    modules = build_modules(spec, config)
    generate(modules, config.output_dir)


if __name__ == "__main__":
    main()
