"""Generator configuration.

Every field can be overridden with an OCTOGEN_-prefixed environment variable:
  OCTOGEN_SPEC_PATH           path to the OpenAPI JSON document
  OCTOGEN_OUTPUT_DIR          directory receiving <resource>.rb files
  OCTOGEN_CALLING_CONVENTION  "positional" (default) or "keyword"
  OCTOGEN_PRIMARY_TAG         tag whose endpoints sort first (default "repos")
  OCTOGEN_ORG_TAG             tag marking organization-scoped operations
  OCTOGEN_LOG_LEVEL           logging level name (default "WARNING")
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError
from .loader import SPEC_PATH
from .parameterizer import Parameterizer, get_parameterizer

OUTPUT_DIR = Path("lib") / "octokit" / "client"


class GeneratorConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="OCTOGEN_")

    spec_path: Path = Field(SPEC_PATH, description="OpenAPI JSON document to read.")

    output_dir: Path = Field(OUTPUT_DIR, description="Directory receiving the generated modules.")

    calling_convention: Literal["positional", "keyword"] = Field(
        "positional", description="Signature style of generated methods."
    )

    primary_tag: str = Field("repos", description="Endpoints carrying this tag sort first.")

    org_tag: str = Field("orgs", description="Operation-id prefix of organization-scoped endpoints.")

    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        "WARNING", description="Logging level name."
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @property
    def parameterizer(self) -> Parameterizer:
        return get_parameterizer(self.calling_convention)


def get_config(**overrides: Any) -> GeneratorConfig:
    """Build the configuration from the environment plus explicit overrides."""
    try:
        return GeneratorConfig(**overrides)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
