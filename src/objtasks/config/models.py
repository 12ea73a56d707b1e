"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, objtasks.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- objtasks.toml sections ---


class SelectorConfig(BaseModel):
    """[selector] section."""

    model_config = {"frozen": True}

    strict_combinators: bool = True


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    indent: int = Field(default=2, ge=0)


class ObjConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    selector: SelectorConfig = Field(default_factory=SelectorConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
