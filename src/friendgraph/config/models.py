"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, friendgraph.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- friendgraph.toml sections ---


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    # Relative paths resolve against the directory holding friendgraph.toml.
    path: str = "friends.txt"


class AnalysisConfig(BaseModel):
    """[analysis] section."""

    model_config = {"frozen": True}

    workers: int = Field(default=1, ge=1)
