"""
Shared base models for schemas.

Layering:
- StrictModel: transient values produced by this process (selection items,
  operation results). Unknown fields are a programming error.
- StateModel: records read back from disk. Unknown fields are kept so a file
  written by a newer version survives a rewrite by an older one.
"""

from __future__ import annotations

import pydantic


class StrictModel(pydantic.BaseModel):
    """Base model with strict validation settings."""

    model_config = pydantic.ConfigDict(
        extra='forbid',  # Reject unknown fields (fail-fast)
        strict=True,  # Strict type coercion
        frozen=True,  # Immutable after creation
    )


class StateModel(pydantic.BaseModel):
    """
    Permissive model for persisted records.

    Symmetry with StrictModel:
    - StrictModel: extra='forbid' (rejects unknown fields)
    - StateModel: extra='allow' (accepts and preserves unknown fields)
    """

    model_config = pydantic.ConfigDict(
        extra='allow',  # Forward compatibility with newer state files
        strict=True,  # Strict type coercion for known fields
        frozen=True,  # Updates go through model_copy()
    )
