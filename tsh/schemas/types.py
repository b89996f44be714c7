"""
Shared type definitions for schemas.

Foundation strict model and common type aliases used by the schema modules.
"""

from __future__ import annotations

from typing import TypeAlias

import pydantic


class BaseStrictModel(pydantic.BaseModel):
    """
    Foundation strict model - schema modules inherit from this.

    Uses extra='forbid' to reject unknown fields - any field not modeled
    causes immediate validation failure (fail-fast).
    """

    model_config = pydantic.ConfigDict(
        extra='forbid',  # Reject unknown fields (fail-fast)
        strict=True,  # Strict type coercion
        frozen=True,  # Immutable after creation
    )


PathStr: TypeAlias = str
"""A filesystem path (file or directory) as a string."""
