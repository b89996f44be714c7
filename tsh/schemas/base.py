"""
Shared Pydantic base model for strict validation.

All schema models in the application should inherit from StrictModel.
"""

from __future__ import annotations

from tsh.schemas.types import BaseStrictModel


class StrictModel(BaseStrictModel):
    """Strict model for search and session schemas.

    Inherits from BaseStrictModel (extra='forbid', strict=True, frozen=True).
    """

    pass
