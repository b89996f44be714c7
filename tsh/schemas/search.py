"""
Search request schemas.

A run searches in exactly one mode: by directory name under the home
directory, or through every subdirectory of a single base directory.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated, Literal

import pydantic

from tsh.schemas.base import StrictModel
from tsh.schemas.types import PathStr


class NamedSearch(StrictModel):
    """Locate directories with the given names anywhere under base."""

    kind: Literal['named'] = 'named'
    names: Sequence[str]
    base: PathStr

    @pydantic.field_validator('names')
    @classmethod
    def validate_names(cls, v: Sequence[str]) -> Sequence[str]:
        """A named search needs at least one name."""
        if not v:
            raise ValueError('NamedSearch requires at least one directory name')
        return v


class PathSearch(StrictModel):
    """Enumerate all subdirectories under base, minus excluded noise paths."""

    kind: Literal['path'] = 'path'
    base: PathStr
    is_default: bool  # True when base came from $HOME rather than --dir


SearchRequest = Annotated[NamedSearch | PathSearch, pydantic.Field(discriminator='kind')]
