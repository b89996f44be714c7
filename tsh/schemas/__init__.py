"""
Schema definitions for tsh.

- search: search request variants (named search, path search)
- session: multiplexer context and resolved session plans
"""

from __future__ import annotations

from tsh.schemas.base import StrictModel
from tsh.schemas.search import NamedSearch, PathSearch, SearchRequest
from tsh.schemas.session import MultiplexerContext, SessionPlan, SessionTransition
from tsh.schemas.types import PathStr

__all__ = [
    'StrictModel',
    'PathStr',
    # Search
    'NamedSearch',
    'PathSearch',
    'SearchRequest',
    # Session
    'MultiplexerContext',
    'SessionPlan',
    'SessionTransition',
]
