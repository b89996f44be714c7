"""
Session resolution schemas.

The resolver decides one of four transitions from two independent facts:
whether the tmux session already exists, and whether tsh itself runs inside
tmux. tmux cannot attach from within a client, so the nested cases hand off
with switch-client instead.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

from tsh.environment import is_nested_in_multiplexer
from tsh.schemas.base import StrictModel
from tsh.schemas.types import PathStr

SessionTransition = Literal[
    'switch_client',  # exists, nested
    'attach',  # exists, not nested
    'create_and_switch',  # missing, nested: new-session -d, then switch-client
    'create_or_attach',  # missing, not nested: new-session -A
]


class MultiplexerContext(StrictModel):
    """Whether the current process runs inside a tmux session.

    Read once per run and never mutated.
    """

    nested: bool

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> MultiplexerContext:
        return cls(nested=is_nested_in_multiplexer(environ))


class SessionPlan(StrictModel):
    """Resolved session decision, computed before any tmux state changes."""

    session_name: str
    directory: PathStr
    exists: bool
    nested: bool
    transition: SessionTransition
