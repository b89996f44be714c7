"""
Session resolver - attach to or create the tmux session for a directory.

The decision is a table over two independent facts:

    exists  nested  transition
    ------  ------  -----------------------------------------------
    yes     yes     switch-client
    yes     no      attach-session
    no      yes     new-session -d, then switch-client
    no      no      new-session -A (create or attach in one call)

tmux cannot attach from inside a client, so nested runs switch the current
client instead. Every transition ends the run: there is no retry and the
session state is queried exactly once.
"""

from __future__ import annotations

import logging
from typing import Protocol

from tsh.exceptions import CommandFailedError
from tsh.paths import session_name_for
from tsh.protocols import LoggerProtocol, NullLogger
from tsh.schemas.session import MultiplexerContext, SessionPlan, SessionTransition

__all__ = ['TRANSITIONS', 'MultiplexerProtocol', 'SessionResolver', 'choose_transition']

logger = logging.getLogger(__name__)

# (session exists, caller nested) -> transition
TRANSITIONS: dict[tuple[bool, bool], SessionTransition] = {
    (True, True): 'switch_client',
    (True, False): 'attach',
    (False, True): 'create_and_switch',
    (False, False): 'create_or_attach',
}


class MultiplexerProtocol(Protocol):
    """tmux operations used by the resolver (see MultiplexerClient)."""

    def has_session(self, name: str) -> bool: ...
    def new_session_detached(self, name: str, directory: str) -> bool: ...
    def new_session_or_attach(self, name: str, directory: str) -> bool: ...
    def attach_session(self, name: str) -> bool: ...
    def switch_client(self, name: str) -> bool: ...


def choose_transition(exists: bool, nested: bool) -> SessionTransition:
    return TRANSITIONS[(exists, nested)]


class SessionResolver:
    """Drive the tmux session state machine for a selected directory."""

    def __init__(self, client: MultiplexerProtocol, logger: LoggerProtocol | None = None) -> None:
        self.client = client
        self.logger: LoggerProtocol = logger or NullLogger()

    def plan(self, directory: str, context: MultiplexerContext) -> SessionPlan:
        """
        Query tmux once and decide the transition for directory.

        Raises:
            CommandFailedError: If no session name can be derived from directory
        """
        session_name = session_name_for(directory)
        exists = self.client.has_session(session_name)
        transition = choose_transition(exists, context.nested)
        logger.debug('Session %r exists=%s nested=%s -> %s', session_name, exists, context.nested, transition)
        return SessionPlan(
            session_name=session_name,
            directory=directory,
            exists=exists,
            nested=context.nested,
            transition=transition,
        )

    def execute(self, plan: SessionPlan) -> None:
        """
        Issue the tmux calls for plan.

        Raises:
            CommandFailedError: Naming the tmux operation that failed
        """
        name = plan.session_name
        self.logger.info(f'Transition: {plan.transition} ({name})')

        match plan.transition:
            case 'switch_client':
                self._switch(name)
            case 'attach':
                if not self.client.attach_session(name):
                    raise CommandFailedError('Failed to attach to tmux session')
            case 'create_and_switch':
                if not self.client.new_session_detached(name, plan.directory):
                    raise CommandFailedError('Failed to create tmux session')
                self._switch(name)
            case 'create_or_attach':
                if not self.client.new_session_or_attach(name, plan.directory):
                    raise CommandFailedError('Failed to create and attach to tmux session')

    def resolve(self, directory: str, context: MultiplexerContext) -> SessionPlan:
        """Plan, report and execute in one step; returns the executed plan."""
        plan = self.plan(directory, context)
        if plan.exists:
            self.logger.progress(f"Session '{plan.session_name}' already exists, attaching...")
        else:
            self.logger.progress(f"Creating new session '{plan.session_name}'...")
        self.execute(plan)
        return plan

    def _switch(self, name: str) -> None:
        if not self.client.switch_client(name):
            raise CommandFailedError('Failed to switch tmux client')
