"""Tests for the session resolver state machine."""

from __future__ import annotations

import pytest
from conftest import FakeMultiplexer, RecordingLogger

from tsh.exceptions import CommandFailedError
from tsh.schemas.session import MultiplexerContext
from tsh.services.session import TRANSITIONS, SessionResolver, choose_transition

INSIDE = MultiplexerContext(nested=True)
OUTSIDE = MultiplexerContext(nested=False)
DIRECTORY = '/home/u/my.app'
NAME = 'my_app'


def test_table_covers_every_combination() -> None:
    assert set(TRANSITIONS) == {(True, True), (True, False), (False, True), (False, False)}
    assert len(set(TRANSITIONS.values())) == 4


@pytest.mark.parametrize(
    ('exists', 'context', 'transition', 'operations'),
    [
        (True, INSIDE, 'switch_client', ['switch_client']),
        (True, OUTSIDE, 'attach', ['attach_session']),
        (False, INSIDE, 'create_and_switch', ['new_session_detached', 'switch_client']),
        (False, OUTSIDE, 'create_or_attach', ['new_session_or_attach']),
    ],
)
def test_transitions(exists: bool, context: MultiplexerContext, transition: str, operations: list[str]) -> None:
    client = FakeMultiplexer(existing=[NAME] if exists else [])

    plan = SessionResolver(client).resolve(DIRECTORY, context)

    assert plan.transition == transition
    assert choose_transition(exists, context.nested) == transition
    assert client.operations == operations
    assert [call for call in client.calls if call[0] == 'has_session'] == [('has_session', NAME)]


def test_existing_nested_only_switches() -> None:
    client = FakeMultiplexer(existing=[NAME])
    SessionResolver(client).resolve(DIRECTORY, INSIDE)
    assert client.calls == [('has_session', NAME), ('switch_client', NAME)]


def test_missing_outside_single_combined_call_with_directory() -> None:
    client = FakeMultiplexer()
    SessionResolver(client).resolve(DIRECTORY, OUTSIDE)
    assert client.calls == [('has_session', NAME), ('new_session_or_attach', NAME, DIRECTORY)]


def test_create_and_switch_roots_session_at_directory() -> None:
    client = FakeMultiplexer()
    SessionResolver(client).resolve(DIRECTORY, INSIDE)
    assert client.calls[1] == ('new_session_detached', NAME, DIRECTORY)


def test_plan_does_not_change_tmux_state() -> None:
    client = FakeMultiplexer()
    plan = SessionResolver(client).plan(DIRECTORY, OUTSIDE)
    assert (plan.session_name, plan.exists, plan.nested) == (NAME, False, False)
    assert client.operations == []


@pytest.mark.parametrize(
    ('exists', 'context', 'fail', 'message'),
    [
        (True, INSIDE, ['switch_client'], 'Failed to switch tmux client'),
        (True, OUTSIDE, ['attach_session'], 'Failed to attach to tmux session'),
        (False, INSIDE, ['switch_client'], 'Failed to switch tmux client'),
        (False, OUTSIDE, ['new_session_or_attach'], 'Failed to create and attach to tmux session'),
    ],
)
def test_failures(exists: bool, context: MultiplexerContext, fail: list[str], message: str) -> None:
    client = FakeMultiplexer(existing=[NAME] if exists else [], fail=fail)
    with pytest.raises(CommandFailedError, match=message):
        SessionResolver(client).resolve(DIRECTORY, context)


def test_failed_create_short_circuits_switch() -> None:
    client = FakeMultiplexer(fail=['new_session_detached'])

    with pytest.raises(CommandFailedError, match='Failed to create tmux session'):
        SessionResolver(client).resolve(DIRECTORY, INSIDE)

    assert client.operations == ['new_session_detached']


def test_unnameable_directory_fails_before_querying_tmux() -> None:
    client = FakeMultiplexer()
    with pytest.raises(CommandFailedError):
        SessionResolver(client).resolve('/', OUTSIDE)
    assert client.calls == []


@pytest.mark.parametrize(
    ('existing', 'message'),
    [
        ([], "Creating new session 'my_app'..."),
        ([NAME], "Session 'my_app' already exists, attaching..."),
    ],
)
def test_resolve_reports_progress(existing: list[str], message: str) -> None:
    log = RecordingLogger()
    SessionResolver(FakeMultiplexer(existing=existing), logger=log).resolve(DIRECTORY, OUTSIDE)
    assert log.messages['progress'] == [message]
