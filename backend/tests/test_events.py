import pytest

from services.events import (
    AcceptChallenge,
    HelloWorldCommand,
    JoinSession,
    Ping,
    StartSession,
    parse_event,
)
from services.exceptions import UnknownEventError


def _challenge(context: int = 0) -> dict:
    body = {
        "id": "1234",
        "type": 2,
        "token": "tok",
        "context": context,
        "data": {"name": "challenge", "options": [{"name": "object", "type": 3, "value": "rock"}]},
    }
    if context == 0:
        body["member"] = {"user": {"id": "alice"}}
    else:
        body["user"] = {"id": "alice-dm"}
    return body


def test_ping() -> None:
    assert parse_event({"type": 1}) == Ping()


def test_hello_world_command() -> None:
    assert parse_event({"id": "1", "type": 2, "data": {"name": "test"}}) == HelloWorldCommand()


def test_challenge_in_guild_uses_member() -> None:
    assert parse_event(_challenge(context=0)) == StartSession(session_id="1234", user_id="alice", choice="rock")


def test_challenge_in_dm_uses_user() -> None:
    event = parse_event(_challenge(context=1))
    assert isinstance(event, StartSession)
    assert event.user_id == "alice-dm"


def test_accept_button() -> None:
    event = parse_event(
        {
            "id": "9",
            "type": 3,
            "token": "tok",
            "context": 0,
            "member": {"user": {"id": "bob"}},
            "message": {"id": "m1"},
            "data": {"custom_id": "accept_button_1234", "component_type": 2},
        }
    )
    assert event == AcceptChallenge(session_id="1234", user_id="bob", token="tok", message_id="m1")


@pytest.mark.parametrize("values", [["scissors"], [{"value": "scissors"}]])
def test_select_choice(values: list) -> None:
    event = parse_event(
        {
            "id": "10",
            "type": 3,
            "token": "tok2",
            "context": 1,
            "user": {"id": "bob"},
            "message": {"id": "m2"},
            "data": {"custom_id": "select_choice_1234", "values": values},
        }
    )
    assert event == JoinSession(
        session_id="1234", user_id="bob", choice="scissors", token="tok2", message_id="m2"
    )


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"id": "1", "type": 2, "data": {"name": "dance"}}, "unknown command"),
        ({"type": 99}, "unknown interaction type"),
        ({"type": 3, "user": {"id": "bob"}, "data": {"custom_id": "other_button"}}, "unknown interaction type"),
        ({"type": 3, "user": {"id": "bob"}, "data": {"custom_id": "select_choice_1", "values": []}}, "missing choice value"),
        ({"type": 3, "user": {"id": "bob"}, "data": {"custom_id": "accept_button_"}}, "has no game id"),
        ({"type": 3, "data": {"custom_id": "accept_button_1"}}, "has no user"),
        ({"type": "not-a-number"}, "malformed interaction"),
        ({}, "malformed interaction"),
    ],
)
def test_rejected_events(payload: dict, message: str) -> None:
    with pytest.raises(UnknownEventError, match=message):
        parse_event(payload)
