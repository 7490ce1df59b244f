"""Map raw interaction payloads onto the events the game understands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from app.models import Interaction, InteractionContextType, InteractionType
from services.exceptions import UnknownEventError

ACCEPT_BUTTON_PREFIX = "accept_button_"
SELECT_CHOICE_PREFIX = "select_choice_"

TEST_COMMAND = "test"
CHALLENGE_COMMAND = "challenge"


@dataclass(frozen=True)
class Ping:
    pass


@dataclass(frozen=True)
class HelloWorldCommand:
    pass


@dataclass(frozen=True)
class StartSession:
    session_id: str
    user_id: str
    choice: str


@dataclass(frozen=True)
class AcceptChallenge:
    session_id: str
    user_id: str
    token: str | None
    message_id: str | None


@dataclass(frozen=True)
class JoinSession:
    session_id: str
    user_id: str
    choice: str
    token: str | None
    message_id: str | None


Event = Ping | HelloWorldCommand | StartSession | AcceptChallenge | JoinSession


def _user_id(interaction: Interaction) -> str:
    # Guild interactions carry the user under member, DMs under user.
    if interaction.context == InteractionContextType.GUILD and interaction.member:
        return interaction.member.user.id
    if interaction.user:
        return interaction.user.id
    if interaction.member:
        return interaction.member.user.id
    raise UnknownEventError("interaction has no user")


def _first_value(items: Any) -> str:
    if not isinstance(items, list) or not items:
        raise UnknownEventError("missing choice value")
    first = items[0]
    value = first.get("value") if isinstance(first, dict) else first
    if not isinstance(value, str) or not value:
        raise UnknownEventError("missing choice value")
    return value


def _suffix(custom_id: str, prefix: str) -> str:
    session_id = custom_id[len(prefix):]
    if not session_id:
        raise UnknownEventError(f"component {custom_id!r} has no game id")
    return session_id


def _parse_command(interaction: Interaction) -> Event:
    name = interaction.data.get("name")
    if name == TEST_COMMAND:
        return HelloWorldCommand()
    if name == CHALLENGE_COMMAND and interaction.id:
        return StartSession(
            session_id=interaction.id,
            user_id=_user_id(interaction),
            choice=_first_value(interaction.data.get("options")),
        )
    raise UnknownEventError("unknown command")


def _parse_component(interaction: Interaction) -> Event:
    custom_id = interaction.data.get("custom_id")
    if not isinstance(custom_id, str):
        raise UnknownEventError("unknown interaction type")
    message_id = interaction.message.id if interaction.message else None

    if custom_id.startswith(ACCEPT_BUTTON_PREFIX):
        return AcceptChallenge(
            session_id=_suffix(custom_id, ACCEPT_BUTTON_PREFIX),
            user_id=_user_id(interaction),
            token=interaction.token,
            message_id=message_id,
        )
    if custom_id.startswith(SELECT_CHOICE_PREFIX):
        return JoinSession(
            session_id=_suffix(custom_id, SELECT_CHOICE_PREFIX),
            user_id=_user_id(interaction),
            choice=_first_value(interaction.data.get("values")),
            token=interaction.token,
            message_id=message_id,
        )
    raise UnknownEventError("unknown interaction type")


def parse_event(payload: dict[str, Any]) -> Event:
    """
    Classify one inbound interaction.

    Raises UnknownEventError for malformed bodies and for any type, command or
    component id the game does not handle.
    """
    try:
        interaction = Interaction.model_validate(payload)
    except ValidationError as exc:
        raise UnknownEventError("malformed interaction") from exc

    if interaction.type == InteractionType.PING:
        return Ping()
    if interaction.type == InteractionType.APPLICATION_COMMAND:
        return _parse_command(interaction)
    if interaction.type == InteractionType.MESSAGE_COMPONENT:
        return _parse_component(interaction)
    raise UnknownEventError("unknown interaction type")
