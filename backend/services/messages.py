"""Build interaction response payloads sent back to Discord."""

from __future__ import annotations

import random
from typing import Any

from app.models import InteractionResponseType
from models.option import GameOption
from services.events import ACCEPT_BUTTON_PREFIX, SELECT_CHOICE_PREFIX

ACTION_ROW = 1
BUTTON = 2
STRING_SELECT = 3
BUTTON_STYLE_PRIMARY = 1
EPHEMERAL_FLAG = 1 << 6

EMOJIS = ["😭", "😄", "😌", "🤓", "😎", "😤", "🤖", "😶‍🌫️", "🌏", "📸", "💿", "👋", "🌊", "✨"]

INVALID_GAME_TEXT = "This game is invalid or has expired."


def random_emoji() -> str:
    return random.choice(EMOJIS)


def pong() -> dict[str, Any]:
    return {"type": InteractionResponseType.PONG}


def channel_message(content: str, *, ephemeral: bool = False, components: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    data: dict[str, Any] = {"content": content}
    if ephemeral:
        data["flags"] = EPHEMERAL_FLAG
    if components is not None:
        data["components"] = components
    return {"type": InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE, "data": data}


def hello_world() -> dict[str, Any]:
    return channel_message(f"hello world {random_emoji()}")


def challenge_prompt(session_id: str, user_id: str) -> dict[str, Any]:
    """Public challenge message with an Accept button bound to the session."""
    return channel_message(
        f"Rock papers scissors challenge from <@{user_id}>",
        components=[
            {
                "type": ACTION_ROW,
                "components": [
                    {
                        "type": BUTTON,
                        "custom_id": f"{ACCEPT_BUTTON_PREFIX}{session_id}",
                        "label": "Accept",
                        "style": BUTTON_STYLE_PRIMARY,
                    }
                ],
            }
        ],
    )


def choice_prompt(session_id: str, options: list[GameOption]) -> dict[str, Any]:
    """Ephemeral select menu; ``options`` arrive already shuffled."""
    return channel_message(
        "What is your object of choice?",
        ephemeral=True,
        components=[
            {
                "type": ACTION_ROW,
                "components": [
                    {
                        "type": STRING_SELECT,
                        "custom_id": f"{SELECT_CHOICE_PREFIX}{session_id}",
                        "options": [opt.to_select_option() for opt in options],
                    }
                ],
            }
        ],
    )


def result(text: str) -> dict[str, Any]:
    return channel_message(text)


def invalid_game() -> dict[str, Any]:
    return channel_message(INVALID_GAME_TEXT, ephemeral=True)


def invalid_choice(valid: list[str]) -> dict[str, Any]:
    return channel_message(f"Pick one of: {', '.join(valid)}", ephemeral=True)


def nice_choice_edit() -> dict[str, Any]:
    """Body for editing the ephemeral select message once the round is over."""
    return {"content": f"Nice choice {random_emoji()}", "components": []}
