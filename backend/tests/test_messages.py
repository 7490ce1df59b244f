from services import messages
from services.catalog import CLASSIC


def test_challenge_prompt_binds_button_to_session() -> None:
    payload = messages.challenge_prompt("g1", "alice")
    assert payload["type"] == 4
    button = payload["data"]["components"][0]["components"][0]
    assert button == {"type": 2, "custom_id": "accept_button_g1", "label": "Accept", "style": 1}


def test_choice_prompt_keeps_given_order() -> None:
    options = list(reversed(CLASSIC.options))
    payload = messages.choice_prompt("g1", options)
    select = payload["data"]["components"][0]["components"][0]
    assert payload["data"]["flags"] == messages.EPHEMERAL_FLAG
    assert [o["value"] for o in select["options"]] == ["scissors", "paper", "rock"]


def test_random_emoji_comes_from_list() -> None:
    assert messages.random_emoji() in messages.EMOJIS
