"""Install the bot's global slash commands. Run once after changing them."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any

from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), ".env"))
logging.basicConfig(level=logging.INFO)

from services.catalog import Catalog, get_catalog  # noqa: E402
from services.discord_api import discord_client, get_app_id  # noqa: E402
from services.events import CHALLENGE_COMMAND, TEST_COMMAND  # noqa: E402

CHAT_INPUT = 1
STRING_OPTION = 3
# Guild install + user install; guild, bot DM and private channel contexts.
INTEGRATION_TYPES = [0, 1]
CONTEXTS = [0, 1, 2]


def build_commands(catalog: Catalog) -> list[dict[str, Any]]:
    return [
        {
            "name": TEST_COMMAND,
            "description": "Basic command",
            "type": CHAT_INPUT,
            "integration_types": INTEGRATION_TYPES,
            "contexts": CONTEXTS,
        },
        {
            "name": CHALLENGE_COMMAND,
            "description": "Challenge to a match of rock paper scissors",
            "type": CHAT_INPUT,
            "options": [
                {
                    "type": STRING_OPTION,
                    "name": "object",
                    "description": "Pick your object",
                    "required": True,
                    "choices": [{"name": opt.label, "value": opt.value} for opt in catalog.options],
                }
            ],
            "integration_types": INTEGRATION_TYPES,
            "contexts": [0, 2],
        },
    ]


async def main() -> None:
    commands = build_commands(get_catalog())
    installed = await discord_client.install_global_commands(get_app_id(), commands)
    logging.info("Installed %d global command(s): %s", len(installed), [c.get("name") for c in installed])


if __name__ == "__main__":
    asyncio.run(main())
