"""Outbound Discord REST calls (webhook edits, command installation)."""

from __future__ import annotations

import logging
import os
from typing import Any

import httpx

from services.exceptions import DiscordAPIError

logger = logging.getLogger(__name__)

DISCORD_API_BASE = "https://discord.com/api/v10/"
USER_AGENT = "DiscordBot (https://github.com/discord/discord-example-app, 1.0.0)"
REQUEST_TIMEOUT_SECONDS = 10.0


def get_app_id() -> str:
    app_id = os.environ.get("DISCORD_APP_ID", "").strip()
    if not app_id:
        raise DiscordAPIError("Discord app id not configured (DISCORD_APP_ID)")
    return app_id


def get_bot_token() -> str:
    token = os.environ.get("DISCORD_TOKEN", "").strip()
    if not token:
        raise DiscordAPIError("Discord bot token not configured (DISCORD_TOKEN)")
    return token


class DiscordClient:
    """
    Thin async wrapper over the Discord REST API.

    A transport can be injected for tests (``httpx.MockTransport``). Non-2xx
    responses raise DiscordAPIError; callers decide whether to log or surface.
    """

    def __init__(
        self,
        *,
        token: str | None = None,
        base_url: str = DISCORD_API_BASE,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._base_url = base_url
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        token = self._token or get_bot_token()
        return {
            "Authorization": f"Bot {token}",
            "Content-Type": "application/json; charset=UTF-8",
            "User-Agent": USER_AGENT,
        }

    async def request(self, endpoint: str, *, method: str = "GET", json: Any = None) -> httpx.Response:
        headers = self._headers()
        async with httpx.AsyncClient(
            base_url=self._base_url,
            transport=self._transport,
            timeout=REQUEST_TIMEOUT_SECONDS,
        ) as client:
            try:
                response = await client.request(method, endpoint.lstrip("/"), headers=headers, json=json)
            except httpx.HTTPError as exc:
                raise DiscordAPIError(f"{method} {endpoint} failed: {exc}") from exc

        if response.is_error:
            try:
                body: Any = response.json()
            except ValueError:
                body = response.text
            raise DiscordAPIError(
                f"{method} {endpoint} returned {response.status_code}",
                status_code=response.status_code,
                body=body,
            )
        logger.debug("[discord] %s %s -> %s", method, endpoint, response.status_code)
        return response

    async def delete_message(self, app_id: str, interaction_token: str, message_id: str) -> None:
        await self.request(
            f"webhooks/{app_id}/{interaction_token}/messages/{message_id}",
            method="DELETE",
        )

    async def edit_message(
        self,
        app_id: str,
        interaction_token: str,
        message_id: str,
        body: dict[str, Any],
    ) -> None:
        await self.request(
            f"webhooks/{app_id}/{interaction_token}/messages/{message_id}",
            method="PATCH",
            json=body,
        )

    async def install_global_commands(self, app_id: str, commands: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Bulk-overwrite the application's global slash commands."""
        response = await self.request(f"applications/{app_id}/commands", method="PUT", json=commands)
        return response.json()


discord_client = DiscordClient()
