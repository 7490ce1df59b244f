import json

import httpx
import pytest

from services.discord_api import DiscordClient, get_app_id, get_bot_token
from services.exceptions import DiscordAPIError


def _client(handler, token: str = "bot-token") -> DiscordClient:
    return DiscordClient(token=token, transport=httpx.MockTransport(handler))


@pytest.mark.anyio
async def test_delete_message_hits_webhook_endpoint() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    await _client(handler).delete_message("app-1", "tok", "m1")

    assert len(seen) == 1
    request = seen[0]
    assert request.method == "DELETE"
    assert request.url.path == "/api/v10/webhooks/app-1/tok/messages/m1"
    assert request.headers["Authorization"] == "Bot bot-token"
    assert request.headers["User-Agent"].startswith("DiscordBot")


@pytest.mark.anyio
async def test_edit_message_sends_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "m1"})

    await _client(handler).edit_message("app-1", "tok", "m1", {"content": "Nice choice", "components": []})

    assert seen[0].method == "PATCH"
    assert json.loads(seen[0].content) == {"content": "Nice choice", "components": []}


@pytest.mark.anyio
async def test_install_global_commands_returns_payload() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "PUT"
        assert request.url.path == "/api/v10/applications/app-1/commands"
        return httpx.Response(200, json=json.loads(request.content))

    commands = [{"name": "test", "description": "Basic command", "type": 1}]
    installed = await _client(handler).install_global_commands("app-1", commands)
    assert installed == commands


@pytest.mark.anyio
async def test_error_status_raises_with_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"message": "Unknown Message", "code": 10008})

    with pytest.raises(DiscordAPIError) as exc_info:
        await _client(handler).delete_message("app-1", "tok", "gone")
    assert exc_info.value.status_code == 404
    assert exc_info.value.body == {"message": "Unknown Message", "code": 10008}


@pytest.mark.anyio
async def test_transport_error_is_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    with pytest.raises(DiscordAPIError, match="failed"):
        await _client(handler).delete_message("app-1", "tok", "m1")


def test_credentials_come_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DISCORD_APP_ID", raising=False)
    monkeypatch.delenv("DISCORD_TOKEN", raising=False)
    with pytest.raises(DiscordAPIError):
        get_app_id()
    with pytest.raises(DiscordAPIError):
        get_bot_token()
    monkeypatch.setenv("DISCORD_APP_ID", " 123 ")
    monkeypatch.setenv("DISCORD_TOKEN", "secret")
    assert get_app_id() == "123"
    assert get_bot_token() == "secret"
