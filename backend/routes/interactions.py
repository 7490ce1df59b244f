"""Interactions webhook: the single endpoint Discord posts every event to."""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import JSONResponse

from services import messages
from services.discord_api import discord_client, get_app_id
from services.events import (
    AcceptChallenge,
    HelloWorldCommand,
    JoinSession,
    Ping,
    StartSession,
    parse_event,
)
from services.exceptions import (
    CatalogError,
    DiscordAPIError,
    DuplicateSessionError,
    InvalidChoiceError,
    SessionNotFoundError,
    UnknownEventError,
)
from services.signature import verify_discord_request
from services.store import session_store

router = APIRouter(tags=["interactions"])
logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _delete_challenge_message(token: str | None, message_id: str | None) -> None:
    if not token or not message_id:
        return
    try:
        await discord_client.delete_message(get_app_id(), token, message_id)
    except DiscordAPIError as exc:
        logger.error("[interactions] Deleting challenge message %s failed: %s", message_id, exc, exc_info=True)


async def _close_choice_message(token: str | None, message_id: str | None) -> None:
    if not token or not message_id:
        return
    try:
        await discord_client.edit_message(get_app_id(), token, message_id, messages.nice_choice_edit())
    except DiscordAPIError as exc:
        logger.error("[interactions] Editing choice message %s failed: %s", message_id, exc, exc_info=True)


@router.post("/interactions")
async def interactions(
    background_tasks: BackgroundTasks,
    body: bytes = Depends(verify_discord_request),
) -> Any:
    """
    Handle one interaction.

    Unsigned requests get 401, unknown or malformed events 400. Game errors
    become user-facing messages so one bad session never affects the next
    request.
    """
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("[interactions] Rejected body that is not JSON")
        return _error(400, "malformed interaction")
    if not isinstance(payload, dict):
        return _error(400, "malformed interaction")

    logger.info("[interactions] Interaction type: %s", payload.get("type"))
    try:
        event = parse_event(payload)
    except UnknownEventError as exc:
        logger.warning("[interactions] %s (type=%s)", exc, payload.get("type"))
        return _error(400, str(exc))

    if isinstance(event, Ping):
        return messages.pong()

    if isinstance(event, HelloWorldCommand):
        return messages.hello_world()

    if isinstance(event, StartSession):
        try:
            session_store.create_session(event.session_id, event.user_id, event.choice)
        except DuplicateSessionError as exc:
            logger.warning("[interactions] %s", exc)
            return _error(409, str(exc))
        except InvalidChoiceError as exc:
            logger.warning("[interactions] %s", exc)
            return messages.invalid_choice(exc.valid)
        except CatalogError as exc:
            logger.error("[interactions] Catalog misconfigured: %s", exc)
            return _error(503, "game catalog misconfigured")
        return messages.challenge_prompt(event.session_id, event.user_id)

    if isinstance(event, AcceptChallenge):
        try:
            options = session_store.shuffled_options(event.session_id)
        except SessionNotFoundError:
            return messages.invalid_game()
        background_tasks.add_task(_delete_challenge_message, event.token, event.message_id)
        return messages.choice_prompt(event.session_id, options)

    if isinstance(event, JoinSession):
        try:
            outcome = session_store.resolve_session(event.session_id, event.user_id, event.choice)
        except SessionNotFoundError:
            return messages.invalid_game()
        except InvalidChoiceError as exc:
            logger.warning("[interactions] %s", exc)
            return messages.invalid_choice(exc.valid)
        background_tasks.add_task(_close_choice_message, event.token, event.message_id)
        return messages.result(outcome.text)

    logger.error("[interactions] Unhandled event %r", event)
    return _error(400, "unknown interaction type")
