"""
Exception hierarchy for the game core and the Discord transport.

Core errors are raised to the caller and mapped to distinct responses by the
interactions route; nothing in the core retries.
"""

from __future__ import annotations

from typing import Any


class GameError(Exception):
    """Base exception for all game-related errors."""


class DuplicateSessionError(GameError):
    """A session with this id already exists."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session {session_id!r} already exists")
        self.session_id = session_id


class SessionNotFoundError(GameError):
    """Session was never created or has already been resolved."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session {session_id!r} not found")
        self.session_id = session_id


class UnknownEventError(GameError):
    """Inbound interaction does not match any recognized kind or command."""


class InvalidChoiceError(GameError):
    """Choice value is not part of the active catalog."""

    def __init__(self, choice: str, valid: list[str]) -> None:
        super().__init__(f"Unknown choice {choice!r}; expected one of {valid}")
        self.choice = choice
        self.valid = valid


class CatalogError(GameError):
    """Option catalog or its beat table is inconsistent."""


class DiscordAPIError(Exception):
    """Discord REST call failed or could not be made."""

    def __init__(self, message: str, *, status_code: int | None = None, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
