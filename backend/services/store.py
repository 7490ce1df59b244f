"""In-memory session store. Keyed by the interaction id that opened the challenge."""

from __future__ import annotations

import logging
import math
import os
import threading
from datetime import datetime, timedelta, timezone

from models.option import GameOption
from models.outcome import Outcome
from models.session import GameSession, Participant, SessionStatus
from services.catalog import Catalog, get_catalog
from services.exceptions import DuplicateSessionError, SessionNotFoundError
from services.game import resolve, validate_choice

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Owns every pending GameSession.

    Only two mutations exist: create (AWAITING) and resolve (pop, mark
    RESOLVED, compute outcome). Both run their check-and-mutate step under a
    lock so a session is resolved at most once, whichever thread or task gets
    there first. The lock is never held across I/O.

    Each session keeps the catalog it was created with, so a round is always
    resolved by the rules it started under.

    ``ttl_seconds`` is off by default: an unanswered challenge stays until the
    process exits. When set, expired sessions behave as if they were never
    created.
    """

    def __init__(
        self,
        *,
        catalog: Catalog | None = None,
        ttl_seconds: float | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._sessions: dict[str, GameSession] = {}
        self._catalog = catalog
        self._ttl = timedelta(seconds=ttl_seconds) if ttl_seconds else None

    @property
    def ttl_seconds(self) -> float | None:
        return self._ttl.total_seconds() if self._ttl is not None else None

    @property
    def catalog(self) -> Catalog:
        """Catalog for new sessions; raises CatalogError when RPS_CATALOG is invalid."""
        return self._catalog or get_catalog()

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            session = self._sessions.get(session_id)  # type: ignore[arg-type]
            return session is not None and not self._is_expired(session)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _is_expired(self, session: GameSession, now: datetime | None = None) -> bool:
        if self._ttl is None:
            return False
        now = now or datetime.now(timezone.utc)
        return now - session.created_at > self._ttl

    def _live(self, session_id: str) -> GameSession:
        # Caller holds the lock.
        session = self._sessions.get(session_id)
        if session is None or self._is_expired(session):
            self._sessions.pop(session_id, None)
            logger.warning("[store] No such session: session_id=%s", session_id)
            raise SessionNotFoundError(session_id)
        return session

    def create_session(
        self,
        session_id: str,
        initiator_user_id: str,
        initiator_choice: str,
    ) -> GameSession:
        """Open a challenge; raises DuplicateSessionError if the id is taken."""
        catalog = self.catalog
        validate_choice(initiator_choice, catalog)
        session = GameSession(
            id=session_id,
            initiator=Participant(user_id=initiator_user_id, choice=initiator_choice),
            catalog=catalog,
        )
        with self._lock:
            existing = self._sessions.get(session_id)
            if existing is not None and not self._is_expired(existing):
                raise DuplicateSessionError(session_id)
            self._sessions[session_id] = session
        logger.info(
            "[store] Session created: session_id=%s initiator=%s choice=%s",
            session_id,
            initiator_user_id,
            initiator_choice,
        )
        return session

    def shuffled_options(self, session_id: str) -> list[GameOption]:
        """Options of the session's catalog in random order; raises SessionNotFoundError."""
        with self._lock:
            session = self._live(session_id)
        return (session.catalog or self.catalog).shuffled_options()

    def resolve_session(
        self,
        session_id: str,
        second_user_id: str,
        second_choice: str,
    ) -> Outcome:
        """
        Resolve the challenge against the second party and forget it.

        Raises SessionNotFoundError when the session is unknown, expired or
        already resolved; these cases are not distinguished. An invalid
        second choice raises InvalidChoiceError and keeps the session.
        """
        with self._lock:
            session = self._live(session_id)
            catalog = session.catalog or self.catalog
            validate_choice(second_choice, catalog)
            del self._sessions[session_id]

        session.status = SessionStatus.RESOLVED
        outcome = resolve(
            session.initiator,
            Participant(user_id=second_user_id, choice=second_choice),
            catalog,
        )
        logger.info(
            "[store] Session resolved: session_id=%s winner=%s",
            session_id,
            outcome.winner_user_id or "tie",
        )
        return outcome

    def purge_expired(self, *, now: datetime | None = None) -> int:
        """Drop expired sessions; returns how many were removed."""
        if self._ttl is None:
            return 0
        now = now or datetime.now(timezone.utc)
        with self._lock:
            expired = [sid for sid, s in self._sessions.items() if self._is_expired(s, now)]
            for sid in expired:
                del self._sessions[sid]
        if expired:
            logger.info("[store] Purged %d expired session(s)", len(expired))
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()


def get_session_ttl() -> float | None:
    """
    TTL in seconds from RPS_SESSION_TTL_SECONDS env.

    Unset, zero, negative or unparseable values disable eviction.
    """
    raw = os.environ.get("RPS_SESSION_TTL_SECONDS", "").strip()
    if not raw:
        return None
    try:
        ttl = float(raw)
    except ValueError:
        logger.warning("[store] Ignoring RPS_SESSION_TTL_SECONDS=%r: not a number of seconds", raw)
        return None
    if not math.isfinite(ttl) or ttl > timedelta.max.total_seconds():
        logger.warning("[store] Ignoring RPS_SESSION_TTL_SECONDS=%r: out of range", raw)
        return None
    return ttl if ttl > 0 else None


session_store = SessionStore(ttl_seconds=get_session_ttl())
