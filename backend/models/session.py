from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from services.catalog import Catalog


class SessionStatus(str, Enum):
    AWAITING = "awaiting"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class Participant:
    user_id: str
    choice: str                            # GameOption.value


@dataclass
class GameSession:
    id: str                                # interaction id of the challenge
    initiator: Participant
    status: SessionStatus = SessionStatus.AWAITING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    catalog: Catalog | None = field(default=None, repr=False, compare=False)  # rules the round is played by
