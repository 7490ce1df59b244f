from .option import GameOption
from .outcome import Outcome
from .session import GameSession, Participant, SessionStatus

__all__ = [
    "GameOption",
    "GameSession",
    "Outcome",
    "Participant",
    "SessionStatus",
]
