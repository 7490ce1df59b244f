from datetime import datetime

from models import GameOption, GameSession, Outcome, Participant, SessionStatus


def test_game_session_defaults() -> None:
    session = GameSession(id="g1", initiator=Participant(user_id="alice", choice="rock"))
    assert session.status is SessionStatus.AWAITING
    assert isinstance(session.created_at, datetime)
    assert session.created_at.tzinfo is not None
    assert session.initiator.choice == "rock"


def test_outcome_tie_flag() -> None:
    tie = Outcome(winner_user_id=None, text="draw")
    win = Outcome(winner_user_id="alice", text="alice wins", loser_user_id="bob")
    assert tie.is_tie is True
    assert win.is_tie is False


def test_game_option_select_payload() -> None:
    option = GameOption("rock", "Rock", "solid")
    assert option.to_select_option() == {"label": "Rock", "value": "rock", "description": "solid"}
