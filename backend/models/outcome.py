from dataclasses import dataclass


@dataclass(frozen=True)
class Outcome:
    winner_user_id: str | None     # None on a tie
    text: str                      # rendered result message
    loser_user_id: str | None = None
    winning_choice: str | None = None
    losing_choice: str | None = None
    verb: str | None = None

    @property
    def is_tie(self) -> bool:
        return self.winner_user_id is None
