"""Resolve one round between two participants."""

from __future__ import annotations

from models.outcome import Outcome
from models.session import Participant
from services.catalog import Catalog, get_catalog
from services.exceptions import InvalidChoiceError


def mention(user_id: str) -> str:
    return f"<@{user_id}>"


def validate_choice(choice: str, catalog: Catalog) -> None:
    if choice not in catalog:
        raise InvalidChoiceError(choice, catalog.values())


def resolve(a: Participant, b: Participant, catalog: Catalog | None = None) -> Outcome:
    """
    Decide the round between ``a`` and ``b``.

    Exactly one of: ``a`` beats ``b``, ``b`` beats ``a``, or a tie on equal
    choices. The beat relation comes from the catalog only.
    """
    catalog = catalog or get_catalog()
    validate_choice(a.choice, catalog)
    validate_choice(b.choice, catalog)

    if a.choice == b.choice:
        text = f"{mention(a.user_id)} and {mention(b.user_id)} draw with **{a.choice}**"
        return Outcome(winner_user_id=None, text=text)

    win, lose = (a, b) if catalog.beats(a.choice, b.choice) else (b, a)
    verb = catalog.verb(win.choice, lose.choice)
    text = (
        f"{mention(win.user_id)}'s **{win.choice}** {verb} "
        f"{mention(lose.user_id)}'s **{lose.choice}**"
    )
    return Outcome(
        winner_user_id=win.user_id,
        text=text,
        loser_user_id=lose.user_id,
        winning_choice=win.choice,
        losing_choice=lose.choice,
        verb=verb,
    )
