"""
Action validators - guard clauses run before any state changes.

Each validator raises a RulesError subclass on the first rule the action
breaks and returns the target player otherwise.
"""

from __future__ import annotations

from .state import Game, GameState, Player, get_player_or_die
from .action import ActionPayload
from .errors import (
    NotFoundError,
    InvalidPhaseError,
    OutOfRangeError,
    WrongTurnError,
    InvalidTargetError,
)


def validate_play_card(game: Game | None, payload: ActionPayload) -> Player:
    """Check a PlayCard action against the game."""
    if game is None:
        raise NotFoundError(f"No game {payload.game_id} exists.")
    if game.state == GameState.WAITING_PRESCIENT:
        raise InvalidPhaseError(f"{game.game_id} is waiting for a prescient reveal.")
    if game.state != GameState.IN_PROGRESS:
        raise InvalidPhaseError(f"{game.game_id} is not in progress.")

    target = get_player_or_die(game, payload.target_player)
    _check_card_number(target, payload.card_number)
    _check_investigator(game, payload.source_player)

    if payload.source_player == payload.target_player:
        raise InvalidTargetError("You cannot investigate yourself.")
    return target


def validate_reveal_card(game: Game | None, payload: ActionPayload) -> Player:
    """Check a RevealCard action against the game."""
    if game is None:
        raise NotFoundError(f"No game {payload.game_id} exists.")
    if game.state != GameState.WAITING_PRESCIENT:
        raise InvalidPhaseError(
            f"{game.game_id} is not waiting for a prescient reveal."
        )

    target = get_player_or_die(game, payload.target_player)
    _check_card_number(target, payload.card_number)
    _check_investigator(game, payload.source_player)
    return target


def _check_card_number(target: Player, card_number: int) -> None:
    if card_number < 1:
        raise OutOfRangeError("Card number must be >= 1.")
    if card_number > len(target.hand):
        raise OutOfRangeError(
            f"{target.player_id} only has {len(target.hand)} cards"
        )


def _check_investigator(game: Game, source_player: str) -> None:
    if game.current_investigator_id != source_player:
        raise WrongTurnError(f"{source_player} is not the current investigator.")
