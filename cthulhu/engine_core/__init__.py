"""
Engine Core - Turn resolution for the hidden-role card game.

The engine is the runtime that:
1. Validates a PlayCard or RevealCard action
2. Moves the chosen card and applies its effect
3. Detects the end of a round or of the game
4. Passes the investigator role on
5. Appends the action to the game's history
"""

from .state import (
    Card,
    Role,
    GameState,
    SecretType,
    CardSecret,
    RoleSecret,
    Secret,
    Player,
    Game,
    get_player_or_die,
)
from .action import Action, ActionType, ActionPayload, ActionResult
from .errors import (
    RulesError,
    NotFoundError,
    InvalidPhaseError,
    OutOfRangeError,
    WrongTurnError,
    InvalidTargetError,
    InvalidCardError,
)
from .reducer import Reducer, apply_action, on_play_card, on_reveal_card
from .card_effects import CARD_HANDLERS, CardPlay

__all__ = [
    "Card",
    "Role",
    "GameState",
    "SecretType",
    "CardSecret",
    "RoleSecret",
    "Secret",
    "Player",
    "Game",
    "get_player_or_die",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "RulesError",
    "NotFoundError",
    "InvalidPhaseError",
    "OutOfRangeError",
    "WrongTurnError",
    "InvalidTargetError",
    "InvalidCardError",
    "Reducer",
    "apply_action",
    "on_play_card",
    "on_reveal_card",
    "CARD_HANDLERS",
    "CardPlay",
]
