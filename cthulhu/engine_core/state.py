"""
Game State - Cards, roles, secrets, players and the game aggregate.

Design principles:
- Mutable in place: a resolver owns one Game for the duration of a call
- Closed enums: every card and phase is known up front
- Cards move between containers, they are never duplicated
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union
from copy import deepcopy

from .errors import NotFoundError


class Card(Enum):
    """Every card in the deck."""
    CTHULHU = "cthulhu"
    ELDER_SIGN = "elder_sign"
    FUTILE_INVESTIGATION = "futile_investigation"
    INSANITYS_GRASP = "insanitys_grasp"
    EVIL_PRESENCE = "evil_presence"
    MIRAGE = "mirage"
    PARANOIA = "paranoia"
    PRIVATE_EYE = "private_eye"
    PRESCIENT_VISION = "prescient_vision"


class Role(Enum):
    """Secret roles, dealt once at game creation."""
    INVESTIGATOR = "investigator"
    CULTIST = "cultist"


class GameState(Enum):
    """Phase of a game."""
    WAITING_PRESCIENT = "waiting_prescient"  # A RevealCard must come next
    IN_PROGRESS = "in_progress"
    PAUSED = "paused"  # Between rounds
    CULTISTS_WON = "cultists_won"
    INVESTIGATORS_WON = "investigators_won"


TERMINAL_STATES = frozenset({GameState.CULTISTS_WON, GameState.INVESTIGATORS_WON})

# Rounds per game
FINAL_ROUND = 4


class SecretType(Enum):
    """Kinds of knowledge a player can hold."""
    CARD = "card"
    ROLE = "role"


@dataclass(frozen=True)
class CardSecret:
    """
    Knowledge that a position in a player's hand held a given card.

    card_number is 1-based, matching the actions.
    """
    player: str
    card: Card
    card_number: int

    @property
    def secret_type(self) -> SecretType:
        return SecretType.CARD

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.secret_type.value,
            "player": self.player,
            "card": self.card.value,
            "card_number": self.card_number,
        }


@dataclass(frozen=True)
class RoleSecret:
    """Knowledge of another player's role."""
    player: str
    role: Role

    @property
    def secret_type(self) -> SecretType:
        return SecretType.ROLE

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.secret_type.value,
            "player": self.player,
            "role": self.role.value,
        }


Secret = Union[CardSecret, RoleSecret]


@dataclass
class Player:
    """
    A seat at the table.

    The hand is face-down to everyone else; the role never changes.
    """
    player_id: str
    role: Role
    hand: list[Card] = field(default_factory=list)
    secrets: list[Secret] = field(default_factory=list)
    name: str = ""

    def __post_init__(self):
        if not self.name:
            self.name = self.player_id

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    def known_card(self, target_id: str, card_number: int) -> CardSecret | None:
        """Return the card secret this player holds for an exact hand position."""
        for secret in self.secrets:
            if (
                isinstance(secret, CardSecret)
                and secret.player == target_id
                and secret.card_number == card_number
            ):
                return secret
        return None

    def knows_role_of(self, target_id: str) -> bool:
        return any(
            isinstance(s, RoleSecret) and s.player == target_id
            for s in self.secrets
        )


@dataclass
class Game:
    """
    Complete state of one game.

    Built by an external setup step; the reducer only mutates it.
    """
    game_id: str
    player_list: list[Player] = field(default_factory=list)
    state: GameState = GameState.IN_PROGRESS
    round: int = 1
    current_investigator_id: str | None = None
    paranoid_player_id: str | None = None

    # Cards played face-up this round, in order
    visible_cards: list[Card] = field(default_factory=list)
    discards: list[Card] = field(default_factory=list)

    # Append-only log of resolved actions
    history: list[Any] = field(default_factory=list)

    @property
    def num_players(self) -> int:
        return len(self.player_list)

    @property
    def round_card_limit(self) -> int:
        """Number of visible cards that closes the current round."""
        return self.num_players * self.round

    @property
    def is_over(self) -> bool:
        return self.state in TERMINAL_STATES

    def get_player(self, player_id: str) -> Player | None:
        """Get player by ID."""
        for p in self.player_list:
            if p.player_id == player_id:
                return p
        return None

    def count_visible(self, card: Card) -> int:
        return sum(1 for c in self.visible_cards if c == card)

    def clone(self) -> Game:
        """Deep copy the game."""
        return deepcopy(self)


def get_player_or_die(game: Game, player_id: str) -> Player:
    """Look up a player, raising NotFoundError if they are not in the game."""
    player = game.get_player(player_id)
    if player is None:
        raise NotFoundError(f"Player {player_id} is not in game {game.game_id}.")
    return player
