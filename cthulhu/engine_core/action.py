"""
Action System - Actions, payloads, and results.

Two player actions exist:
1. PLAY_CARD: the investigator flips a card from another player's hand
2. REVEAL_CARD: after Prescient Vision, a card is shown without being played

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    PLAY_CARD = "play_card"
    REVEAL_CARD = "reveal_card"


@dataclass
class ActionPayload:
    """
    Payload for an action.

    card_number is 1-based. For reveals it is replaced by a random draw
    before the action reaches the history.
    """
    game_id: str
    source_player: str
    target_player: str
    card_number: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "game_id": self.game_id,
            "source_player": self.source_player,
            "target_player": self.target_player,
            "card_number": self.card_number,
        }


@dataclass
class Action:
    """
    A complete action to be applied to a game.

    Actions are:
    - Validated before application
    - Logged to the game's history once resolved
    """
    action_type: ActionType
    payload: ActionPayload
    timestamp: float | None = None  # set when the action reaches the history

    @property
    def game_id(self) -> str:
        return self.payload.game_id

    @classmethod
    def play_card(
        cls,
        game_id: str,
        source_player: str,
        target_player: str,
        card_number: int,
    ) -> Action:
        """Factory for play card action."""
        return cls(
            action_type=ActionType.PLAY_CARD,
            payload=ActionPayload(
                game_id=game_id,
                source_player=source_player,
                target_player=target_player,
                card_number=card_number,
            ),
        )

    @classmethod
    def reveal_card(
        cls,
        game_id: str,
        source_player: str,
        target_player: str,
        card_number: int = 1,
    ) -> Action:
        """Factory for a Prescient Vision reveal."""
        return cls(
            action_type=ActionType.REVEAL_CARD,
            payload=ActionPayload(
                game_id=game_id,
                source_player=source_player,
                target_player=target_player,
                card_number=card_number,
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "action_type": self.action_type.value,
            **self.payload.to_dict(),
        }


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - The game (if succeeded)
    - Errors (if failed)
    - Human-readable changes for display
    """
    success: bool
    new_state: Any | None = None  # Game
    error: str | None = None
    error_code: str | None = None

    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with the updated game."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
        )
