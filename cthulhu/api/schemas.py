"""
Pydantic Schemas for the rules service - request/response models.

These models define the contract between a front end and the engine.
Public views never include hands or roles; a player's own secrets are
served separately.

Error Codes:
- NOT_FOUND: Game or player does not exist
- INVALID_PHASE: Action does not match the game's phase
- OUT_OF_RANGE: Card number outside the target's hand
- WRONG_TURN: Actor is not the current investigator
- INVALID_TARGET: Investigators cannot target themselves
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field

from ..engine_core.action import Action


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    NOT_FOUND = "NOT_FOUND"
    INVALID_PHASE = "INVALID_PHASE"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    WRONG_TURN = "WRONG_TURN"
    INVALID_TARGET = "INVALID_TARGET"
    INVALID_CARD = "INVALID_CARD"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class GameStatus(str, Enum):
    """Game phase values."""
    WAITING_PRESCIENT = "waiting_prescient"
    IN_PROGRESS = "in_progress"
    PAUSED = "paused"
    CULTISTS_WON = "cultists_won"
    INVESTIGATORS_WON = "investigators_won"


# =============================================================================
# Shared Models
# =============================================================================

class SecretInfo(BaseModel):
    """One piece of knowledge a player holds."""
    type: str = Field(description="card or role")
    player: str
    card: Optional[str] = None
    card_number: Optional[int] = None
    role: Optional[str] = None


class PlayerInfo(BaseModel):
    """Public player information."""
    player_id: str
    name: str
    hand_size: int = 0
    is_investigator: bool = False
    is_paranoid: bool = False


# =============================================================================
# Request Models
# =============================================================================

class CardActionRequest(BaseModel):
    """Fields shared by both card actions."""
    game_id: str = Field(..., min_length=1)
    source_player: str = Field(..., description="The current investigator")
    target_player: str = Field(..., description="Whose hand the card comes from")
    card_number: int = Field(1, description="1-based position in the target's hand")


class PlayCardRequest(CardActionRequest):
    """Request to play a card from another player's hand."""

    def to_action(self) -> Action:
        return Action.play_card(
            self.game_id, self.source_player, self.target_player, self.card_number
        )


class RevealCardRequest(CardActionRequest):
    """Request to reveal a card after Prescient Vision. card_number is ignored."""

    def to_action(self) -> Action:
        return Action.reveal_card(
            self.game_id, self.source_player, self.target_player, self.card_number
        )


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class GameStateResponse(BaseModel):
    """Public state of one game."""
    game_id: str
    status: GameStatus
    round: int
    players: list[PlayerInfo] = Field(default_factory=list)
    current_investigator_id: Optional[str] = None
    paranoid_player_id: Optional[str] = None
    visible_cards: list[str] = Field(default_factory=list)
    discard_count: int = 0
    cards_until_round_end: int = 0
    api_version: str = "v1"


class ActionResponse(BaseModel):
    """Response after a card action resolved."""
    game_id: str
    success: bool = True
    card_number: int = Field(..., description="Card number recorded in the history")
    changes: list[str] = Field(default_factory=list)
    game_state: GameStateResponse
    api_version: str = "v1"


class SecretsResponse(BaseModel):
    """Everything one player knows."""
    game_id: str
    player_id: str
    secrets: list[SecretInfo] = Field(default_factory=list)
    api_version: str = "v1"
