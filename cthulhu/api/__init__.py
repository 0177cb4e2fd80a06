"""
API Module - Framework-agnostic access to the rules engine.

A front end:
1. Registers a game built by its own setup step
2. Submits PlayCard / RevealCard requests
3. Shows the public game state, and each player their own secrets

Transport (HTTP, websockets) is left to the caller.
"""

from .schemas import (
    # Requests
    PlayCardRequest,
    RevealCardRequest,
    # Responses
    ActionResponse,
    GameStateResponse,
    SecretsResponse,
    ErrorResponse,
    # Shared
    PlayerInfo,
    SecretInfo,
    ErrorCode,
    GameStatus,
)
from .service import RulesService

__all__ = [
    # Requests
    "PlayCardRequest",
    "RevealCardRequest",
    # Responses
    "ActionResponse",
    "GameStateResponse",
    "SecretsResponse",
    "ErrorResponse",
    # Shared
    "PlayerInfo",
    "SecretInfo",
    "ErrorCode",
    "GameStatus",
    # Service
    "RulesService",
]
