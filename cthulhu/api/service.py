"""
Rules Service - Business logic layer between a front end and the engine.

The service:
1. Translates requests to engine actions
2. Looks games up through the GameManager
3. Formats public views of a game

This layer is framework-agnostic and does no transport of its own.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .schemas import (
    PlayCardRequest,
    RevealCardRequest,
    ActionResponse,
    ErrorResponse,
    GameStateResponse,
    SecretsResponse,
    SecretInfo,
    PlayerInfo,
    ErrorCode,
    GameStatus,
)
from ..engine_core.action import Action, ActionResult
from ..engine_core.state import Game
from ..session import GameManager

logger = logging.getLogger(__name__)


@dataclass
class RulesService:
    """
    Main service for resolving card actions.

    Usage:
        service = RulesService()
        service.manager.register(game)

        response = service.play_card(PlayCardRequest(...))
        if isinstance(response, ErrorResponse):
            ...
    """
    manager: GameManager = field(default_factory=GameManager)

    def play_card(self, request: PlayCardRequest) -> ActionResponse | ErrorResponse:
        """Resolve a PlayCard request."""
        return self._dispatch(request.to_action())

    def reveal_card(self, request: RevealCardRequest) -> ActionResponse | ErrorResponse:
        """Resolve a Prescient Vision reveal."""
        return self._dispatch(request.to_action())

    def get_game_state(self, game_id: str) -> GameStateResponse | ErrorResponse:
        """Get the public state of a game."""
        game = self.manager.get_game(game_id)
        if game is None:
            return ErrorResponse(
                error=f"No game {game_id} exists.",
                error_code=ErrorCode.NOT_FOUND,
            )
        return self._build_game_state(game)

    def get_secrets(self, game_id: str, player_id: str) -> SecretsResponse | ErrorResponse:
        """Get what one player knows. Only that player should be shown this."""
        game = self.manager.get_game(game_id)
        player = game.get_player(player_id) if game else None
        if player is None:
            return ErrorResponse(
                error=f"No player {player_id} in game {game_id}.",
                error_code=ErrorCode.NOT_FOUND,
            )

        return SecretsResponse(
            game_id=game_id,
            player_id=player_id,
            secrets=[SecretInfo(**secret.to_dict()) for secret in player.secrets],
        )

    # =========================================================================
    # Helper methods
    # =========================================================================

    def _dispatch(self, action: Action) -> ActionResponse | ErrorResponse:
        result = self.manager.dispatch(action)
        if not result.success:
            logger.debug("Rejected %s: %s", action.action_type.value, result.error)
            return self._error_response(result)

        return ActionResponse(
            game_id=action.game_id,
            card_number=action.payload.card_number,
            changes=result.state_changes,
            game_state=self._build_game_state(result.new_state),
        )

    def _error_response(self, result: ActionResult) -> ErrorResponse:
        try:
            code = ErrorCode(result.error_code)
        except ValueError:
            code = ErrorCode.INTERNAL_ERROR
        return ErrorResponse(error=result.error or "", error_code=code)

    def _build_game_state(self, game: Game) -> GameStateResponse:
        """Build the public view of a game."""
        players = [
            PlayerInfo(
                player_id=player.player_id,
                name=player.name,
                hand_size=player.hand_size,
                is_investigator=player.player_id == game.current_investigator_id,
                is_paranoid=player.player_id == game.paranoid_player_id,
            )
            for player in game.player_list
        ]

        return GameStateResponse(
            game_id=game.game_id,
            status=GameStatus(game.state.value),
            round=game.round,
            players=players,
            current_investigator_id=game.current_investigator_id,
            paranoid_player_id=game.paranoid_player_id,
            visible_cards=[card.value for card in game.visible_cards],
            discard_count=len(game.discards),
            cards_until_round_end=max(game.round_card_limit - len(game.visible_cards), 0),
        )
