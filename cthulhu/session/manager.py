"""
Game Manager - Tracks the games this process is resolving actions for.

Games are built by an external setup step and registered here.
No persistence - games are in-memory only.

Callers must not dispatch two actions for the same game at once;
the manager does no locking.
"""

from __future__ import annotations
import logging

from ..engine_core.state import Game
from ..engine_core.action import Action, ActionResult
from ..engine_core.reducer import Reducer
from ..engine_core.randomness import RandomSource, default_rng

logger = logging.getLogger(__name__)


class GameManager:
    """
    Manages games by ID.

    Responsibilities:
    - Hold externally created games
    - Route actions to the game they name
    - Drop finished games
    """

    def __init__(self, rng: RandomSource | None = None):
        self._games: dict[str, Game] = {}
        self.reducer = Reducer(rng=rng or default_rng())

    def register(self, game: Game) -> Game:
        """Start tracking a game, replacing any game with the same ID."""
        if game.game_id in self._games:
            logger.warning("Replacing game %s", game.game_id)
        self._games[game.game_id] = game
        return game

    def get_game(self, game_id: str) -> Game | None:
        """Get a game by ID."""
        return self._games.get(game_id)

    def remove_game(self, game_id: str) -> Game | None:
        """Stop tracking a game."""
        return self._games.pop(game_id, None)

    def list_games(self) -> list[str]:
        """List IDs of every tracked game."""
        return list(self._games)

    def list_active_games(self) -> list[str]:
        """List IDs of games that have not been won yet."""
        return [gid for gid, game in self._games.items() if not game.is_over]

    def dispatch(self, action: Action) -> ActionResult:
        """
        Apply an action to the game it names.

        An unknown game ID fails validation like any other missing game.
        """
        game = self.get_game(action.game_id)
        return self.reducer.apply(game, action)
