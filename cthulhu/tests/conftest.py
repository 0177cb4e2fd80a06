"""
Pytest fixtures for rules engine tests.
"""

import pytest

from ..engine_core.state import Card, Game, GameState, Player, Role


class ScriptedRandom:
    """
    Deterministic stand-in for the random source.

    Returns queued values in order, then the low end of the range.
    Every call is recorded as (a, b).
    """

    def __init__(self, *values: int):
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if self.values:
            return self.values.pop(0)
        return a


@pytest.fixture
def rng() -> ScriptedRandom:
    """A random source that always picks card 1 unless told otherwise."""
    return ScriptedRandom()


@pytest.fixture
def four_player_game() -> Game:
    """
    Round 1 of a 4-player game, alice to investigate.

    No Cthulhu and no Elder Sign is in play, so plays only end the game
    when a test puts those cards in a hand.
    """
    f = Card.FUTILE_INVESTIGATION
    g = Card.INSANITYS_GRASP
    players = [
        Player(player_id="alice", role=Role.INVESTIGATOR, hand=[f, f, g, f]),
        Player(player_id="bob", role=Role.CULTIST, hand=[f, g, f, f]),
        Player(player_id="carol", role=Role.INVESTIGATOR, hand=[g, f, f, g]),
        Player(player_id="dave", role=Role.INVESTIGATOR, hand=[f, f, f, f]),
    ]
    return Game(
        game_id="test_game",
        player_list=players,
        state=GameState.IN_PROGRESS,
        round=1,
        current_investigator_id="alice",
    )


def give_hand(game: Game, player_id: str, hand: list[Card]) -> None:
    """Replace a player's hand."""
    game.get_player(player_id).hand = list(hand)


def fill_visible(game: Game, count: int, card: Card = Card.FUTILE_INVESTIGATION) -> None:
    """Pretend `count` cards were already played this game."""
    game.visible_cards = [card] * count
