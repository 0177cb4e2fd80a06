"""
Card Effects - What happens once a card lands face-up.

Every card maps to exactly one handler in CARD_HANDLERS. Handlers mutate
the game in place; round and turn bookkeeping happen afterwards in the
reducer.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable
import logging

from .state import Card, Game, GameState, Player, RoleSecret, FINAL_ROUND
from .errors import InvalidCardError

logger = logging.getLogger(__name__)


@dataclass
class CardPlay:
    """
    Context for resolving one played card.

    investigator picked the card, target held it.
    """
    game: Game
    card: Card
    investigator: Player
    target: Player


def handle_no_op(play: CardPlay) -> None:
    """Futile Investigation and Insanity's Grasp do nothing."""


def handle_cthulhu(play: CardPlay) -> None:
    """Cultists win once no Cthulhu is left in a hand or the discards."""
    game = play.game
    if Card.CTHULHU in game.discards:
        return
    for player in game.player_list:
        if Card.CTHULHU in player.hand:
            return

    logger.info("Game %s: the last Cthulhu was found", game.game_id)
    game.state = GameState.CULTISTS_WON


def handle_elder_sign(play: CardPlay) -> None:
    """Investigators win with one visible Elder Sign per player."""
    game = play.game
    if game.count_visible(Card.ELDER_SIGN) >= game.num_players:
        logger.info("Game %s: all Elder Signs found", game.game_id)
        game.state = GameState.INVESTIGATORS_WON


def handle_evil_presence(play: CardPlay) -> None:
    """The target's whole hand goes to the discards."""
    play.game.discards.extend(play.target.hand)
    play.target.hand = []


def handle_mirage(play: CardPlay) -> None:
    """
    Replace the most recent visible Elder Sign with the Mirage.

    The Mirage was already appended to visible_cards, so it is dropped from
    the end once it takes the Elder Sign's slot.
    """
    game = play.game
    for i in range(len(game.visible_cards) - 1, -1, -1):
        if game.visible_cards[i] != Card.ELDER_SIGN:
            continue

        game.discards.append(game.visible_cards[i])
        game.visible_cards[i] = Card.MIRAGE
        game.visible_cards.pop()
        break

    if game.round == FINAL_ROUND:
        logger.info("Game %s: Mirage on the final round", game.game_id)
        game.state = GameState.CULTISTS_WON


def handle_paranoia(play: CardPlay) -> None:
    """The target takes the investigator role back after every play this round."""
    play.game.paranoid_player_id = play.target.player_id


def handle_private_eye(play: CardPlay) -> None:
    """Only the investigator learns the target's role."""
    play.investigator.secrets.append(
        RoleSecret(player=play.target.player_id, role=play.target.role)
    )


def handle_prescient_vision(play: CardPlay) -> None:
    # The target reveals a card next; end of round waits for it
    play.game.state = GameState.WAITING_PRESCIENT


CARD_HANDLERS: dict[Card, Callable[[CardPlay], None]] = {
    Card.CTHULHU: handle_cthulhu,
    Card.ELDER_SIGN: handle_elder_sign,
    Card.FUTILE_INVESTIGATION: handle_no_op,
    Card.INSANITYS_GRASP: handle_no_op,
    Card.EVIL_PRESENCE: handle_evil_presence,
    Card.MIRAGE: handle_mirage,
    Card.PARANOIA: handle_paranoia,
    Card.PRIVATE_EYE: handle_private_eye,
    Card.PRESCIENT_VISION: handle_prescient_vision,
}


def apply_card_effect(play: CardPlay) -> None:
    """Run the handler for the played card."""
    handler = CARD_HANDLERS.get(play.card)
    if handler is None:
        raise InvalidCardError(f"Invalid card type: {play.card}")
    handler(play)
