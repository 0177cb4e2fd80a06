"""
Reducer - Applies actions to a game.

The reducer is the single point of state mutation.
All state changes must go through on_play_card() / on_reveal_card(),
or the Reducer wrapper that turns rule errors into ActionResults.

Design principles:
- Validates before applying: a rejected action leaves the game untouched
- Mutates the game in place and appends the action to its history
- Delegates card effects to card_effects.CARD_HANDLERS
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import time

from .state import Card, CardSecret, Game, GameState, FINAL_ROUND, get_player_or_die
from .action import Action, ActionType, ActionResult
from .card_effects import CardPlay, apply_card_effect
from .errors import RulesError, InvalidCardError
from .randomness import RandomSource, default_rng, draw_card_number
from .validators import validate_play_card, validate_reveal_card

logger = logging.getLogger(__name__)


def on_play_card(
    game: Game | None,
    action: Action,
    rng: RandomSource | None = None,
) -> Game:
    """
    Update the game given a PlayCard action.

    Raises a RulesError if the action is not allowed.
    """
    _resolve_play_card(game, action, rng or default_rng())
    return game


def on_reveal_card(
    game: Game | None,
    action: Action,
    rng: RandomSource | None = None,
) -> Game:
    """
    Update the game given a RevealCard action (Prescient Vision).

    The requested card number is replaced with a random one: players only
    choose whose hand to reveal from.
    """
    _resolve_reveal_card(game, action, rng or default_rng())
    return game


def _resolve_play_card(game: Game | None, action: Action, rng: RandomSource) -> Card | None:
    payload = action.payload
    validate_play_card(game, payload)

    card = play_card(
        game, payload.source_player, payload.target_player, payload.card_number, rng
    )
    _record(game, action)
    return card


def _resolve_reveal_card(game: Game | None, action: Action, rng: RandomSource) -> Card | None:
    payload = action.payload
    target = validate_reveal_card(game, payload)

    payload.card_number = draw_card_number(rng, len(target.hand))

    card = reveal_card(
        game, payload.source_player, payload.target_player, payload.card_number
    )
    _record(game, action)
    return card


def _record(game: Game, action: Action) -> None:
    action.timestamp = time.time()
    game.history.append(action)


def play_card(
    game: Game,
    source_player_id: str,
    target_player_id: str,
    card_number: int,
    rng: RandomSource | None = None,
) -> Card | None:
    """
    Play a card from the target's hand, returning the card played.

    The card number only counts when the investigator already knows that
    exact card from a reveal; otherwise the card is drawn at random.
    """
    target = get_player_or_die(game, target_player_id)
    investigator = get_player_or_die(game, source_player_id)

    # Nothing to play from an empty hand.
    if not target.hand:
        return None

    if investigator.known_card(target_player_id, card_number) is None:
        card_number = draw_card_number(rng or default_rng(), len(target.hand))

    card_index = card_number - 1
    # Ignore attempts to play bogus cards.
    if card_index < 0 or card_index >= len(target.hand):
        return None

    card = target.hand.pop(card_index)
    # Played cards go on the end; Mirage fixes up its own slot.
    game.visible_cards.append(card)
    logger.debug(
        "Game %s: %s played %s from %s",
        game.game_id, source_player_id, card, target_player_id,
    )

    apply_card_effect(CardPlay(game=game, card=card, investigator=investigator, target=target))

    round_ended = handle_potential_end_of_round(game)

    # A paranoid player takes the flashlight back unless the round ended.
    # The Prescient Vision target keeps it until they reveal.
    if (
        game.paranoid_player_id
        and not round_ended
        and game.state != GameState.WAITING_PRESCIENT
    ):
        game.current_investigator_id = game.paranoid_player_id
    else:
        game.current_investigator_id = target_player_id
    return card


def reveal_card(
    game: Game,
    source_player_id: str,
    target_player_id: str,
    card_number: int,
) -> Card | None:
    """
    Reveal a card from the target's hand to everyone without playing it.

    The rules say the card is hidden again, but it stays known until the
    round ends since players miss it too easily.
    """
    target = get_player_or_die(game, target_player_id)

    card_index = card_number - 1
    # Ignore attempts to reveal bogus cards.
    if card_index < 0 or card_index >= len(target.hand):
        return None

    card = target.hand[card_index]
    secret = CardSecret(player=target_player_id, card=card, card_number=card_number)
    for player in game.player_list:
        player.secrets.append(secret)
    logger.debug(
        "Game %s: %s revealed card %d of %s (%s)",
        game.game_id, source_player_id, card_number, target_player_id, card.value,
    )

    game.state = GameState.IN_PROGRESS

    round_ended = handle_potential_end_of_round(game)

    # Otherwise the revealing investigator keeps the turn.
    if game.paranoid_player_id and not round_ended:
        game.current_investigator_id = game.paranoid_player_id
    return card


def handle_potential_end_of_round(game: Game) -> bool:
    """
    Close the round if enough cards are visible, returning True if it ended.

    The count is compared against players * round exactly: Mirage can make
    the count hit a multiple of the player count twice.
    """
    if game.state != GameState.IN_PROGRESS:
        return False

    if len(game.visible_cards) != game.round_card_limit:
        return False

    if game.round == FINAL_ROUND:
        logger.info("Game %s: final round over, cultists win", game.game_id)
        game.state = GameState.CULTISTS_WON
        return True

    logger.info("Game %s: round %d over", game.game_id, game.round)
    game.state = GameState.PAUSED
    game.paranoid_player_id = None
    return True


@dataclass
class Reducer:
    """
    Reducer applies actions to a game.

    Stateless apart from the random source - all state is in Game.
    """
    rng: RandomSource = field(default_factory=default_rng)

    def apply(self, game: Game | None, action: Action) -> ActionResult:
        """
        Apply an action to the game.

        Returns ActionResult with the updated game or the rule it broke.
        """
        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code="NO_HANDLER",
            )

        try:
            return handler(game, action)
        except InvalidCardError:
            raise
        except RulesError as e:
            return ActionResult.failure(str(e), error_code=e.error_code)

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.PLAY_CARD: self._handle_play_card,
            ActionType.REVEAL_CARD: self._handle_reveal_card,
        }
        return handlers.get(action_type)

    def _handle_play_card(self, game: Game | None, action: Action) -> ActionResult:
        """Handle play card action."""
        before = (game.state, game.round) if game else None
        card = _resolve_play_card(game, action, self.rng)

        payload = action.payload
        changes = []
        if card is not None:
            changes.append(
                f"{payload.source_player} played {card.value} from {payload.target_player}'s hand"
            )
        changes.extend(_phase_changes(game, *before))
        return ActionResult.success_with_state(game, changes=changes)

    def _handle_reveal_card(self, game: Game | None, action: Action) -> ActionResult:
        """Handle a Prescient Vision reveal."""
        before = (game.state, game.round) if game else None
        card = _resolve_reveal_card(game, action, self.rng)

        payload = action.payload
        changes = []
        if card is not None:
            changes.append(
                f"Card {payload.card_number} of {payload.target_player}'s hand is {card.value}"
            )
        changes.extend(_phase_changes(game, *before))
        return ActionResult.success_with_state(game, changes=changes)


def _phase_changes(game: Game, state_before: GameState, round_before: int) -> list[str]:
    if game.state == state_before:
        return []
    if game.state == GameState.PAUSED:
        return [f"Round {round_before} ended"]
    if game.state == GameState.CULTISTS_WON:
        return ["Cultists won"]
    if game.state == GameState.INVESTIGATORS_WON:
        return ["Investigators won"]
    if game.state == GameState.WAITING_PRESCIENT:
        return ["Waiting for a prescient reveal"]
    return []


def apply_action(
    game: Game | None,
    action: Action,
    rng: RandomSource | None = None,
) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer(rng=rng or default_rng())
    return reducer.apply(game, action)
