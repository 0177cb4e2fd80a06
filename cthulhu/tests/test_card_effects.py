"""
Tests for card effect handlers.
"""

import pytest

from ..engine_core.state import Card, GameState, Role, RoleSecret
from ..engine_core.action import Action
from ..engine_core.card_effects import CARD_HANDLERS, CardPlay, apply_card_effect
from ..engine_core.errors import InvalidCardError, InvalidPhaseError
from ..engine_core.reducer import on_play_card
from .conftest import give_hand, fill_visible


def play_first_card_of_bob(game, rng):
    on_play_card(game, Action.play_card("test_game", "alice", "bob", 1), rng)


class TestHandlerTable:
    """Tests for the card -> handler mapping."""

    def test_every_card_has_a_handler(self):
        """The handler table covers the whole deck."""
        assert set(CARD_HANDLERS) == set(Card)

    def test_unknown_card_raises(self, four_player_game):
        """A value outside the deck is rejected."""
        alice = four_player_game.get_player("alice")
        play = CardPlay(game=four_player_game, card="joker", investigator=alice, target=alice)

        with pytest.raises(InvalidCardError):
            apply_card_effect(play)


class TestCthulhu:
    """Tests for Cthulhu."""

    def test_last_cthulhu_wins_for_cultists(self, four_player_game, rng):
        """He rises once nobody holds another Cthulhu."""
        game = four_player_game
        give_hand(game, "bob", [Card.CTHULHU, Card.FUTILE_INVESTIGATION])

        play_first_card_of_bob(game, rng)

        assert game.state == GameState.CULTISTS_WON

    def test_cthulhu_in_another_hand(self, four_player_game, rng):
        """Another Cthulhu still in play keeps the game going."""
        game = four_player_game
        give_hand(game, "bob", [Card.CTHULHU])
        give_hand(game, "dave", [Card.FUTILE_INVESTIGATION, Card.CTHULHU])

        play_first_card_of_bob(game, rng)

        assert game.state == GameState.IN_PROGRESS

    def test_cthulhu_in_discards(self, four_player_game, rng):
        """A discarded Cthulhu also keeps the game going."""
        game = four_player_game
        give_hand(game, "bob", [Card.CTHULHU])
        game.discards = [Card.CTHULHU]

        play_first_card_of_bob(game, rng)

        assert game.state == GameState.IN_PROGRESS


class TestElderSign:
    """Tests for Elder Signs."""

    def test_one_sign_per_player_wins(self, four_player_game, rng):
        """Investigators win with as many visible signs as players."""
        game = four_player_game
        game.round = 2
        fill_visible(game, 3, Card.ELDER_SIGN)
        give_hand(game, "bob", [Card.ELDER_SIGN])

        play_first_card_of_bob(game, rng)

        assert game.state == GameState.INVESTIGATORS_WON

    def test_not_enough_signs(self, four_player_game, rng):
        """Fewer signs than players changes nothing."""
        game = four_player_game
        game.round = 2
        fill_visible(game, 2, Card.ELDER_SIGN)
        give_hand(game, "bob", [Card.ELDER_SIGN])

        play_first_card_of_bob(game, rng)

        assert game.state == GameState.IN_PROGRESS

    def test_won_game_rejects_further_plays(self, four_player_game, rng):
        """Once won, the phase guard blocks every play."""
        game = four_player_game
        game.round = 2
        fill_visible(game, 3, Card.ELDER_SIGN)
        give_hand(game, "bob", [Card.ELDER_SIGN])
        play_first_card_of_bob(game, rng)

        with pytest.raises(InvalidPhaseError):
            on_play_card(game, Action.play_card("test_game", "bob", "carol", 1), rng)
        assert game.state == GameState.INVESTIGATORS_WON


class TestEvilPresence:
    """Tests for Evil Presence."""

    def test_target_hand_is_discarded(self, four_player_game, rng):
        """The rest of the target's hand goes to the discards."""
        game = four_player_game
        give_hand(game, "bob", [Card.EVIL_PRESENCE, Card.CTHULHU, Card.ELDER_SIGN])

        play_first_card_of_bob(game, rng)

        assert game.get_player("bob").hand == []
        assert sorted(game.discards, key=lambda c: c.value) == [Card.CTHULHU, Card.ELDER_SIGN]
        assert game.visible_cards == [Card.EVIL_PRESENCE]


class TestMirage:
    """Tests for Mirage."""

    def test_mirage_replaces_last_elder_sign(self, four_player_game, rng):
        """The latest Elder Sign is discarded and the Mirage takes its slot."""
        game = four_player_game
        game.round = 2
        game.visible_cards = [
            Card.ELDER_SIGN, Card.FUTILE_INVESTIGATION, Card.ELDER_SIGN, Card.INSANITYS_GRASP,
        ]
        give_hand(game, "bob", [Card.MIRAGE])

        play_first_card_of_bob(game, rng)

        assert game.visible_cards == [
            Card.ELDER_SIGN, Card.FUTILE_INVESTIGATION, Card.MIRAGE, Card.INSANITYS_GRASP,
        ]
        assert game.discards == [Card.ELDER_SIGN]

    def test_mirage_without_elder_sign(self, four_player_game, rng):
        """With no visible Elder Sign the Mirage just stays on the table."""
        game = four_player_game
        game.visible_cards = [Card.FUTILE_INVESTIGATION]
        give_hand(game, "bob", [Card.MIRAGE])

        play_first_card_of_bob(game, rng)

        assert game.visible_cards == [Card.FUTILE_INVESTIGATION, Card.MIRAGE]
        assert game.discards == []

    def test_mirage_does_not_end_round(self, four_player_game, rng):
        """Replacing a sign does not add to the visible count."""
        game = four_player_game
        game.visible_cards = [
            Card.ELDER_SIGN, Card.FUTILE_INVESTIGATION, Card.FUTILE_INVESTIGATION,
        ]
        give_hand(game, "bob", [Card.MIRAGE, Card.FUTILE_INVESTIGATION])

        play_first_card_of_bob(game, rng)

        assert len(game.visible_cards) == 3
        assert game.state == GameState.IN_PROGRESS
        assert game.get_player("bob").hand == [Card.FUTILE_INVESTIGATION]

    def test_mirage_on_final_round(self, four_player_game, rng):
        """A Mirage in round 4 hands the game to the cultists."""
        game = four_player_game
        game.round = 4
        fill_visible(game, 5)
        give_hand(game, "bob", [Card.MIRAGE])

        play_first_card_of_bob(game, rng)

        assert game.state == GameState.CULTISTS_WON


class TestPrivateEye:
    """Tests for Private Eye."""

    def test_only_investigator_learns_role(self, four_player_game, rng):
        """The role is private to the player who played the card."""
        game = four_player_game
        give_hand(game, "bob", [Card.PRIVATE_EYE])

        play_first_card_of_bob(game, rng)

        alice = game.get_player("alice")
        assert alice.secrets == [RoleSecret(player="bob", role=Role.CULTIST)]
        assert alice.knows_role_of("bob")
        for player_id in ("bob", "carol", "dave"):
            assert game.get_player(player_id).secrets == []


class TestNoOpCards:
    """Tests for cards with no effect."""

    @pytest.mark.parametrize("card", [Card.FUTILE_INVESTIGATION, Card.INSANITYS_GRASP])
    def test_no_effect(self, four_player_game, rng, card):
        """The card only becomes visible."""
        game = four_player_game
        give_hand(game, "bob", [card])

        play_first_card_of_bob(game, rng)

        assert game.visible_cards == [card]
        assert game.state == GameState.IN_PROGRESS
        assert game.discards == []
        assert game.paranoid_player_id is None
