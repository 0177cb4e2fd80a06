"""
Rule errors raised while validating or resolving an action.

Each error carries an error_code so the reducer can turn it into an
ActionResult without inspecting the message.
"""


class RulesError(Exception):
    """Base class for every rejected action."""
    error_code = "RULES_ERROR"


class NotFoundError(RulesError):
    """The game or a player does not exist."""
    error_code = "NOT_FOUND"


class InvalidPhaseError(RulesError):
    """The action does not fit the game's current phase."""
    error_code = "INVALID_PHASE"


class OutOfRangeError(RulesError):
    """The card number is outside the target's hand."""
    error_code = "OUT_OF_RANGE"


class WrongTurnError(RulesError):
    """The acting player is not the current investigator."""
    error_code = "WRONG_TURN"


class InvalidTargetError(RulesError):
    """The action targets a player it may not target."""
    error_code = "INVALID_TARGET"


class InvalidCardError(RulesError):
    """
    A card value with no effect handler.

    Only reachable with corrupted game data, so the reducer lets it propagate.
    """
    error_code = "INVALID_CARD"
