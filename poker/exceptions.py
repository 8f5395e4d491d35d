"""Exceptions raised by the poker core."""


class PokerError(Exception):
    """Base class for all poker core errors."""


class ConfigError(PokerError, ValueError):
    """Malformed rank/suit set or round configuration."""


class InsufficientCardsError(PokerError):
    """A draw asked for more cards than the deck has left."""


class InvalidHandError(PokerError):
    """A hand passed to the evaluator or comparator is malformed."""


class InvalidBetError(PokerError, ValueError):
    """A bet that is not a positive number."""


class RoundStateError(PokerError):
    """An operation is not allowed in the controller's current state."""
