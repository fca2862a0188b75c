"""Exceptions raised by the blackjack core."""


class BlackjackError(Exception):
    """Base class for blackjack core errors."""


class EmptyDeckError(BlackjackError, IndexError):
    """A card was requested from a deck with no cards left."""


class InvalidRankError(BlackjackError, ValueError):
    """A card carries a rank the scorer does not recognise."""


class InvalidActionError(BlackjackError):
    """A player action was applied outside the player's turn."""
