"""Card creation and conversion utilities for testing."""

from poker.cards import Card


def make_cards_from_strings(card_strings: list[str]) -> list[Card]:
    """Create cards from strings like ['As', 'Kh', 'Qc'].

    Ranks: 2-9, T (or 10), J, Q, K, A
    Suits: s, c, h, d
    """
    return [Card.from_string(s) for s in card_strings]


class SequenceRandom:
    """Stand-in random source returning scripted draw indices.

    Only the methods the deck and controller call are provided. Indices are
    taken modulo the current bound so a script can be reused.
    """

    def __init__(self, indices: list[int], bet: int = 50) -> None:
        self._indices = list(indices)
        self._pos = 0
        self._bet = bet

    def randrange(self, stop: int) -> int:
        value = self._indices[self._pos % len(self._indices)] % stop
        self._pos += 1
        return value

    def randint(self, a: int, b: int) -> int:
        return min(max(self._bet, a), b)
