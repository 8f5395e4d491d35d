"""Card, Deck, Suit, and Rank definitions for the duel game."""

import logging
from dataclasses import dataclass
from enum import IntEnum
from random import Random
from typing import Iterable, Iterator, Sequence

from poker.exceptions import ConfigError, InsufficientCardsError

logger = logging.getLogger(__name__)


class Suit(IntEnum):
    """Card suits. Suits carry no ranking weight."""

    SPADES = 0
    CLUBS = 1
    HEARTS = 2
    DIAMONDS = 3

    def __str__(self) -> str:
        return _SUIT_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Suit":
        """Parse a suit from 's', 'c', 'h', 'd' or the unicode symbol."""
        key = symbol.strip()
        key = key if key in _SUIT_BY_SYMBOL else key.lower()
        if key not in _SUIT_BY_SYMBOL:
            raise ValueError(f"Invalid suit: {symbol}")
        return _SUIT_BY_SYMBOL[key]


_SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.CLUBS: "♣",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
}
_SUIT_BY_SYMBOL = {
    **{v: k for k, v in _SUIT_SYMBOLS.items()},
    "s": Suit.SPADES,
    "c": Suit.CLUBS,
    "h": Suit.HEARTS,
    "d": Suit.DIAMONDS,
}


class Rank(IntEnum):
    """Card ranks (2-14, where 14 is Ace)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Rank":
        """Parse a rank from '2'..'10', 'T', 'J', 'Q', 'K' or 'A'."""
        key = symbol.strip().upper()
        if key == "T":
            key = "10"
        for rank in cls:
            if str(rank) == key:
                return rank
        raise ValueError(f"Invalid rank: {symbol}")


# Rank sets are ordered weakest to strongest.
FULL_RANKS: tuple[Rank, ...] = tuple(Rank)
SHORT_RANKS: tuple[Rank, ...] = tuple(r for r in Rank if r >= Rank.SEVEN)
ALL_SUITS: tuple[Suit, ...] = tuple(Suit)


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return str(self.rank) + str(self.suit)

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Kh', '2c', 'Td' or '10♦'."""
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")
        return cls(rank=Rank.from_symbol(s[:-1]), suit=Suit.from_symbol(s[-1]))


def validate_card_sets(ranks: Sequence[Rank], suits: Sequence[Suit]) -> None:
    """Raise ConfigError unless both sets are non-empty and duplicate-free."""
    for name, values in (("rank", ranks), ("suit", suits)):
        if not values:
            raise ConfigError(f"{name} set must not be empty")
        if len(set(values)) != len(values):
            raise ConfigError(f"{name} set contains duplicates: {list(values)}")


class Deck:
    """A deck holding one card per (suit, rank) pair of the configured sets.

    Cards are drawn uniformly at random without replacement using the
    injected random source; a drawn card never comes back.
    """

    def __init__(
        self,
        ranks: Sequence[Rank] = FULL_RANKS,
        suits: Sequence[Suit] = ALL_SUITS,
        rng: Random | None = None,
    ) -> None:
        validate_card_sets(ranks, suits)
        self.ranks = tuple(ranks)
        self.suits = tuple(suits)
        self._rng = rng if rng is not None else Random()
        self._cards: list[Card] = [Card(rank=r, suit=s) for s in self.suits for r in self.ranks]

    @property
    def size(self) -> int:
        """Number of cards in a full deck of this configuration."""
        return len(self.ranks) * len(self.suits)

    def draw_one(self) -> Card:
        """Draw a single card."""
        return self.draw(1)[0]

    def draw(self, n: int = 1) -> list[Card]:
        """Draw n random cards, returned in the order they were drawn.

        Raises:
            InsufficientCardsError: if n exceeds the remaining cards. The
                deck is left untouched in that case.
        """
        if n < 0:
            raise ValueError(f"Cannot draw a negative number of cards: {n}")
        if n > len(self._cards):
            raise InsufficientCardsError(
                f"Cannot draw {n} cards, only {len(self._cards)} remaining"
            )
        drawn = [self._cards.pop(self._rng.randrange(len(self._cards))) for _ in range(n)]
        logger.debug("Drew %s, %d cards left", " ".join(map(str, drawn)), len(self._cards))
        return drawn

    def remaining(self) -> int:
        """Number of cards remaining in deck."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __contains__(self, card: object) -> bool:
        return card in self._cards


def create_deck(
    ranks: Iterable[Rank] = FULL_RANKS,
    suits: Iterable[Suit] = ALL_SUITS,
    rng: Random | None = None,
) -> Deck:
    """Build a full deck for the given rank and suit sets."""
    return Deck(tuple(ranks), tuple(suits), rng=rng)


def draw_one(deck: Deck) -> Card:
    """Draw one card from the deck."""
    return deck.draw_one()


def draw_many(deck: Deck, n: int) -> list[Card]:
    """Draw n cards from the deck."""
    return deck.draw(n)
