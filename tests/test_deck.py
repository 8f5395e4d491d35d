"""Tests for cards and dealing (poker/cards.py)."""

from random import Random

import pytest

from poker.cards import (
    ALL_SUITS,
    FULL_RANKS,
    SHORT_RANKS,
    Card,
    Deck,
    Rank,
    Suit,
    create_deck,
    draw_many,
    draw_one,
)
from poker.exceptions import ConfigError, InsufficientCardsError
from tests.helpers.card_utils import SequenceRandom


class TestCardParsing:
    """Test card representation functions."""

    @pytest.mark.parametrize(
        "text,rank,suit",
        [
            ("As", Rank.ACE, Suit.SPADES),
            ("Kh", Rank.KING, Suit.HEARTS),
            ("2c", Rank.TWO, Suit.CLUBS),
            ("Td", Rank.TEN, Suit.DIAMONDS),
            ("10d", Rank.TEN, Suit.DIAMONDS),
            ("7♠", Rank.SEVEN, Suit.SPADES),
            ("q♥", Rank.QUEEN, Suit.HEARTS),
        ],
    )
    def test_from_string(self, text, rank, suit):
        """Test parsing short card strings."""
        assert Card.from_string(text) == Card(rank, suit)

    @pytest.mark.parametrize("text", ["", "A", "1s", "Ax", "11h"])
    def test_from_string_invalid(self, text):
        """Malformed strings are rejected."""
        with pytest.raises(ValueError):
            Card.from_string(text)

    def test_str(self):
        """Cards display as rank followed by suit symbol."""
        assert str(Card(Rank.TEN, Suit.HEARTS)) == "10♥"
        assert str(Card(Rank.ACE, Suit.SPADES)) == "A♠"

    def test_cards_are_immutable(self):
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING  # type: ignore[misc]

    def test_rank_presets(self):
        """Full deck has 13 ranks, short deck has 8 (7..A)."""
        assert len(FULL_RANKS) == 13
        assert SHORT_RANKS == (
            Rank.SEVEN,
            Rank.EIGHT,
            Rank.NINE,
            Rank.TEN,
            Rank.JACK,
            Rank.QUEEN,
            Rank.KING,
            Rank.ACE,
        )
        assert len(ALL_SUITS) == 4


class TestDeckConstruction:
    """Test building decks from rank and suit sets."""

    @pytest.mark.parametrize("ranks,expected", [(FULL_RANKS, 52), (SHORT_RANKS, 32)])
    def test_deck_contains_all_cards(self, ranks, expected):
        """A deck holds exactly |ranks| x |suits| distinct cards."""
        deck = Deck(ranks, ALL_SUITS)

        cards = list(deck)
        assert len(deck) == expected
        assert deck.size == expected
        assert len(set(cards)) == expected
        assert {c.rank for c in cards} == set(ranks)
        assert {c.suit for c in cards} == set(ALL_SUITS)

    def test_custom_sets(self):
        """Rank and suit sets are configuration, not constants."""
        deck = create_deck([Rank.TWO, Rank.THREE], [Suit.HEARTS])
        assert sorted(deck, key=lambda c: c.rank) == [
            Card(Rank.TWO, Suit.HEARTS),
            Card(Rank.THREE, Suit.HEARTS),
        ]

    @pytest.mark.parametrize(
        "ranks,suits",
        [
            ((), ALL_SUITS),
            (FULL_RANKS, ()),
            ((Rank.ACE, Rank.ACE), ALL_SUITS),
            (FULL_RANKS, (Suit.SPADES, Suit.SPADES)),
        ],
    )
    def test_invalid_sets(self, ranks, suits):
        """Empty or duplicated sets raise ConfigError."""
        with pytest.raises(ConfigError):
            Deck(ranks, suits)


class TestDrawing:
    """Test drawing without replacement."""

    def test_draw_reduces_size(self, full_deck):
        """Drawing n cards shrinks the deck by exactly n."""
        drawn = full_deck.draw(5)
        assert len(drawn) == 5
        assert full_deck.remaining() == 47

        full_deck.draw_one()
        assert len(full_deck) == 46

    def test_drawn_cards_never_reappear(self, short_deck):
        """Draining the deck yields every card exactly once."""
        seen = []
        while short_deck.remaining() > 0:
            card = draw_one(short_deck)
            assert card not in short_deck
            seen.append(card)

        assert len(seen) == 32
        assert len(set(seen)) == 32

    def test_draw_zero(self, full_deck):
        assert full_deck.draw(0) == []
        assert len(full_deck) == 52

    def test_draw_negative(self, full_deck):
        with pytest.raises(ValueError):
            full_deck.draw(-1)

    def test_overdraw_leaves_deck_unchanged(self, short_deck):
        """Asking for more cards than remain fails without touching the deck."""
        draw_many(short_deck, 30)
        before = list(short_deck)

        with pytest.raises(InsufficientCardsError):
            draw_many(short_deck, 3)

        assert list(short_deck) == before
        assert len(short_deck) == 2

    def test_draw_from_empty_deck(self):
        deck = Deck([Rank.ACE], [Suit.SPADES])
        deck.draw_one()
        with pytest.raises(InsufficientCardsError):
            deck.draw_one()

    def test_same_seed_same_order(self):
        """Same seed should produce the same draw order."""
        deck1 = Deck(rng=Random(7))
        deck2 = Deck(rng=Random(7))
        assert deck1.draw(10) == deck2.draw(10)

    def test_different_seeds_different_order(self):
        """Different seeds should produce different draws."""
        deck1 = Deck(rng=Random(1))
        deck2 = Deck(rng=Random(2))
        # Extremely unlikely to be equal with different seeds
        assert deck1.draw(10) != deck2.draw(10)

    def test_draws_returned_in_draw_order(self):
        """The injected source picks indices into the remaining cards."""
        deck = Deck([Rank.TWO, Rank.THREE, Rank.FOUR], [Suit.SPADES], rng=SequenceRandom([2, 0, 0]))

        assert deck.draw(3) == [
            Card(Rank.FOUR, Suit.SPADES),
            Card(Rank.TWO, Suit.SPADES),
            Card(Rank.THREE, Suit.SPADES),
        ]

    def test_draw_is_roughly_uniform(self):
        """Every card is about equally likely to be drawn first."""
        rng = Random(123)
        counts = {}
        trials = 4000
        for _ in range(trials):
            card = Deck(SHORT_RANKS, ALL_SUITS, rng=rng).draw_one()
            counts[card] = counts.get(card, 0) + 1

        assert len(counts) == 32
        expected = trials / 32
        assert all(0.5 * expected < n < 1.5 * expected for n in counts.values())

    def test_iteration_does_not_expose_internal_list(self, full_deck):
        cards = list(full_deck)
        cards.clear()
        assert len(full_deck) == 52
