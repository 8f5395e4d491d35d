"""Shared pytest fixtures for card duel tests."""

from random import Random

import pytest

from poker.cards import ALL_SUITS, FULL_RANKS, SHORT_RANKS, Deck
from poker.game import RoundConfig, RoundController


@pytest.fixture
def rng():
    """Provide a reproducible random source."""
    return Random(42)


@pytest.fixture
def full_deck(rng):
    """A 52-card deck (2..A)."""
    return Deck(FULL_RANKS, ALL_SUITS, rng=rng)


@pytest.fixture
def short_deck(rng):
    """A 32-card deck (7..A)."""
    return Deck(SHORT_RANKS, ALL_SUITS, rng=rng)


@pytest.fixture
def controller(rng):
    """A round controller with the default four-card configuration."""
    return RoundController(RoundConfig(), rng=rng)

