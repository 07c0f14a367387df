"""Shared fixtures: card builders and a headless table."""
from random import Random

import pytest

from blackjack.core.card import Card
from blackjack.core.deck import Deck
from blackjack.core.hand import Hand
from blackjack.game.table import Table
from blackjack.terminal import ScriptedIO


def cards(*texts):
    """Build a list of cards from strings such as 'AS', '10H'."""
    return [Card.from_str(t) for t in texts]


def hand(*texts):
    """Build a hand from card strings."""
    return Hand(cards(*texts))


@pytest.fixture
def make_table():
    """Factory for a table fed with scripted input and a stacked deck.

    `top` lists the next cards in deal order: player, dealer, player,
    dealer, then any hits and dealer draws."""
    def _make(lines, top=(), bankroll=100):
        io = ScriptedIO(lines)
        deck = Deck.stacked(cards(*top), rng=Random(7))
        return Table(io, deck=deck, starting_bankroll=bankroll,
                     ascii_suits=True, show_banner=False)
    return _make
