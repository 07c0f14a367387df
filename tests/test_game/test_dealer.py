from random import Random

import pytest
from blackjack.core.deck import Deck
from blackjack.game.dealer import Dealer
from tests.conftest import cards

@pytest.fixture
def dealer():
    """Create a test dealer."""
    return Dealer()

def test_dealer_plays_until_17(dealer):
    """Test dealer draws from the deck while under 17."""
    for card in cards("10S", "3D"):
        dealer.add_card(card)
    deck = Deck.stacked(cards("2C", "AH", "9D"), rng=Random(5))

    # 13, 15, then the ace counts as 1 for 16, then 25
    assert dealer.play(deck) == 25
    assert [str(c) for c in dealer.hand.cards] == ["10♠", "3♦", "2♣", "A♥", "9♦"]
    assert dealer.is_bust()

def test_dealer_stands_without_drawing(dealer):
    for card in cards("KS", "7D"):
        dealer.add_card(card)
    deck = Deck(Random(1))

    assert dealer.play(deck) == 17
    assert deck.dealt_count == 0

def test_reset(dealer):
    for card in cards("AS", "KD"):
        dealer.add_card(card)
    assert dealer.has_blackjack()
    dealer.reset()
    assert len(dealer.hand) == 0
