from random import Random

import pytest
from blackjack.core.card import Card
from blackjack.core.deck import DECK_SIZE, Deck
from blackjack.core.enums import Rank, Suit

@pytest.fixture
def deck():
    """Create a seeded test deck."""
    return Deck(Random(1234))

def test_fresh_deck_has_every_card_once(deck):
    """Test a reset deck holds one card per rank/suit pair."""
    assert DECK_SIZE == 52
    assert len(deck.cards) == 52
    assert set(deck.cards) == {Card(rank, suit) for suit in Suit for rank in Rank}
    assert deck.dealt_count == 0
    assert deck.cards_remaining() == 52

def test_deal_advances_cursor(deck):
    """Test dealing returns cards in order."""
    first, second = deck.cards[0], deck.cards[1]
    assert deck.deal() == first
    assert deck.deal() == second
    assert deck.dealt_count == 2
    assert deck.cards_remaining() == 50

def test_deal_full_deck_then_reshoe(deck):
    """Test 52 deals exhaust the deck and the 53rd starts a new shoe."""
    dealt = [deck.deal() for _ in range(52)]
    assert len(set(dealt)) == 52
    assert deck.cards_remaining() == 0

    card = deck.deal()
    assert isinstance(card, Card)
    assert deck.dealt_count == 1
    assert deck.cards_remaining() == 51
    assert len(set(deck.cards)) == 52

def test_same_seed_same_order():
    """Test an injected random source makes shuffles repeatable."""
    assert Deck(Random(99)).cards == Deck(Random(99)).cards

def test_default_source_is_owned_per_deck():
    """Test each deck gets its own random source."""
    assert Deck().rng is not Deck().rng

def test_reset_restores_full_deck(deck):
    """Test reset replaces contents and rewinds the cursor."""
    for _ in range(10):
        deck.deal()
    deck.reset()
    assert deck.dealt_count == 0
    assert len(set(deck.cards)) == 52

def test_stacked_deck_deals_top_first():
    """Test stacked cards come out first, followed by the rest."""
    top = [Card.from_str(t) for t in ("AS", "KH", "7C")]
    deck = Deck.stacked(top, rng=Random(3))
    assert [deck.deal() for _ in range(3)] == top
    rest = [deck.deal() for _ in range(49)]
    assert not set(rest) & set(top)
    assert deck.cards_remaining() == 0

def test_stacked_deck_rejects_duplicates():
    """Test a card cannot be stacked twice."""
    with pytest.raises(ValueError):
        Deck.stacked([Card.from_str("AS"), Card.from_str("AS")])
