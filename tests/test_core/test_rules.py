import pytest
from blackjack.core.enums import Outcome
from blackjack.core.rules import BlackjackRules, settle_totals
from tests.conftest import hand

@pytest.fixture
def rules():
    """Create the house rules."""
    return BlackjackRules()

@pytest.mark.parametrize("player, dealer, expected", [
    (19, 24, (Outcome.WIN, 10)),
    (20, 18, (Outcome.WIN, 10)),
    (17, 19, (Outcome.LOSS, -10)),
    (20, 20, (Outcome.PUSH, 0)),
    (22, 24, (Outcome.LOSS, -10)),   # Player bust loses even if dealer busts
    (23, 18, (Outcome.LOSS, -10)),
])
def test_settle_totals(player, dealer, expected):
    """Test resolution is a function of the two totals."""
    assert settle_totals(player, dealer, 10) == expected

def test_settle_hands(rules):
    """Test settlement from hands."""
    assert rules.settle(hand("10H", "9C"), hand("10D", "9S", "5C"), 10) == (Outcome.WIN, 10)
    assert rules.settle(hand("KH", "QH"), hand("KD", "QD"), 25) == (Outcome.PUSH, 0)

def test_blackjack_win_rounds_down(rules):
    """Test 3:2 payout is floored."""
    assert rules.blackjack_win(10) == 15
    assert rules.blackjack_win(5) == 7
    assert rules.blackjack_win(1) == 1

def test_settle_naturals(rules):
    """Test immediate resolution when a natural is dealt."""
    bj = hand("AS", "KH")
    other = hand("9D", "7C")
    assert rules.settle_naturals(bj, other, 10) == (Outcome.BLACKJACK, 15)
    assert rules.settle_naturals(other, bj, 10) == (Outcome.LOSS, -10)
    assert rules.settle_naturals(bj, hand("AD", "QC"), 10) == (Outcome.PUSH, 0)

def test_settle_naturals_requires_a_natural(rules):
    with pytest.raises(ValueError):
        rules.settle_naturals(hand("9D", "7C"), hand("10S", "8H"), 10)

def test_dealer_policy(rules):
    """Test dealer hits below 17 and stands on every 17, soft included."""
    assert rules.should_dealer_hit(hand("10S", "6D"))
    assert rules.should_dealer_hit(hand("AS", "5D"))
    assert not rules.should_dealer_hit(hand("AS", "6D"))
    assert not rules.should_dealer_hit(hand("10S", "7D"))
    assert not rules.should_dealer_hit(hand("10S", "8D"))

def test_announcement(rules):
    """Test the advertised rule text."""
    assert rules.announcement == (
        "Rules: Dealer hits to 17 (stands on soft 17). Blackjack pays 3:2.")

def test_bankroll_reset_is_fixed(rules):
    assert rules.bankroll_reset == 100
