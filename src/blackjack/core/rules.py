from dataclasses import dataclass
from typing import Tuple
from .enums import Outcome
from .hand import Hand

@dataclass(frozen=True)
class BlackjackRules:
    """
    Immutable container for the house rules.
    Single source of truth for:
    - Dealer drawing policy
    - Payouts
    - Bankroll top-up when the player runs dry
    """
    dealer_stands_on: int = 17   # Stands on every 17, soft or hard
    blackjack_pays: Tuple[int, int] = (3, 2)
    bankroll_reset: int = 100   # Not tied to the starting bankroll

    @property
    def announcement(self) -> str:
        """Rule text shown to the player at session start.

        This is the advertised wording. The dealer policy actually
        applied is should_dealer_hit(), which ignores softness."""
        num, den = self.blackjack_pays
        return (f"Rules: Dealer hits to {self.dealer_stands_on} "
                f"(stands on soft {self.dealer_stands_on}). "
                f"Blackjack pays {num}:{den}.")

    def should_dealer_hit(self, hand: Hand) -> bool:
        """Dealer draws below 17 and stands on any 17 or more."""
        return hand.value() < self.dealer_stands_on

    def blackjack_win(self, bet: int) -> int:
        """Net amount won on a natural, rounded down."""
        num, den = self.blackjack_pays
        return bet * num // den

    def settle_naturals(self, player: Hand, dealer: Hand, bet: int) -> Tuple[Outcome, int]:
        """Settle a round where at least one side was dealt a natural.

        Returns (outcome, net bankroll change)."""
        player_bj = player.is_blackjack()
        dealer_bj = dealer.is_blackjack()
        if not (player_bj or dealer_bj):
            raise ValueError("Neither hand is a natural blackjack")
        if player_bj and dealer_bj:
            return Outcome.PUSH, 0
        if player_bj:
            return Outcome.BLACKJACK, self.blackjack_win(bet)
        return Outcome.LOSS, -bet

    def settle(self, player: Hand, dealer: Hand, bet: int) -> Tuple[Outcome, int]:
        """Settle a played-out round. Returns (outcome, net bankroll change)."""
        return settle_totals(player.value(), dealer.value(), bet)

def settle_totals(player_value: int, dealer_value: int, bet: int) -> Tuple[Outcome, int]:
    """Compare final totals. A player bust loses before the dealer bust is considered."""
    if player_value > 21:
        return Outcome.LOSS, -bet
    if dealer_value > 21 or player_value > dealer_value:
        return Outcome.WIN, bet
    if player_value < dealer_value:
        return Outcome.LOSS, -bet
    return Outcome.PUSH, 0
