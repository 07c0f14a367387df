from typing import List
from ..core.enums import Outcome
from ..core.hand import Hand
from .player import SessionRecord

RULE_LINE = "-" * 40
TITLE = "=== Terminal Blackjack ==="
CONTROLS = "Controls: (H)it, (S)tand, (Q)uit round, ENTER to confirm."

def render_table(dealer: Hand, player: Hand, bet: int, bankroll: int,
                 reveal_dealer: bool, ascii_suits: bool = False) -> List[str]:
    """Lines of the table view. The dealer's value is shown only once revealed."""
    dealer_line = "Dealer: " + dealer.render(hide_first=not reveal_dealer,
                                            ascii_suits=ascii_suits)
    if reveal_dealer:
        dealer_line += f" ({dealer.value()})"
    return [
        "",
        RULE_LINE,
        dealer_line,
        f"Player: {player.render(ascii_suits=ascii_suits)} ({player.value()})",
        f"Bet: {bet} | Bankroll: {bankroll}",
        RULE_LINE,
    ]

def outcome_message(outcome: Outcome, amount: int, dealer_bust: bool = False,
                    natural: bool = False) -> str:
    """One-line description of how a round was settled."""
    if outcome == Outcome.ABORTED:
        return "Round aborted. No money exchanged."
    if outcome == Outcome.BLACKJACK:
        return f"Blackjack! You win +{amount}."
    if outcome == Outcome.PUSH:
        return "Both have Blackjack! Push." if natural else "Push. Bet returned."
    if outcome == Outcome.LOSS:
        prefix = "Dealer Blackjack. " if natural else ""
        return f"{prefix}You lose {amount}."
    if dealer_bust:
        return f"Dealer busts. You win +{amount}."
    return f"You win +{amount}."

def session_summary(record: SessionRecord, bankroll: int) -> str:
    return f"Exiting game. Final record: {record} | Bankroll: {bankroll}"
