import logging
from dataclasses import dataclass, field
from ..core.card import Card
from ..core.enums import Outcome
from ..core.hand import Hand

logger = logging.getLogger(__name__)

@dataclass
class SessionRecord:
    """Win/loss/push tally for one run of the game."""
    wins: int = 0
    losses: int = 0
    pushes: int = 0

    def record(self, outcome: Outcome) -> None:
        """Count a settled round. Aborted rounds are not counted."""
        if outcome in (Outcome.WIN, Outcome.BLACKJACK):
            self.wins += 1
        elif outcome == Outcome.LOSS:
            self.losses += 1
        elif outcome == Outcome.PUSH:
            self.pushes += 1

    @property
    def rounds(self) -> int:
        return self.wins + self.losses + self.pushes

    def __str__(self) -> str:
        return f"W:{self.wins} L:{self.losses} P:{self.pushes}"

@dataclass
class Player:
    """
    Represents the single player at the table.
    Owns the hand, the bankroll and the session record.
    """
    bankroll: int = 100
    top_up: int = 100
    hand: Hand = field(default_factory=Hand)
    record: SessionRecord = field(default_factory=SessionRecord)

    def reset(self) -> None:
        """Clear the player's hand for a new round."""
        self.hand.clear()

    def add_card(self, card: Card) -> None:
        """Add card to the player's hand."""
        self.hand.add(card)

    def is_broke(self) -> bool:
        return self.bankroll <= 0

    def restore_bankroll(self) -> None:
        """House rule: an empty bankroll is topped back up."""
        logger.info("Bankroll at %d, restoring to %d", self.bankroll, self.top_up)
        self.bankroll = self.top_up

    def settle(self, outcome: Outcome, amount: int) -> None:
        """Apply a net bankroll change and count the outcome."""
        self.bankroll += amount
        self.record.record(outcome)
        logger.info("Round %s (%+d), bankroll %d, record %s",
                    outcome.name, amount, self.bankroll, self.record)
