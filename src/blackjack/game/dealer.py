import logging
from dataclasses import dataclass, field
from ..core.card import Card
from ..core.deck import Deck
from ..core.hand import Hand
from ..core.rules import BlackjackRules

logger = logging.getLogger(__name__)

@dataclass
class Dealer:
    """
    Represents the dealer in blackjack.
    Handles dealer-specific rules and logic.
    """
    hand: Hand = field(default_factory=Hand)
    rules: BlackjackRules = field(default_factory=BlackjackRules)

    def reset(self) -> None:
        """Clear dealer's hand for a new round."""
        self.hand.clear()

    def add_card(self, card: Card) -> None:
        """Add a card to dealer's hand."""
        self.hand.add(card)

    def should_hit(self) -> bool:
        """
        Determine if dealer should hit according to rules.
        A soft 17 stands like any other 17.
        """
        return self.rules.should_dealer_hit(self.hand)

    def play(self, deck: Deck) -> int:
        """Draw until the rules say stand. Returns the final value."""
        while self.should_hit():
            card = deck.deal()
            self.hand.add(card)
            logger.debug("Dealer draws %s, total %d", card, self.hand.value())
        return self.hand.value()

    def has_blackjack(self) -> bool:
        """Check if dealer has blackjack."""
        return self.hand.is_blackjack()

    def is_bust(self) -> bool:
        """Check if dealer is bust."""
        return self.hand.is_bust()

    def get_value(self) -> int:
        """Get dealer's hand value."""
        return self.hand.value()
