from typing import List, Tuple
from dataclasses import dataclass, field
from .card import Card, HIDDEN_CARD

@dataclass
class Hand:
    """
    Represents a blackjack hand for one participant.
    Responsible for:
    - Holding the cards dealt this round
    - Calculating the hand value with soft-ace adjustment
    - Rendering the cards, optionally concealing the first one
    """
    cards: List[Card] = field(default_factory=list)

    def add(self, card: Card) -> None:
        """Append a dealt card."""
        self.cards.append(card)

    def clear(self) -> None:
        """Empty the hand for a new round."""
        self.cards.clear()

    def value(self) -> int:
        """Get optimal hand value, always computed from the full hand."""
        total, _ = self._reduce_aces()
        return total

    def _reduce_aces(self) -> Tuple[int, int]:
        """Return (total, aces still counted as 11).

        Aces start at 11 and are demoted to 1 one at a time, only
        while the hand would otherwise bust."""
        total = sum(card.get_value() for card in self.cards)
        soft_aces = sum(1 for card in self.cards if card.is_ace())
        while total > 21 and soft_aces > 0:
            total -= 10
            soft_aces -= 1
        return total, soft_aces

    def is_soft(self) -> bool:
        """Check if hand is soft (contains an ace counted as 11)."""
        _, soft_aces = self._reduce_aces()
        return soft_aces > 0

    def is_blackjack(self) -> bool:
        """Natural: exactly two cards totalling 21."""
        return len(self.cards) == 2 and self.value() == 21

    def is_bust(self) -> bool:
        return self.value() > 21

    def render(self, hide_first: bool = False, ascii_suits: bool = False) -> str:
        """Cards separated by spaces, first one masked when `hide_first`."""
        tokens = [
            HIDDEN_CARD if i == 0 and hide_first else card.to_str(ascii_suits)
            for i, card in enumerate(self.cards)
        ]
        return " ".join(tokens)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return self.render()
