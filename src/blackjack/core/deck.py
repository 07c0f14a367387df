import logging
import time
from typing import Iterable, List, Optional
from random import Random
from .card import Card
from .enums import Rank, Suit

logger = logging.getLogger(__name__)

DECK_SIZE = len(Suit) * len(Rank)

class Deck:
    """Single 52-card shoe that reshuffles itself when exhausted."""

    def __init__(self, rng: Optional[Random] = None):
        """Initialize with an owned random source.

        Without one, the source is seeded from the high-resolution clock,
        so shuffles are not reproducible between runs."""
        self.rng = rng if rng is not None else Random(time.perf_counter_ns())
        self.cards: List[Card] = []
        self.dealt_count = 0
        self.reset()

    @classmethod
    def stacked(cls, top: Iterable[Card], rng: Optional[Random] = None) -> 'Deck':
        """Build a deck whose next deals are `top`, in order.

        The remaining cards of the 52 follow in shuffled order. Used for
        deterministic setups."""
        deck = cls(rng)
        top = list(top)
        if len(set(top)) != len(top):
            raise ValueError("Stacked cards must be unique")
        rest = [card for card in deck.cards if card not in top]
        deck.cards = top + rest
        deck.dealt_count = 0
        return deck

    def reset(self) -> None:
        """Regenerate all 52 cards and shuffle."""
        self.cards = [Card(rank, suit) for suit in Suit for rank in Rank]
        self.dealt_count = 0
        self.shuffle()

    def shuffle(self) -> None:
        """Fisher-Yates shuffle."""
        cards = self.cards
        for i in range(len(cards) - 1, 0, -1):
            j = self.rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def deal(self) -> Card:
        """Deal one card, starting a fresh shoe first if this one is used up."""
        if self.dealt_count >= len(self.cards):
            logger.info("Shoe exhausted after %d cards, reshuffling", self.dealt_count)
            self.reset()
        card = self.cards[self.dealt_count]
        self.dealt_count += 1
        logger.debug("Dealt %s (%d remaining)", card, self.cards_remaining())
        return card

    def cards_remaining(self) -> int:
        return len(self.cards) - self.dealt_count
