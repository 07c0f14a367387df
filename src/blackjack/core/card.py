from dataclasses import dataclass
from .enums import Rank, Suit

HIDDEN_CARD = "??"

@dataclass(frozen=True)
class Card:
    """Immutable playing card."""
    rank: Rank
    suit: Suit

    @classmethod
    def from_str(cls, text: str) -> 'Card':
        """Parse a card such as '10H', 'AS' or 'QC'.

        The suit is the last character and may be a letter (C/D/H/S)
        or a glyph. Raises ValueError for anything else."""
        text = text.strip()
        if len(text) < 2:
            raise ValueError(f"Invalid card: {text!r}")
        rank_token, suit_token = text[:-1].upper(), text[-1]
        try:
            rank = Rank(rank_token)
        except ValueError:
            raise ValueError(f"Invalid card rank: {rank_token!r}") from None
        for suit in Suit:
            if suit_token.upper() == suit.letter or suit_token == suit.value:
                return cls(rank, suit)
        raise ValueError(f"Invalid card suit: {suit_token!r}")

    def get_value(self) -> int:
        """Get the blackjack value of the card.

        Aces are returned as 11. Demoting them to 1 is left to the
        hand, since it depends on the rest of the cards."""
        return self.rank.points

    def is_ace(self) -> bool:
        """Check if the card is an ace."""
        return self.rank == Rank.ACE

    def to_str(self, ascii_suits: bool = False) -> str:
        """Rank token followed by the suit glyph (or letter)."""
        suit = self.suit.letter if ascii_suits else self.suit.value
        return f"{self.rank.value}{suit}"

    def __str__(self) -> str:
        return self.to_str()
