from enum import Enum, auto

class Rank(Enum):
    """Card ranks. The value is the display token."""
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"   # Counted as 11, demoted to 1 by Hand when needed

    @property
    def points(self) -> int:
        """Blackjack value of the rank (ace at its high value)."""
        return RANK_POINTS[self]

RANK_POINTS = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
    Rank.ACE: 11,
}

class Suit(Enum):
    """Card suits. The value is the display glyph."""
    CLUBS = "♣"
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"

    @property
    def letter(self) -> str:
        """ASCII fallback for terminals without UTF-8."""
        return self.name[0]

class Action(Enum):
    """Player actions available during the player turn."""
    HIT = "H"
    STAND = "S"
    QUIT = "Q"   # Quit the round, not the session

class Outcome(Enum):
    """Result of a round from the player's perspective."""
    WIN = auto()
    BLACKJACK = auto()   # Natural, paid 3:2
    LOSS = auto()
    PUSH = auto()
    ABORTED = auto()     # Player quit the round, no money exchanged

class RoundPhase(Enum):
    """States of the round controller."""
    BETTING = auto()
    DEALT = auto()
    IMMEDIATE_RESOLUTION = auto()  # Either side has a natural
    PLAYER_TURN = auto()
    DEALER_TURN = auto()
    RESOLVED = auto()
    ABORTED = auto()
    SESSION_END = auto()
