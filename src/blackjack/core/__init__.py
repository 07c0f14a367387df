from .card import Card
from .deck import Deck
from .enums import Action, Outcome, Rank, RoundPhase, Suit
from .hand import Hand
from .rules import BlackjackRules
