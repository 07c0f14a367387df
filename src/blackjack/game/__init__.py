from .dealer import Dealer
from .player import Player, SessionRecord
from .table import RoundResult, Table
