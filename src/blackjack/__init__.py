"""Single-player terminal blackjack."""

__version__ = "0.1.0"
