class BlackjackError(Exception):
    """Base class for errors raised by the game."""

class InputExhausted(BlackjackError):
    """The input provider has no more lines to give."""

class ConfigError(BlackjackError):
    """Configuration file is missing or malformed."""
