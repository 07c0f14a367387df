"""
Input/output boundary between the game and the terminal.

The table only ever talks to a GameIO: it reads whole lines and writes
whole lines. ConsoleIO is the real terminal; tests supply scripted ones.
"""
import sys
from abc import ABC, abstractmethod
from typing import Iterable, Optional, TextIO

from .core.enums import Action

class GameIO(ABC):
    """Line-oriented input provider and output sink."""

    @abstractmethod
    def read_line(self, prompt: str = "") -> Optional[str]:
        """Read one line without its newline, or None at end of input."""

    @abstractmethod
    def write_line(self, text: str = "") -> None:
        """Write one line of output."""

class ConsoleIO(GameIO):
    """GameIO over text streams, stdin/stdout by default."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def read_line(self, prompt: str = "") -> Optional[str]:
        if prompt:
            self.stdout.write(prompt)
            self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def write_line(self, text: str = "") -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

class ScriptedIO(GameIO):
    """GameIO fed from a fixed list of lines, recording everything written.

    Prompts are recorded as output lines too, so a transcript can be
    inspected after the session."""

    def __init__(self, lines: Iterable[str] = ()):
        self.pending = list(lines)
        self.output = []

    def read_line(self, prompt: str = "") -> Optional[str]:
        if prompt:
            self.output.append(prompt)
        if not self.pending:
            return None
        return self.pending.pop(0)

    def write_line(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def transcript(self) -> str:
        return "\n".join(self.output)

def is_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()

def parse_bet(text: str, bankroll: int) -> Optional[int]:
    """Parse a bet in [0, bankroll]. Digits only; None if invalid."""
    text = text.strip()
    if not is_digits(text):
        return None
    bet = int(text)
    if bet > bankroll:
        return None
    return bet

def parse_action(text: str) -> Optional[Action]:
    """First character of the line, case-insensitive: H, S or Q."""
    text = text.strip()
    if not text:
        return None
    try:
        return Action(text[0].upper())
    except ValueError:
        return None

def parse_yes_no(text: str) -> Optional[bool]:
    """First character of the line, case-insensitive: Y or N."""
    text = text.strip()
    if not text:
        return None
    return {"Y": True, "N": False}.get(text[0].upper())
