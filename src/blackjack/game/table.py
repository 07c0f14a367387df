import logging
from dataclasses import dataclass
from typing import Dict, Optional
from ..core.deck import Deck
from ..core.enums import Action, Outcome, RoundPhase
from ..core.rules import BlackjackRules
from ..errors import InputExhausted
from ..terminal import GameIO, is_digits, parse_action, parse_bet, parse_yes_no
from . import display
from .dealer import Dealer
from .player import Player, SessionRecord

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class RoundResult:
    """How a single round ended."""
    outcome: Outcome
    amount: int          # Net bankroll change
    player_value: int
    dealer_value: int

class Table:
    """
    Coordinates all game components and manages game flow for blackjack.
    One player against the dealer, house rules:
    - Single 52-card deck, reshuffled when exhausted
    - Dealer draws below 17 and stands on every 17
    - Blackjack pays 3:2, rounded down
    - No double, split, surrender or insurance
    - A bet of 0 ends the session
    """

    def __init__(self, io: GameIO, deck: Optional[Deck] = None,
                 rules: Optional[BlackjackRules] = None,
                 starting_bankroll: int = 100, ascii_suits: bool = False,
                 show_banner: bool = True):
        """Initialize table components."""
        self.io = io
        self.deck = deck if deck is not None else Deck()
        self.rules = rules if rules is not None else BlackjackRules()
        self.dealer = Dealer(rules=self.rules)
        self.player = Player(bankroll=starting_bankroll, top_up=self.rules.bankroll_reset)
        self.ascii_suits = ascii_suits
        self.show_banner = show_banner

        # Round state
        self.phase = RoundPhase.BETTING
        self.bet = 0

    @property
    def record(self) -> SessionRecord:
        return self.player.record

    def play_session(self) -> SessionRecord:
        """
        Play rounds until the player bets 0, declines another round,
        or input runs out. The final record is reported on every exit.
        """
        if self.show_banner:
            self.io.write_line(display.TITLE)
            self.io.write_line(self.rules.announcement)
            self.io.write_line(display.CONTROLS)
            self.io.write_line()

        try:
            while self.play_round() is not None:
                if not self._prompt_replay():
                    break
        except InputExhausted:
            logger.info("Input exhausted, ending session")
        except KeyboardInterrupt:
            self.io.write_line()
            logger.info("Interrupted, ending session")

        self.phase = RoundPhase.SESSION_END
        self.io.write_line(display.session_summary(self.record, self.player.bankroll))
        logger.info("Session over after %d rounds, record %s, bankroll %d",
                    self.record.rounds, self.record, self.player.bankroll)
        return self.record

    def play_round(self) -> Optional[RoundResult]:
        """
        Play one round from betting to settlement.
        Returns None when the player ends the session with a zero bet.
        Raises InputExhausted if input runs out at any prompt.
        """
        self.phase = RoundPhase.BETTING
        self.bet = 0
        if self.player.is_broke():
            self.io.write_line(
                f"You are out of funds. Resetting bankroll to {self.player.top_up}.")
            self.player.restore_bankroll()

        bet = self._prompt_bet()
        if bet == 0:
            return None
        self.bet = bet

        self._deal()
        self._show(reveal_dealer=False)

        if self.player.hand.is_blackjack() or self.dealer.has_blackjack():
            return self._resolve_naturals()

        if self._player_turn() == Action.QUIT:
            self.phase = RoundPhase.ABORTED
            result = self._result(Outcome.ABORTED, 0)
            self.io.write_line(display.outcome_message(Outcome.ABORTED, 0))
            logger.info("Round aborted by player")
            return result

        if self.player.hand.is_bust():
            return self._finish(Outcome.LOSS, -self.bet)

        self._dealer_turn()
        outcome, amount = self.rules.settle(self.player.hand, self.dealer.hand, self.bet)
        return self._finish(outcome, amount, dealer_bust=self.dealer.is_bust())

    def _deal(self) -> None:
        """Clear both hands and deal player, dealer, player, dealer."""
        self.phase = RoundPhase.DEALT
        self.player.reset()
        self.dealer.reset()
        for _ in range(2):
            self.player.add_card(self.deck.deal())
            self.dealer.add_card(self.deck.deal())

    def _resolve_naturals(self) -> RoundResult:
        self.phase = RoundPhase.IMMEDIATE_RESOLUTION
        self._show(reveal_dealer=True)
        outcome, amount = self.rules.settle_naturals(
            self.player.hand, self.dealer.hand, self.bet)
        return self._finish(outcome, amount, natural=True)

    def _player_turn(self) -> Action:
        """Prompt for actions until stand, quit or bust. Returns the last action."""
        self.phase = RoundPhase.PLAYER_TURN
        while True:
            action = self._prompt_action()
            if action != Action.HIT:
                return action
            self.player.add_card(self.deck.deal())
            self._show(reveal_dealer=False)
            if self.player.hand.is_bust():
                self.io.write_line("You bust.")
                return action

    def _dealer_turn(self) -> None:
        self.phase = RoundPhase.DEALER_TURN
        self._show(reveal_dealer=True)
        self.dealer.play(self.deck)
        self._show(reveal_dealer=True)

    def _finish(self, outcome: Outcome, amount: int, dealer_bust: bool = False,
                natural: bool = False) -> RoundResult:
        self.phase = RoundPhase.RESOLVED
        self.player.settle(outcome, amount)
        self.io.write_line(display.outcome_message(
            outcome, amount, dealer_bust=dealer_bust, natural=natural))
        return self._result(outcome, amount)

    def _result(self, outcome: Outcome, amount: int) -> RoundResult:
        return RoundResult(
            outcome=outcome,
            amount=amount,
            player_value=self.player.hand.value(),
            dealer_value=self.dealer.get_value(),
        )

    def _show(self, reveal_dealer: bool) -> None:
        for line in display.render_table(
                self.dealer.hand, self.player.hand, self.bet,
                self.player.bankroll, reveal_dealer, self.ascii_suits):
            self.io.write_line(line)

    def _read(self, prompt: str) -> str:
        """Read a non-empty line, skipping blank ones."""
        while True:
            line = self.io.read_line(prompt)
            if line is None:
                raise InputExhausted(prompt)
            if line.strip():
                return line.strip()

    def _prompt_bet(self) -> int:
        bankroll = self.player.bankroll
        while True:
            text = self._read(
                f"Bankroll: {bankroll} | Enter bet (1..{bankroll}), or 0 to quit: ")
            bet = parse_bet(text, bankroll)
            if bet is not None:
                return bet
            if is_digits(text):
                self.io.write_line(f"Bet must be between 0 and {bankroll}.")
            else:
                self.io.write_line("Enter digits only.")

    def _prompt_action(self) -> Action:
        while True:
            action = parse_action(self._read("(H)it, (S)tand, (Q)uit round: "))
            if action is not None:
                return action
            self.io.write_line("Please enter H, S, or Q.")

    def _prompt_replay(self) -> bool:
        while True:
            answer = parse_yes_no(self._read("Play another round? (Y/N): "))
            if answer is not None:
                return answer
            self.io.write_line("Please enter Y or N.")

    def get_state(self) -> Dict:
        """Get current game state."""
        return {
            'phase': self.phase.name,
            'dealer': str(self.dealer.hand),
            'dealer_value': self.dealer.get_value(),
            'player': str(self.player.hand),
            'player_value': self.player.hand.value(),
            'bet': self.bet,
            'bankroll': self.player.bankroll,
            'wins': self.record.wins,
            'losses': self.record.losses,
            'pushes': self.record.pushes,
            'cards_remaining': self.deck.cards_remaining(),
        }
