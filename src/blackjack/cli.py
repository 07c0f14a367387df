import sys
import logging
import argparse
from typing import List, Optional

from .config import load_config
from .errors import ConfigError
from .game.table import Table
from .terminal import ConsoleIO

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='blackjack',
                                     description='Play blackjack against the dealer in the terminal')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to a YAML configuration file')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level for stderr (overrides config)')
    parser.add_argument('--ascii', action='store_true',
                        help='Render suits as letters instead of symbols')
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    """Run one game session. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        parser.error(str(e))

    level = (args.log_level or config.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        parser.error(f"Unknown logging level: {level}")
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(name)s %(levelname)s %(message)s',
        stream=sys.stderr,
    )
    logger.debug("Starting session with %s", config)

    table = Table(
        ConsoleIO(),
        starting_bankroll=config.starting_bankroll,
        ascii_suits=args.ascii or config.ascii_suits,
        show_banner=config.show_banner,
    )
    table.play_session()
    return 0
