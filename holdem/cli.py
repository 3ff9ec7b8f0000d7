"""
Command line driver: plays one demo round of Texas Hold'em and prints it.
"""

import argparse
import logging
import sys
from typing import List, Optional

from holdem.game import Game
from holdem.player import PlayerManager
from holdem.settings import get_settings
from holdem.terminal_ui import RoundRenderer
from holdem.ui.colors import Colors
from holdem.version import VERSION


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deal and score one round of Texas Hold'em")
    parser.add_argument("--players", nargs="+", metavar="NAME", help="Player names (default from HOLDEM_PLAYERS)")
    parser.add_argument("--chips", type=int, help="Starting chips per player")
    parser.add_argument("--seed", type=int, help="Shuffle seed for a reproducible round")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--compact", action="store_true", help="Print cards as text instead of ASCII art")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def run_demo_round(names: List[str], chips: int, seed: Optional[int] = None,
                   color: bool = True, ascii_cards: bool = True) -> str:
    """Play one round with the given players and return the narrative."""
    manager = PlayerManager()
    for name in names:
        manager.register_player(name, chips=chips)

    game = Game(manager.players, seed=seed)
    result = game.play_round()
    return RoundRenderer(color=color, ascii_cards=ascii_cards).render(manager.players, result)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        settings = get_settings()
        names = args.players or settings['players']
        chips = args.chips if args.chips is not None else settings['starting_chips']
        seed = args.seed if args.seed is not None else settings['seed']
        print(run_demo_round(names, chips, seed=seed, color=not args.no_color, ascii_cards=not args.compact))
    except ValueError as e:
        message = f"❌ Error: {e}"
        print(message if args.no_color else f"{Colors.RED}{message}{Colors.RESET}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
