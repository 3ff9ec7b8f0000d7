"""
Card rendering utilities: small ASCII-art cards laid out side by side.
"""

from holdem.deck import SUIT_SYMBOLS
from .colors import Colors, paint


# Card suit colors
SUIT_COLORS = {
    'h': Colors.RED,
    'd': Colors.RED,
    'c': Colors.BLACK,
    's': Colors.BLACK,
}


def card_art(card, color: bool = True):
    """Format a single card as 5 lines of ASCII art."""
    rank, s = card
    symbol = SUIT_SYMBOLS.get(s, s)
    codes = (Colors.BOLD, Colors.BG_WHITE, SUIT_COLORS.get(s, Colors.BLACK)) if color else ()

    # "10" is the only two-character rank
    rank_left = f"{rank:<2}"
    rank_right = f"{rank:>2}"

    lines = [
        "╭───╮",
        f"│{rank_left}{symbol}│",
        "│   │",
        f"│{symbol}{rank_right}│",
        "╰───╯",
    ]
    return [paint(line, *codes, enabled=color) for line in lines]


def cards_horizontal(cards, color: bool = True):
    """Render multiple cards side-by-side horizontally."""
    if not cards:
        return ""

    card_lines = [card_art(card, color=color) for card in cards]
    return "\n".join(" ".join(parts) for parts in zip(*card_lines))
