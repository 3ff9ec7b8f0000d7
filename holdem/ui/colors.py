"""
ANSI color codes for the round narrative.
"""


class Colors:
    """ANSI color codes for terminal formatting."""
    RED = '\033[31m'
    BLACK = '\033[30m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    MAGENTA = '\033[35m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RESET = '\033[0m'
    BG_WHITE = '\033[47m'


def paint(text: str, *codes: str, enabled: bool = True) -> str:
    """Wrap text in the given color codes, or return it untouched."""
    if not enabled or not codes:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"
