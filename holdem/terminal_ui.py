"""
Terminal renderer for the narrative of a single Hold'em round.

This keeps presentation out of the engine: `RoundRenderer.render(players,
result)` turns a showdown result into a printable string.
"""

from typing import Any, Dict, List

from holdem.deck import card_str
from .ui.colors import Colors, paint
from .ui.cards import cards_horizontal


class RoundRenderer:
    def __init__(self, color: bool = True, ascii_cards: bool = True):
        self.color = color
        self.ascii_cards = ascii_cards

    def _c(self, text: str, *codes: str) -> str:
        return paint(text, *codes, enabled=self.color)

    def _cards(self, cards) -> str:
        if self.ascii_cards:
            return cards_horizontal(cards, color=self.color)
        return " ".join(card_str(c) for c in cards)

    def header(self, title: str) -> str:
        return self._c(f"--- {title} ---", Colors.BOLD, Colors.CYAN)

    def render_players(self, players: List[Any]) -> List[str]:
        out = [self.header("Players")]
        for p in players:
            out.append(f"  {p.name} ({p.player_id}): {p.chips} chips")
        return out

    def render_board(self, community) -> List[str]:
        out = []
        for title, start, end in (("Flop", 0, 3), ("Turn", 3, 4), ("River", 4, 5)):
            if len(community) < end:
                break
            out.append(self.header(title))
            out.append(self._cards(community[start:end]))
        return out

    def render_showdown(self, result: Dict[str, Any]) -> List[str]:
        out = [self.header("Showdown")]
        for name, value in result['hands'].items():
            description = result['descriptions'][name]
            tiebreak = ", ".join(str(r) for r in value.tiebreak)
            out.append(f"  {name}: {self._c(description, Colors.YELLOW)} {self._c(f'[{tiebreak}]', Colors.DIM)}")
        return out

    def render_winner(self, result: Dict[str, Any]) -> str:
        winners = result['winners']
        if not winners:
            return self._c("No contenders left at showdown", Colors.DIM)
        if len(winners) > 1:
            return self._c(f"🤝 Tie between {' and '.join(winners)}!", Colors.BOLD, Colors.MAGENTA)
        winner = winners[0]
        description = result['descriptions'][winner]
        return self._c(f"🏆 {winner} wins with {description}!", Colors.BOLD, Colors.GREEN)

    def render(self, players: List[Any], result: Dict[str, Any]) -> str:
        """Render a finished round as a colorized narrative."""
        out = [self._c("🃏 New round of Texas Hold'em", Colors.BOLD, Colors.YELLOW), ""]
        out.extend(self.render_players(players))
        out.append("")

        out.append(self.header("Hole cards"))
        for name, hand in result['all_hands'].items():
            out.append(f"{name}:")
            out.append(self._cards(hand))
        out.append("")

        out.extend(self.render_board(result['community']))
        out.append("")
        out.extend(self.render_showdown(result))
        out.append("")
        out.append(self.render_winner(result))
        return "\n".join(out)
