"""
Texas Hold'em round coordinator.

Brings together the game engine and the showdown engine to play a single
round from shuffle to showdown.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from holdem.game_engine import GameEngine
from holdem.showdown_engine import ShowdownEngine


class Game:
    """Main game coordinator that orchestrates all game components."""

    def __init__(self, players: List[Any], seed: Optional[int] = None):
        self.players = players
        self.engine = GameEngine(players, seed=seed)
        self.showdown = ShowdownEngine(self.engine)

    @property
    def community(self):
        return self.engine.community

    def play_round(self) -> Dict[str, Any]:
        """Play a single round from shuffle to showdown (no betting)."""
        if len(self.players) < 2:
            raise ValueError("A round needs at least 2 players")

        self.engine.reset_round()
        self.engine.deal_hole_cards()
        self.engine.deal_flop()
        self.engine.deal_turn()
        self.engine.deal_river()
        return self.showdown.evaluate_hands()
