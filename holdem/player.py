"""
Player model and manager for the Hold'em engine.

A Player only carries table bookkeeping (id, name, chips, hole cards and a
state flag); the engine and showdown read these, they never bet.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from holdem.deck import Card


DEFAULT_CHIPS = 1000


class Player:
    def __init__(self, name: str, chips: int = DEFAULT_CHIPS, player_id: Optional[str] = None):
        self.name = name
        self.player_id = player_id or name
        self.chips = chips
        self.hand: List[Card] = []
        self.state: str = 'active'  # active, folded

    def __repr__(self) -> str:
        return f"Player(id={self.player_id!r}, name={self.name!r}, chips={self.chips})"

    def cards_with(self, community: Iterable[Card]) -> List[Card]:
        """Hole cards plus the given community cards."""
        return list(self.hand) + list(community)

    def fold(self) -> None:
        self.state = 'folded'


class PlayerManager:
    def __init__(self):
        self.players: List[Player] = []

    def register_player(self, name: str, chips: int = DEFAULT_CHIPS) -> Player:
        existing = next((p for p in self.players if p.name == name), None)
        if existing:
            logging.debug(f"Player {name} already exists, returning existing player")
            return existing

        player = Player(name, chips=chips, player_id=f"player{len(self.players) + 1}")
        self.players.append(player)
        logging.debug(f"Player {name} registered as {player.player_id} with {chips} chips")
        return player

    def assign_seats(self) -> Dict[int, str]:
        # simple sequential seat assignment
        return {i + 1: p.name for i, p in enumerate(self.players)}
