"""
Core game engine: owns the deck and the community cards for one round.
"""

import logging
from typing import Any, Dict, List, Optional

from holdem.deck import Card, Deck


class GameEngine:
    """Core game engine handling the deck, dealing, and street progression."""

    def __init__(self, players: List[Any], seed: Optional[int] = None):
        self.players = players
        self.seed = seed
        self.deck = Deck(seed=seed)
        self.community: List[Card] = []
        self.street = 'waiting'

    def reset_round(self):
        """Reset the game state for a new round."""
        self.deck = Deck(seed=self.seed)
        self.deck.shuffle()
        self.community = []
        self.street = 'preflop'
        for p in self.players:
            p.hand = []
            p.state = 'active'
        logging.debug(f"Round reset: {len(self.players)} players, {len(self.deck)} cards in deck")

    def draw(self, n=1) -> List[Card]:
        """Draw n cards from the top of the deck."""
        return self.deck.deal_many(n)

    def deal_hole_cards(self):
        """Deal 2 hole cards to each player, one at a time."""
        for _ in range(2):
            for p in self.players:
                p.hand.append(self.draw(1)[0])

    def deal_flop(self):
        """Deal the flop (3 community cards)."""
        self.community.extend(self.draw(3))
        self.street = 'flop'

    def deal_turn(self):
        """Deal the turn (1 community card)."""
        self.community.extend(self.draw(1))
        self.street = 'turn'

    def deal_river(self):
        """Deal the river (1 community card)."""
        self.community.extend(self.draw(1))
        self.street = 'river'

    def get_public_state(self, include_all_hands=False) -> Dict[str, Any]:
        """Get the current public game state."""
        state = {
            'community': list(self.community),
            'street': self.street,
            'players': [(p.name, p.chips, p.state) for p in self.players],
            'cards_left': len(self.deck),
        }

        if include_all_hands:
            state['all_hands'] = {p.name: list(p.hand) for p in self.players}

        return state
