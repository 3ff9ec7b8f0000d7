"""
Showdown and winner determination.
"""

import logging
from typing import Any, Dict, List

from holdem.hand_evaluation import HandValue, best_hands, evaluate_best_hand, hand_description


class ShowdownEngine:
    """Evaluates every player's best hand and names the winner(s)."""

    def __init__(self, game_engine):
        self.game_engine = game_engine

    def evaluate_hands(self) -> Dict[str, Any]:
        """Evaluate players and determine winners among those not folded.

        Returns a dict with winners (list of player names; more than one on a
        tie), each player's HandValue and its description. Chips are not moved.
        """
        community = self.game_engine.community
        hands: Dict[str, HandValue] = {}

        # Evaluate every player holding enough cards, folded ones included for display
        for p in self.game_engine.players:
            seven = p.cards_with(community)
            if len(seven) >= 5:
                hands[p.name] = evaluate_best_hand(seven)

        contenders = [p.name for p in self.game_engine.players
                      if p.state != 'folded' and p.name in hands]
        winners: List[str] = [contenders[i] for i in best_hands(hands[name] for name in contenders)]

        if len(winners) > 1:
            logging.info(f"Showdown tie between {', '.join(winners)}")
        elif winners:
            logging.info(f"Showdown winner: {winners[0]} with {hand_description(hands[winners[0]])}")

        return {
            'winners': winners,
            'hands': hands,
            'descriptions': {name: hand_description(value) for name, value in hands.items()},
            'community': list(community),
            'all_hands': {p.name: list(p.hand) for p in self.game_engine.players},
        }
