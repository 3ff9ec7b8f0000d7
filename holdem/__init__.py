"""Texas Hold'em hand evaluation engine."""

from .errors import InvalidInput
from .deck import Card, Deck, RANK_VALUES, card_str, make_deck, parse_card, parse_cards
from .hand_evaluation import (
    HandCategory,
    HandValue,
    compare_hands,
    evaluate_5cards,
    evaluate_best_hand,
    hand_description,
)
from .version import VERSION

__all__ = [
    'InvalidInput',
    'Card',
    'Deck',
    'RANK_VALUES',
    'card_str',
    'make_deck',
    'parse_card',
    'parse_cards',
    'HandCategory',
    'HandValue',
    'compare_hands',
    'evaluate_5cards',
    'evaluate_best_hand',
    'hand_description',
    'VERSION',
]
