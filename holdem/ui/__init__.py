"""
Terminal presentation helpers for the round narrative.
"""

from .colors import Colors, paint
from .cards import card_art, cards_horizontal, SUIT_COLORS

__all__ = ['Colors', 'paint', 'card_art', 'cards_horizontal', 'SUIT_COLORS']
