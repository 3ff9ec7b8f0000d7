"""
Deck and card operations for the Hold'em engine.

Cards are small immutable named tuples of (rank label, suit letter), so they
unpack like plain tuples: ``rank, suit = card``.
"""

import random
from types import MappingProxyType
from typing import Iterable, List, NamedTuple, Optional

from holdem.errors import InvalidInput


RANKS = ('2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K', 'A')
SUITS = ('h', 'd', 'c', 's')  # hearts, diamonds, clubs, spades

# Rank ordinal table: face label -> strength (Ace high)
RANK_VALUES = MappingProxyType({label: value for value, label in enumerate(RANKS, start=2)})

SUIT_SYMBOLS = MappingProxyType({
    'h': '♥',
    'd': '♦',
    'c': '♣',
    's': '♠',
})

_SYMBOL_TO_SUIT = {symbol: letter for letter, symbol in SUIT_SYMBOLS.items()}
_RANK_ALIASES = {'T': '10'}


class Card(NamedTuple):
    rank: str
    suit: str

    def __str__(self) -> str:
        return card_str(self)


def rank_value(rank: str) -> int:
    """Look up the strength (2..14) of a rank label."""
    try:
        return RANK_VALUES[rank]
    except KeyError:
        raise InvalidInput(f"Unknown card rank: {rank!r}") from None


def parse_card(text: str) -> Card:
    """Parse a short card string such as ``As``, ``10h``, ``Td`` or ``Q♠``."""
    text = text.strip()
    if len(text) < 2:
        raise InvalidInput(f"Invalid card format: {text!r}")

    rank, suit = text[:-1].upper(), text[-1]
    rank = _RANK_ALIASES.get(rank, rank)
    suit = _SYMBOL_TO_SUIT.get(suit, suit.lower())

    if rank not in RANK_VALUES or suit not in SUIT_SYMBOLS:
        raise InvalidInput(f"Invalid card format: {text!r}")
    return Card(rank, suit)


def parse_cards(text: str) -> List[Card]:
    """Parse a whitespace or comma separated list of cards."""
    return [parse_card(token) for token in text.replace(',', ' ').split()]


def card_str(card: Card) -> str:
    """Convert a card to its compact string representation, e.g. ``A♠``."""
    r, s = card
    return f"{r}{SUIT_SYMBOLS.get(s, s)}"


def make_deck() -> List[Card]:
    """Create a standard, unshuffled 52-card deck."""
    return [Card(r, s) for s in SUITS for r in RANKS]


class Deck:
    """A 52-card deck that deals from the top (front)."""

    def __init__(self, cards: Optional[Iterable[Card]] = None, seed: Optional[int] = None):
        self._cards: List[Card] = list(cards) if cards is not None else make_deck()
        self._rng = random.Random(seed)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(list(self._cards))

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place."""
        self._rng.shuffle(self._cards)

    def deal(self) -> Card:
        """Remove and return the top card of the deck."""
        if not self._cards:
            raise ValueError("Cannot deal from an empty deck")
        return self._cards.pop(0)

    def deal_many(self, num_cards: int) -> List[Card]:
        """Deal a number of cards from the top of the deck."""
        if len(self._cards) < num_cards:
            raise ValueError(f"Cannot deal {num_cards} cards from deck of {len(self._cards)}")
        return [self.deal() for _ in range(num_cards)]


def create_shuffled_deck(seed: Optional[int] = None) -> Deck:
    """Create and return a shuffled deck."""
    deck = Deck(seed=seed)
    deck.shuffle()
    return deck
