"""
Hand evaluation for the Hold'em engine.

A hand is scored as a ``HandValue``: its category plus a tiebreak sequence
of rank strengths. Two values of the same category always carry tiebreaks
with the same positional meaning, so they compare lexicographically.
"""

import itertools
import logging
from enum import IntEnum
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from holdem.deck import SUIT_SYMBOLS, Card, rank_value
from holdem.errors import InvalidInput


WHEEL = (14, 5, 4, 3, 2)


class HandCategory(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    HandCategory.HIGH_CARD: 'High Card',
    HandCategory.ONE_PAIR: 'One Pair',
    HandCategory.TWO_PAIR: 'Two Pair',
    HandCategory.THREE_OF_A_KIND: 'Three of a Kind',
    HandCategory.STRAIGHT: 'Straight',
    HandCategory.FLUSH: 'Flush',
    HandCategory.FULL_HOUSE: 'Full House',
    HandCategory.FOUR_OF_A_KIND: 'Four of a Kind',
    HandCategory.STRAIGHT_FLUSH: 'Straight Flush',
}


class HandValue(NamedTuple):
    """Comparable strength of a 5-card hand.

    Being a tuple of (category, tiebreak), the usual comparison operators
    already order hands correctly; ``is_better_than`` spells the rule out.
    """
    category: HandCategory
    tiebreak: Tuple[int, ...]

    def is_better_than(self, other: "HandValue") -> bool:
        if self.category != other.category:
            return self.category > other.category
        for mine, theirs in zip(self.tiebreak, other.tiebreak):
            if mine != theirs:
                return mine > theirs
        # every compared element equal: tie
        return False

    def ties_with(self, other: "HandValue") -> bool:
        return not self.is_better_than(other) and not other.is_better_than(self)

    @property
    def description(self) -> str:
        return hand_description(self)


def _straight_high(ranks: Sequence[int]) -> Optional[int]:
    """Return the straight's high card for 5 ranks sorted desc, or None.

    The wheel (A-2-3-4-5) plays the Ace as 1, so its high card is 5.
    """
    if all(ranks[i] - ranks[i + 1] == 1 for i in range(4)):
        return ranks[0]
    if tuple(ranks) == WHEEL:
        return 5
    return None


def evaluate_5cards(cards: Sequence[Card]) -> HandValue:
    """Evaluate exactly 5 cards and return their HandValue."""
    if len(cards) != 5:
        raise InvalidInput(f"Expected exactly 5 cards, got {len(cards)}")

    ranks = sorted((rank_value(r) for r, _ in cards), reverse=True)
    suits = [s for _, s in cards]
    for s in suits:
        if s not in SUIT_SYMBOLS:
            raise InvalidInput(f"Unknown card suit: {s!r}")

    # counts indexed by strength, groups read high-to-low
    counts = [0] * 15
    for r in ranks:
        counts[r] += 1
    by_strength = range(14, 1, -1)
    quads = [r for r in by_strength if counts[r] >= 4]
    trips = [r for r in by_strength if counts[r] == 3]
    pairs = [r for r in by_strength if counts[r] == 2]
    singles = [r for r in by_strength if counts[r] == 1]

    is_flush = len(set(suits)) == 1
    straight_high = _straight_high(ranks)

    if is_flush and straight_high is not None:
        return HandValue(HandCategory.STRAIGHT_FLUSH, (straight_high,))

    if quads:
        quad = quads[0]
        # five of one rank only happens with duplicated cards
        kicker = next((r for r in ranks if r != quad), quad)
        return HandValue(HandCategory.FOUR_OF_A_KIND, (quad, kicker))

    if trips and pairs:
        return HandValue(HandCategory.FULL_HOUSE, (trips[0], pairs[0]))

    if is_flush:
        return HandValue(HandCategory.FLUSH, tuple(ranks))

    if straight_high is not None:
        return HandValue(HandCategory.STRAIGHT, (straight_high,))

    if trips:
        return HandValue(HandCategory.THREE_OF_A_KIND, (trips[0], *singles))

    if len(pairs) == 2:
        return HandValue(HandCategory.TWO_PAIR, (pairs[0], pairs[1], singles[0]))

    if pairs:
        return HandValue(HandCategory.ONE_PAIR, (pairs[0], *singles))

    return HandValue(HandCategory.HIGH_CARD, tuple(ranks))


def evaluate_best_hand(cards: Iterable[Card]) -> HandValue:
    """Return the best HandValue over every 5-card subset of ``cards``.

    Typically called with 7 cards (2 hole + 5 community), i.e. 21 subsets.
    """
    cards = list(cards)
    if len(cards) < 5:
        raise InvalidInput(f"Need at least 5 cards to make a hand, got {len(cards)}")

    combos = itertools.combinations(cards, 5)
    best = evaluate_5cards(next(combos))
    for combo in combos:
        value = evaluate_5cards(combo)
        if value.is_better_than(best):
            best = value

    logging.debug(f"Best hand from {len(cards)} cards: {best.category.label} {list(best.tiebreak)}")
    return best


def compare_hands(a: HandValue, b: HandValue) -> int:
    """Return 1 if ``a`` wins, -1 if ``b`` wins, 0 on a tie."""
    if a.is_better_than(b):
        return 1
    if b.is_better_than(a):
        return -1
    return 0


def best_hands(values: Iterable[HandValue]) -> List[int]:
    """Indices of the value(s) that no other value beats."""
    values = list(values)
    winners: List[int] = []
    for i, value in enumerate(values):
        if not winners or value.is_better_than(values[winners[0]]):
            winners = [i]
        elif value.ties_with(values[winners[0]]):
            winners.append(i)
    return winners


def rank_name(r: int) -> str:
    names = {11: 'Jack', 12: 'Queen', 13: 'King', 14: 'Ace'}
    return names.get(r, str(r))


def rank_name_plural(r: int) -> str:
    names = {6: 'Sixes', 11: 'Jacks', 12: 'Queens', 13: 'Kings', 14: 'Aces'}
    return names.get(r, f"{r}s")


def hand_description(value: HandValue) -> str:
    """Convert a hand value to a human-readable description."""
    category, tiebreakers = value

    if category == HandCategory.STRAIGHT_FLUSH:
        if tiebreakers[0] == 14:
            return "Royal Flush"
        return f"Straight Flush, {rank_name(tiebreakers[0])} high"

    elif category == HandCategory.FOUR_OF_A_KIND:
        return f"Four of a Kind, {rank_name_plural(tiebreakers[0])}"

    elif category == HandCategory.FULL_HOUSE:
        trips_rank, pair_rank = tiebreakers[:2]
        return f"Full House, {rank_name_plural(trips_rank)} over {rank_name_plural(pair_rank)}"

    elif category == HandCategory.FLUSH:
        return f"Flush, {rank_name(tiebreakers[0])} high"

    elif category == HandCategory.STRAIGHT:
        if tiebreakers[0] == 5:
            return "Straight, 5 high (Wheel)"
        return f"Straight, {rank_name(tiebreakers[0])} high"

    elif category == HandCategory.THREE_OF_A_KIND:
        return f"Three of a Kind, {rank_name_plural(tiebreakers[0])}"

    elif category == HandCategory.TWO_PAIR:
        high_pair, low_pair = tiebreakers[:2]
        return f"Two Pair, {rank_name_plural(high_pair)} and {rank_name_plural(low_pair)}"

    elif category == HandCategory.ONE_PAIR:
        return f"Pair of {rank_name_plural(tiebreakers[0])}"

    else:
        return f"High Card, {rank_name(tiebreakers[0])}"
