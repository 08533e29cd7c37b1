"""Poker hand evaluation for Texas Hold'em."""

from collections import Counter
from dataclasses import dataclass, field
from enum import IntEnum
from itertools import combinations
from typing import Iterable

from .card import Card, Rank, as_card, duplicate_codes, sort_cards
from .errors import ArityError, DuplicateCardError

# Stands in for the ace in a wheel (A-2-3-4-5) so it ranks below the two.
WHEEL_ACE = -1

_WHEEL = [Rank.ACE.index, 3, 2, 1, 0]


class HandCategory(IntEnum):
    """Poker hand categories from lowest to highest."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    def __str__(self) -> str:
        return self.name.replace("_", " ").title().replace(" Of A ", " of a ")


@dataclass(frozen=True, slots=True, order=True)
class HandResult:
    """Comparable result of classifying one 5-card hand.

    Comparison works by:
    1. HandCategory (pair beats high card, etc.)
    2. Key, element by element (e.g. trips rank, then pair rank)

    The cards themselves take no part in comparison, so two results from
    different suits with the same category and key are equal.
    """

    category: HandCategory
    key: tuple[int, ...]
    cards: tuple[Card, ...] = field(compare=False)

    @property
    def name(self) -> str:
        return str(self.category)

    def __str__(self) -> str:
        return self.name


def classify(cards: Iterable[Card | str]) -> HandResult:
    """Classify exactly 5 cards."""
    hand = [as_card(c) for c in cards]
    if len(hand) != 5:
        raise ArityError(f"Hand must have exactly 5 cards, got {len(hand)}")
    dupes = duplicate_codes(hand)
    if dupes:
        raise DuplicateCardError(dupes)
    return _classify_five(hand)


def _classify_five(hand: list[Card]) -> HandResult:
    values = sorted((c.rank.index for c in hand), reverse=True)
    counts = Counter(values)
    grouped = tuple(sorted(counts, key=lambda v: (counts[v], v), reverse=True))
    shape = sorted(counts.values(), reverse=True)

    is_flush = len({c.suit for c in hand}) == 1
    is_wheel = values == _WHEEL
    is_straight = is_wheel or (
        len(counts) == 5 and values[0] - values[4] == 4
    )
    straight_key = (3, 2, 1, 0, WHEEL_ACE) if is_wheel else tuple(values)
    cards = tuple(sort_cards(hand))

    if is_straight and is_flush:
        if values[0] == Rank.ACE.index and not is_wheel:
            return HandResult(HandCategory.ROYAL_FLUSH, straight_key, cards)
        return HandResult(HandCategory.STRAIGHT_FLUSH, straight_key, cards)

    if shape[0] == 4:
        return HandResult(HandCategory.FOUR_OF_A_KIND, grouped, cards)

    if shape[:2] == [3, 2]:
        return HandResult(HandCategory.FULL_HOUSE, grouped, cards)

    if is_flush:
        return HandResult(HandCategory.FLUSH, tuple(values), cards)

    if is_straight:
        return HandResult(HandCategory.STRAIGHT, straight_key, cards)

    if shape[0] == 3:
        return HandResult(HandCategory.THREE_OF_A_KIND, grouped, cards)

    if shape[:2] == [2, 2]:
        return HandResult(HandCategory.TWO_PAIR, grouped, cards)

    if shape[0] == 2:
        return HandResult(HandCategory.ONE_PAIR, grouped, cards)

    return HandResult(HandCategory.HIGH_CARD, tuple(values), cards)


def best_hand(
    hole_cards: Iterable[Card | str],
    community: Iterable[Card | str] = (),
) -> HandResult:
    """Find the best 5-card hand from hole cards plus community cards.

    Every 5-card subset of the 5 to 7 available cards is classified; the
    first of any equally-valued subsets wins, so the result is stable.
    """
    available = [as_card(c) for c in hole_cards] + [as_card(c) for c in community]
    if not 5 <= len(available) <= 7:
        raise ArityError(f"Need 5 to 7 cards to make a hand, got {len(available)}")
    dupes = duplicate_codes(available)
    if dupes:
        raise DuplicateCardError(dupes)

    best: HandResult | None = None
    for five_cards in combinations(available, 5):
        result = _classify_five(list(five_cards))
        if best is None or result > best:
            best = result
    return best  # type: ignore


def compare_results(a: HandResult, b: HandResult) -> int:
    """Compare two hand results.

    Returns:
        1 if a wins, -1 if b wins, 0 if tie
    """
    if a > b:
        return 1
    elif a < b:
        return -1
    return 0
