from __future__ import annotations
from collections import Counter
from typing import List, Tuple

from .cards import Card
from .constants import (
    HAND_CAT_TRAIL, HAND_CAT_PURE_SEQUENCE, HAND_CAT_SEQUENCE,
    HAND_CAT_COLOR, HAND_CAT_PAIR, HAND_CAT_HIGH,
    CATEGORY_LABELS, CATEGORY_TIEBREAKS, SEQUENCE_RANKS, CARDS_PER_PLAYER,
)


def _is_color(cards: List[Card]) -> bool:
    return len({c.suit for c in cards}) == 1


def _is_sequence(cards: List[Card]) -> bool:
    # Only A-K-Q counts; no other runs, no wraparound
    return {c.rank for c in cards} == SEQUENCE_RANKS


def classify_hand(cards: List[Card]) -> int:
    """
    Returns the category 1..6, first match wins:
    6 Trail
    5 Pure Sequence
    4 Sequence
    3 Color
    2 Pair
    1 High Card
    """
    assert len(cards) == CARDS_PER_PLAYER, "a hand is exactly 3 cards"

    counts = sorted(Counter(c.rank for c in cards).values(), reverse=True)
    color = _is_color(cards)
    sequence = _is_sequence(cards)

    if counts == [3]:
        return HAND_CAT_TRAIL

    if color and sequence:
        return HAND_CAT_PURE_SEQUENCE

    if sequence:
        return HAND_CAT_SEQUENCE

    if color:
        return HAND_CAT_COLOR

    if counts == [2, 1]:
        return HAND_CAT_PAIR

    return HAND_CAT_HIGH


def high_card_value(cards: List[Card]) -> int:
    return max(c.face_value for c in cards)


def rank_hand(category: int, cards: List[Card]) -> Tuple[int, int]:
    """
    (category_rank, tiebreak). Tiebreaks are only comparable within
    the same category rank; compare the tuple, never the tiebreak alone.
    """
    if category == HAND_CAT_HIGH:
        return category, high_card_value(cards)
    return category, CATEGORY_TIEBREAKS[category]


def evaluate_hand(cards: List[Card]) -> Tuple[str, int, int]:
    """Classify + rank in one step: (label, category_rank, tiebreak)."""
    category = classify_hand(cards)
    rank, tiebreak = rank_hand(category, cards)
    return CATEGORY_LABELS[category], rank, tiebreak


def compare_hands(a: List[Card], b: List[Card]) -> int:
    """
    1 if a wins, -1 if b wins, 0 on a tie
    """
    _, ra, ta = evaluate_hand(a)
    _, rb, tb = evaluate_hand(b)
    if (ra, ta) == (rb, tb):
        return 0
    return 1 if (ra, ta) > (rb, tb) else -1
