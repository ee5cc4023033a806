from typing import List, Sequence

import numpy as np
import pytest

from teen_patti.cards import Card, canonical_deck, parse_card


def hand(*codes: str) -> List[Card]:
    return [parse_card(c) for c in codes]


def rigged_order(hands: Sequence[Sequence[Card]]) -> np.ndarray:
    """
    Permutation of the canonical deck that deals `hands` (round-robin,
    from the end of the deck) to players in order.
    """
    deck = canonical_deck()
    dealt_sequence = [h[i] for i in range(3) for h in hands]
    top = list(reversed(dealt_sequence))
    rest = [c for c in deck if c not in top]
    ordered = rest + top
    return np.array([deck.index(c) for c in ordered])


class ScriptedRng:
    """Stands in for numpy's Generator; replays permutations, then identity."""

    def __init__(self, orders):
        self.orders = list(orders)
        self.calls = 0

    def permutation(self, n):
        self.calls += 1
        if self.orders:
            return self.orders.pop(0)
        return np.arange(n)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
