# cards.py
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from .constants import SUITS, RANKS, DECK_SIZE, FACE_VALUES, CARDS_PER_PLAYER
from .log_utils import get_logger

_log = get_logger("cards")


@dataclass(frozen=True)
class Card:
    suit: str   # "Spades" / "Hearts" / "Diamonds" / "Clubs"
    rank: str   # "A", "2".."10", "J", "Q", "K"

    def __post_init__(self):
        if self.suit not in SUITS:
            raise ValueError(f"unknown suit: {self.suit!r}")
        if self.rank not in RANKS:
            raise ValueError(f"unknown rank: {self.rank!r}")

    @property
    def face_value(self) -> int:
        # A=14, K=13, Q=12, J=11, numerals at face value
        return FACE_VALUES.get(self.rank) or int(self.rank)

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Random source for the deck; seed=None draws from OS entropy."""
    return np.random.default_rng(seed)


def canonical_deck() -> List[Card]:
    return [Card(s, r) for s in SUITS for r in RANKS]


class Deck:
    """
    52 cards shuffled once with the injected random source.
    Anything exposing numpy's `permutation(n)` works as `rng`.
    """

    def __init__(self, rng: np.random.Generator) -> None:
        cards = canonical_deck()
        order = rng.permutation(len(cards))
        self._cards: List[Card] = [cards[int(i)] for i in order]
        assert len(self._cards) == DECK_SIZE
        assert len(set(self._cards)) == DECK_SIZE, "deck has duplicates"

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> List[Card]:
        return list(self._cards)

    def draw(self) -> Card:
        assert self._cards, "deck is empty"
        return self._cards.pop()

    def deal(self, num_players: int, cards_per_player: int = CARDS_PER_PLAYER) -> List[List[Card]]:
        """Round-robin from the top of the deck, one card per player per pass."""
        assert num_players * cards_per_player <= len(self._cards)
        hands: List[List[Card]] = [[] for _ in range(num_players)]
        for _ in range(cards_per_player):
            for hand in hands:
                hand.append(self.draw())
        _log.debug(f"dealt {num_players}x{cards_per_player}, {len(self._cards)} left")
        return hands


# =========================
# Parsing
# =========================
_SUIT_BY_INITIAL = {s[0]: s for s in SUITS}
_OF_SPLIT = re.compile(r"\s+of\s+", re.IGNORECASE)


def parse_card(text: str) -> Card:
    """
    Accepts the display form ("10 of Hearts") or a short code ("10H", "as", "Qd").
    """
    raw = text.strip()
    if not raw:
        raise ValueError("empty card")

    parts = _OF_SPLIT.split(raw)
    if len(parts) == 2:
        rank = parts[0].strip().upper()
        suit = parts[1].strip().capitalize()
        if suit not in SUITS:
            raise ValueError(f"unknown suit in card: {text!r}")
    else:
        rank = raw[:-1].upper()
        initial = raw[-1].upper()
        if initial not in _SUIT_BY_INITIAL:
            raise ValueError(f"unknown suit in card: {text!r}")
        suit = _SUIT_BY_INITIAL[initial]

    if rank not in RANKS:
        raise ValueError(f"unknown rank in card: {text!r}")
    return Card(suit, rank)


def parse_hand(texts: Iterable[str]) -> List[Card]:
    hand = [parse_card(t) for t in texts]
    validate_hand(hand)
    return hand


def validate_hand(hand: List[Card]) -> None:
    if len(hand) != CARDS_PER_PLAYER:
        raise ValueError(f"a hand needs exactly {CARDS_PER_PLAYER} cards, got {len(hand)}")
    if len(set(hand)) != len(hand):
        raise ValueError("hand contains duplicate cards")


def format_cards(cards: Iterable[Card]) -> str:
    return ", ".join(str(c) for c in cards)
