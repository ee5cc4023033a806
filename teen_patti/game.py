# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from .cards import Card, Deck, validate_hand
from .constants import GameConfig, NUM_PLAYERS, SELECTIONS, DECK_SIZE
from .errors import InvalidSelectionError, RedealLimitExceeded
from .hand_eval import evaluate_hand
from .log_utils import get_logger

_log = get_logger("game")


@dataclass
class Player:
    name: str
    cards: List[Card] = field(default_factory=list)
    category: str = ""           # label, e.g. "Pure Sequence"
    category_rank: int = 0       # 1..6
    tiebreak: int = 0

    @property
    def score(self):
        return self.category_rank, self.tiebreak


@dataclass
class RoundResult:
    players: List[Player]
    winner: Optional[Player]     # None = tie
    deals: int = 1
    relabeled: bool = False


# =========================
# Deal / evaluate / resolve
# =========================
def deal_players(names: Sequence[str], rng: np.random.Generator, cards_per_player: int = 3) -> List[Player]:
    """Fresh deck + shuffle on every call."""
    assert len(names) == NUM_PLAYERS, "exactly three players"
    deck = Deck(rng)
    hands = deck.deal(len(names), cards_per_player)

    dealt = [c for h in hands for c in h]
    assert len(set(dealt)) == len(dealt), "card dealt twice"
    assert len(deck) == DECK_SIZE - len(dealt)

    return [Player(name=n, cards=h) for n, h in zip(names, hands)]


def evaluate_players(players: List[Player]) -> List[Player]:
    """Shared evaluation step for both game modes; overwrites derived fields."""
    for p in players:
        validate_hand(p.cards)
        p.category, p.category_rank, p.tiebreak = evaluate_hand(p.cards)
        _log.debug(f"{p.name}: {p.category} {p.score}")
    return players


def resolve_winner(players: Sequence[Player]) -> Optional[Player]:
    """
    Unique player with the greatest (category_rank, tiebreak),
    or None when the maximum is shared.
    """
    if not players:
        return None
    best = max(p.score for p in players)
    top = [p for p in players if p.score == best]
    if len(top) > 1:
        _log.info(f"tie between {[p.name for p in top]} at {best}")
        return None
    return top[0]


def deal_until_winner(cfg: GameConfig, rng: np.random.Generator):
    """
    DEAL -> EVALUATE -> RESOLVE, repeated on a tie.
    Returns (players, winner, deals).
    """
    for attempt in range(1, cfg.max_redeals + 1):
        players = evaluate_players(deal_players(cfg.player_names, rng, cfg.cards_per_player))
        winner = resolve_winner(players)
        if winner is not None:
            return players, winner, attempt
        _log.info(f"redeal #{attempt}: no natural winner")

    _log.error(f"redeal limit hit ({cfg.max_redeals})")
    raise RedealLimitExceeded(cfg.max_redeals)


# =========================
# Mode 1: free play
# =========================
def play_free_round(cfg: GameConfig, rng: np.random.Generator) -> RoundResult:
    """
    One chance round. On a tie, tie_policy "show" returns winner=None,
    "redeal" deals again until someone wins outright.
    """
    if cfg.tie_policy == "redeal":
        players, winner, deals = deal_until_winner(cfg, rng)
        return RoundResult(players=players, winner=winner, deals=deals)

    players = evaluate_players(deal_players(cfg.player_names, rng, cfg.cards_per_player))
    return RoundResult(players=players, winner=resolve_winner(players))


# =========================
# Mode 2: controlled outcome
# =========================
def parse_selection(value: str) -> str:
    sel = value.strip()
    if sel not in SELECTIONS:
        raise InvalidSelectionError(value)
    return sel


def selection_to_name(selection: str, names: Sequence[str]) -> str:
    return names[SELECTIONS.index(parse_selection(selection))]


def relabel(players: List[Player], natural: Player, desired_name: str) -> bool:
    """Swap names (only names) of the natural winner and the desired player."""
    if natural.name == desired_name:
        return False
    target = next(p for p in players if p.name == desired_name)
    target.name, natural.name = natural.name, target.name
    _log.info(f"relabel: {desired_name} <-> {target.name}")
    return True


def play_controlled_round(cfg: GameConfig, rng: np.random.Generator, selection: str) -> RoundResult:
    desired = selection_to_name(selection, cfg.player_names)

    players, natural, deals = deal_until_winner(cfg, rng)
    swapped = relabel(players, natural, desired)

    # RE-EVALUATE -> RE-RESOLVE on the relabeled roster
    players = sorted(evaluate_players(players), key=lambda p: p.name)
    winner = resolve_winner(players)
    assert winner is not None and winner.name == desired

    return RoundResult(players=players, winner=winner, deals=deals, relabeled=swapped)
