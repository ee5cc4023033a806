# stats.py
from __future__ import annotations
import os
import json
import time
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

import numpy as np

from .constants import CATEGORY_LABELS, GameConfig
from .game import RoundResult, play_free_round
from .log_utils import get_logger

_log = get_logger("stats")

# index 0 unused, 1..6 = category rank
_NUM_SLOTS = max(CATEGORY_LABELS) + 1


@dataclass
class RoundStats:
    rounds: int = 0
    ties: int = 0
    hands: np.ndarray = field(default_factory=lambda: np.zeros(_NUM_SLOTS, dtype=np.int64))
    wins: np.ndarray = field(default_factory=lambda: np.zeros(_NUM_SLOTS, dtype=np.int64))

    def record(self, result: RoundResult) -> None:
        self.rounds += 1
        ranks = [p.category_rank for p in result.players]
        self.hands += np.bincount(ranks, minlength=_NUM_SLOTS)
        if result.winner is None:
            self.ties += 1
        else:
            self.wins[result.winner.category_rank] += 1

    @property
    def tie_rate(self) -> float:
        return self.ties / self.rounds if self.rounds else 0.0

    def snapshot(self) -> Dict[str, Any]:
        return {
            "rounds": self.rounds,
            "ties": self.ties,
            "tie_rate": round(self.tie_rate, 6),
            "hands": {CATEGORY_LABELS[r]: int(self.hands[r]) for r in CATEGORY_LABELS},
            "wins": {CATEGORY_LABELS[r]: int(self.wins[r]) for r in CATEGORY_LABELS},
        }

    def dump_jsonl(self, path: str, extra: Dict[str, Any]):
        d = os.path.dirname(path)
        if d:
            os.makedirs(d, exist_ok=True)
        rec = {"ts": int(time.time()), **extra, **self.snapshot()}
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")


def simulate(rounds: int, rng: np.random.Generator, cfg: Optional[GameConfig] = None) -> RoundStats:
    """Independent free-play rounds; ties are counted, never re-dealt."""
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    cfg = cfg or GameConfig()
    if cfg.tie_policy != "show":
        cfg = replace(cfg, tie_policy="show")

    stats = RoundStats()
    for _ in range(rounds):
        stats.record(play_free_round(cfg, rng))
    _log.info(f"simulated {rounds} rounds, tie_rate={stats.tie_rate:.4f}")
    return stats
