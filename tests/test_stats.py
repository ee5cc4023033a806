import json

import pytest

from teen_patti.cards import make_rng
from teen_patti.constants import GameConfig
from teen_patti.stats import RoundStats, simulate

from conftest import ScriptedRng, rigged_order, hand

TIED = [hand("9S", "9H", "2D"), hand("5S", "5H", "3D"), hand("2C", "7H", "JD")]


def test_simulate_counts_every_hand():
    stats = simulate(200, make_rng(3))
    snap = stats.snapshot()
    assert snap["rounds"] == 200
    assert sum(snap["hands"].values()) == 600
    assert sum(snap["wins"].values()) + snap["ties"] == 200


def test_simulate_counts_ties_without_redealing():
    rng = ScriptedRng([rigged_order(TIED)])
    stats = simulate(1, rng, GameConfig(tie_policy="redeal"))
    assert stats.ties == 1
    assert stats.tie_rate == 1.0
    assert stats.snapshot()["hands"]["Pair"] == 2
    assert rng.calls == 1


def test_simulate_rejects_zero_rounds():
    with pytest.raises(ValueError):
        simulate(0, make_rng(0))


def test_dump_jsonl_appends(tmp_path):
    stats = simulate(10, make_rng(1))
    path = tmp_path / "out" / "stats.jsonl"
    stats.dump_jsonl(str(path), {"seed": 1})
    stats.dump_jsonl(str(path), {"seed": 1})

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    rec = json.loads(lines[0])
    assert rec["seed"] == 1
    assert rec["rounds"] == 10
    assert "ts" in rec


def test_empty_stats():
    assert RoundStats().tie_rate == 0.0
