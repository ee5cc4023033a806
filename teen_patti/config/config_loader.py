# config/config_loader.py
import json
import os
from dataclasses import fields
from typing import Any, Dict, Optional

from ..constants import GameConfig, NUM_PLAYERS, CARDS_PER_PLAYER, TIE_POLICIES
from ..log_utils import get_logger

_log = get_logger("config")

CONFIG_ENV = "TEEN_PATTI_CONFIG"


def _is_int(x) -> bool:
    # bool is an int subclass; true/false are not counts or seeds
    return isinstance(x, int) and not isinstance(x, bool)


def _validate(cfg: GameConfig) -> GameConfig:
    names = cfg.player_names
    if not isinstance(names, list) or len(names) != NUM_PLAYERS:
        raise ValueError(f"player_names must list exactly {NUM_PLAYERS} names")
    if len(set(names)) != NUM_PLAYERS or not all(isinstance(n, str) and n for n in names):
        raise ValueError("player_names must be distinct non-empty strings")
    if cfg.cards_per_player != CARDS_PER_PLAYER:
        raise ValueError(f"cards_per_player must be {CARDS_PER_PLAYER}")
    if cfg.seed is not None and (not _is_int(cfg.seed) or cfg.seed < 0):
        raise ValueError("seed must be a non-negative integer or null")
    if not _is_int(cfg.max_redeals) or cfg.max_redeals < 1:
        raise ValueError("max_redeals must be an integer >= 1")
    if not isinstance(cfg.color, bool):
        raise ValueError("color must be true or false")
    if cfg.tie_policy not in TIE_POLICIES:
        raise ValueError(f"tie_policy must be one of {TIE_POLICIES}")
    return cfg


def config_from_dict(data: Dict[str, Any]) -> GameConfig:
    if not isinstance(data, dict):
        raise ValueError("config must be a JSON object")
    known = {f.name for f in fields(GameConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"unknown config keys: {unknown}")
    return _validate(GameConfig(**data))


def load_game_config(path: str) -> GameConfig:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    cfg = config_from_dict(data)
    _log.info(f"loaded config: {path}")
    return cfg


def resolve_config(path: Optional[str] = None, **overrides) -> GameConfig:
    """
    File given on the command line, else $TEEN_PATTI_CONFIG, else defaults;
    non-None overrides win over the file.
    """
    path = path or os.getenv(CONFIG_ENV)
    cfg = load_game_config(path) if path else GameConfig()
    for k, v in overrides.items():
        if v is not None:
            setattr(cfg, k, v)
    return _validate(cfg)
