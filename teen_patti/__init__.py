from .cards import Card, Deck, make_rng, parse_card, parse_hand
from .constants import GameConfig
from .errors import TeenPattiError, InvalidSelectionError, RedealLimitExceeded
from .game import (
    Player, RoundResult,
    deal_players, evaluate_players, resolve_winner,
    play_free_round, play_controlled_round,
)
from .hand_eval import classify_hand, rank_hand, evaluate_hand, compare_hands

__version__ = "0.1.0"
