from dataclasses import dataclass, field
from typing import List, Optional

# Suits/ranks in canonical deck order (suit-major)
SUITS = ["Spades", "Hearts", "Diamonds", "Clubs"]
RANKS = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]

# Face values for the high-card tiebreak (A is high)
FACE_VALUES = {"A": 14, "K": 13, "Q": 12, "J": 11}

# Categories: Trail > Pure Sequence > Sequence > Color > Pair > High Card
HAND_CAT_TRAIL = 6
HAND_CAT_PURE_SEQUENCE = 5
HAND_CAT_SEQUENCE = 4
HAND_CAT_COLOR = 3
HAND_CAT_PAIR = 2
HAND_CAT_HIGH = 1

CATEGORY_LABELS = {
    HAND_CAT_TRAIL: "Trail",
    HAND_CAT_PURE_SEQUENCE: "Pure Sequence",
    HAND_CAT_SEQUENCE: "Sequence",
    HAND_CAT_COLOR: "Color",
    HAND_CAT_PAIR: "Pair",
    HAND_CAT_HIGH: "High Card",
}

# Flat tiebreaks; High Card uses the best face value instead
CATEGORY_TIEBREAKS = {
    HAND_CAT_TRAIL: 100,
    HAND_CAT_PURE_SEQUENCE: 90,
    HAND_CAT_SEQUENCE: 80,
    HAND_CAT_COLOR: 70,
    HAND_CAT_PAIR: 60,
}

# The only run this variant recognises
SEQUENCE_RANKS = frozenset({"A", "K", "Q"})

NUM_PLAYERS = 3
CARDS_PER_PLAYER = 3
DECK_SIZE = len(SUITS) * len(RANKS)  # 52

SELECTIONS = ("A", "B", "C")

TIE_POLICIES = ("show", "redeal")


@dataclass
class GameConfig:
    player_names: List[str] = field(
        default_factory=lambda: ["Player A", "Player B", "Player C"]
    )
    cards_per_player: int = CARDS_PER_PLAYER
    seed: Optional[int] = None       # None = OS entropy

    # Controlled flow (and free-play "redeal") gives up after this many deals
    max_redeals: int = 1000

    color: bool = True               # ANSI highlight on the winner line
    tie_policy: str = "show"         # free-play only: "show" | "redeal"
