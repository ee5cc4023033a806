# display.py
from __future__ import annotations
import sys
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, TextIO

from .cards import format_cards
from .errors import InvalidSelectionError
from .game import Player, RoundResult, parse_selection

CSI = "\033["
GREEN = CSI + "32m"
RESET = CSI + "0m"

SEPARATOR = "---------------------------"
START_PROMPT = "Press Enter to start the game..."
SELECT_PROMPT = "Please select the winner: A, B, or C... "
TIE_MESSAGE = "No winner - tie"


@dataclass
class Console:
    """Input/output handed to the presentation layer; swap both out in tests."""
    read: Callable[[str], str] = input
    out: TextIO = field(default_factory=lambda: sys.stdout)
    color: bool = True

    def write(self, line: str = "") -> None:
        self.out.write(line + "\n")

    def highlight(self, text: str) -> str:
        return f"{GREEN}{text}{RESET}" if self.color else text


def wait_for_start(console: Console) -> None:
    console.read(START_PROMPT)


def ask_winner(console: Console) -> str:
    """Re-prompts until the answer is A, B or C."""
    while True:
        raw = console.read(SELECT_PROMPT)
        try:
            return parse_selection(raw)
        except InvalidSelectionError as e:
            console.write(str(e))


def show_players(console: Console, players: Iterable[Player]) -> None:
    for p in players:
        console.write(f"Player: {p.name}")
        console.write(f"Cards: {format_cards(p.cards)}")
        console.write(SEPARATOR)


def show_winner(console: Console, winner: Optional[Player]) -> None:
    if winner is None:
        console.write(console.highlight(TIE_MESSAGE))
        return
    console.write(console.highlight(f"Winner: {winner.name}"))
    console.write(f"Reason: {winner.category}")
    console.write(f"Cards: {format_cards(winner.cards)}")


def show_round(console: Console, result: RoundResult) -> None:
    show_players(console, result.players)
    show_winner(console, result.winner)
