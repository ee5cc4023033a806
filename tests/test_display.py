import io

from teen_patti.display import (
    GREEN, RESET, SELECT_PROMPT, START_PROMPT, TIE_MESSAGE,
    Console, ask_winner, show_round, show_winner, wait_for_start,
)
from teen_patti.game import Player, RoundResult, evaluate_players

from conftest import hand


def _console(answers=(), color=False):
    prompts = []
    answers = list(answers)

    def read(prompt):
        prompts.append(prompt)
        return answers.pop(0)

    return Console(read=read, out=io.StringIO(), color=color), prompts


def _result(winner_index=2):
    players = evaluate_players([
        Player("Player A", hand("2S", "5H", "9D")),
        Player("Player B", hand("9S", "9H", "3D")),
        Player("Player C", hand("AC", "KC", "QC")),
    ])
    winner = players[winner_index] if winner_index is not None else None
    return RoundResult(players=players, winner=winner)


def test_round_output_format():
    console, _ = _console()
    show_round(console, _result())
    assert console.out.getvalue().splitlines() == [
        "Player: Player A",
        "Cards: 2 of Spades, 5 of Hearts, 9 of Diamonds",
        "---------------------------",
        "Player: Player B",
        "Cards: 9 of Spades, 9 of Hearts, 3 of Diamonds",
        "---------------------------",
        "Player: Player C",
        "Cards: A of Clubs, K of Clubs, Q of Clubs",
        "---------------------------",
        "Winner: Player C",
        "Reason: Pure Sequence",
        "Cards: A of Clubs, K of Clubs, Q of Clubs",
    ]


def test_winner_line_is_green():
    console, _ = _console(color=True)
    show_winner(console, _result().players[2])
    first = console.out.getvalue().splitlines()[0]
    assert first == f"{GREEN}Winner: Player C{RESET}"


def test_tie_renders_message():
    console, _ = _console()
    show_round(console, _result(winner_index=None))
    lines = console.out.getvalue().splitlines()
    assert lines[-1] == TIE_MESSAGE
    assert not any(l.startswith("Winner:") for l in lines)


def test_wait_for_start_prompts_once():
    console, prompts = _console([""])
    wait_for_start(console)
    assert prompts == [START_PROMPT]


def test_ask_winner_reprompts_on_invalid_input():
    console, prompts = _console(["x", "Player B", "B"])
    assert ask_winner(console) == "B"
    assert prompts == [SELECT_PROMPT] * 3
    assert console.out.getvalue().splitlines() == [
        "Invalid input: x. Please select one of A, B, or C.",
        "Invalid input: Player B. Please select one of A, B, or C.",
    ]
