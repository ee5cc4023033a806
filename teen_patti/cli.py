# cli.py
from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .cards import make_rng, parse_hand
from .config import resolve_config
from .constants import SELECTIONS, TIE_POLICIES
from .display import Console, ask_winner, show_round, wait_for_start
from .errors import RedealLimitExceeded
from .game import play_controlled_round, play_free_round
from .hand_eval import evaluate_hand
from .log_utils import get_logger, setup_logging
from .stats import simulate

_log = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="teen-patti", description="Three-player Teen Patti showdown")
    ap.add_argument("--config", type=str, default=None, help="JSON game config (else $TEEN_PATTI_CONFIG)")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--max-redeals", type=int, default=None)
    ap.add_argument("--no-color", action="store_true")
    ap.add_argument("--tie-policy", choices=TIE_POLICIES, default=None,
                    help="free play: show a tie or deal again")

    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("play", help="one round, winner by chance")

    rig = sub.add_parser("rig", help="one round, winner chosen up front")
    rig.add_argument("--winner", choices=SELECTIONS, default=None, help="skip the prompt")

    ev = sub.add_parser("evaluate", help="classify a single hand")
    ev.add_argument("cards", nargs=3, help='e.g. AS KH QD or "10 of Hearts"')

    sim = sub.add_parser("simulate", help="tally categories over many rounds")
    sim.add_argument("--rounds", type=int, default=10000)
    sim.add_argument("--out", type=str, default=None, help="append a JSONL record here")

    return ap


def _cmd_play(args, cfg, console: Console) -> int:
    wait_for_start(console)
    result = play_free_round(cfg, make_rng(cfg.seed))
    show_round(console, result)
    return 0


def _cmd_rig(args, cfg, console: Console) -> int:
    selection = args.winner or ask_winner(console)
    result = play_controlled_round(cfg, make_rng(cfg.seed), selection)
    _log.debug(f"controlled round took {result.deals} deal(s)")
    show_round(console, result)
    return 0


def _cmd_evaluate(args, cfg, console: Console) -> int:
    hand = parse_hand(args.cards)
    label, rank, tiebreak = evaluate_hand(hand)
    console.write(f"Reason: {label}")
    console.write(f"Rank: {rank}")
    console.write(f"Tiebreak: {tiebreak}")
    return 0


def _cmd_simulate(args, cfg, console: Console) -> int:
    stats = simulate(args.rounds, make_rng(cfg.seed), cfg)
    snap = stats.snapshot()
    console.write(f"rounds={snap['rounds']} ties={snap['ties']} tie_rate={snap['tie_rate']:.4f}")
    for label, n in snap["hands"].items():
        console.write(f"{label:<14} hands={n:<8} wins={snap['wins'][label]}")
    if args.out:
        stats.dump_jsonl(args.out, {"seed": cfg.seed})
    return 0


_COMMANDS = {
    "play": _cmd_play,
    "rig": _cmd_rig,
    "evaluate": _cmd_evaluate,
    "simulate": _cmd_simulate,
}


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)

    try:
        cfg = resolve_config(
            args.config,
            seed=args.seed,
            max_redeals=args.max_redeals,
            tie_policy=args.tie_policy,
        )
    except (OSError, ValueError) as e:
        print(f"config error: {e}", file=sys.stderr)
        return 2
    if args.no_color:
        cfg.color = False

    console = console or Console()
    console.color = cfg.color

    try:
        return _COMMANDS[args.command](args, cfg, console)
    except RedealLimitExceeded as e:
        _log.error(str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # bad cards for `evaluate`, bad --rounds for `simulate`
        print(f"error: {e}", file=sys.stderr)
        return 2


def play_main() -> int:
    """Entry point for free play."""
    return main(sys.argv[1:] + ["play"])


def rig_main() -> int:
    """Entry point for the controlled-outcome mode."""
    return main(sys.argv[1:] + ["rig"])


if __name__ == "__main__":
    sys.exit(main())
