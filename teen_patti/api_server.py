# api_server.py
from dataclasses import replace

from fastapi import FastAPI, HTTPException

from .cards import Card, make_rng, validate_hand
from .config import resolve_config
from .errors import RedealLimitExceeded
from .game import RoundResult, play_controlled_round, play_free_round
from .hand_eval import evaluate_hand
from .log_utils import get_logger, setup_logging
from .schemas import (
    CardIn, EvaluateRequest, EvaluateResponse,
    RoundRequest, RoundResponse, PlayerOut,
)

setup_logging()
_log = get_logger("api")

app = FastAPI(title="teen-patti")


def _to_response(result: RoundResult) -> RoundResponse:
    return RoundResponse(
        players=[
            PlayerOut(
                name=p.name,
                cards=[CardIn(rank=c.rank, suit=c.suit) for c in p.cards],
                category=p.category,
                category_rank=p.category_rank,
                tiebreak=p.tiebreak,
            )
            for p in result.players
        ],
        winner=result.winner.name if result.winner else None,
        deals=result.deals,
    )


@app.get("/teen_patti/ping")
def ping():
    return {"status": "ok"}


@app.post("/teen_patti/evaluate", response_model=EvaluateResponse)
def evaluate(req: EvaluateRequest):
    cards = [Card(c.suit, c.rank) for c in req.cards]
    try:
        validate_hand(cards)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    label, rank, tiebreak = evaluate_hand(cards)
    return EvaluateResponse(category=label, category_rank=rank, tiebreak=tiebreak)


@app.post("/teen_patti/round", response_model=RoundResponse)
def play_round(req: RoundRequest):
    """
    Free play when `winner` is absent (winner=null on a tie),
    controlled outcome otherwise.
    """
    try:
        cfg = resolve_config()
    except (OSError, ValueError) as e:
        _log.error(f"config error: {e}")
        raise HTTPException(status_code=500, detail=f"config error: {e}")
    if req.seed is not None:
        cfg = replace(cfg, seed=req.seed)
    rng = make_rng(cfg.seed)

    try:
        if req.winner is None:
            result = play_free_round(cfg, rng)
        else:
            result = play_controlled_round(cfg, rng, req.winner)
    except RedealLimitExceeded as e:
        _log.error(f"round failed: {e}")
        raise HTTPException(status_code=503, detail=str(e))

    return _to_response(result)
