# schemas.py
from pydantic import BaseModel, Field
from typing import List, Optional, Literal

SuitIn = Literal["Spades", "Hearts", "Diamonds", "Clubs"]
RankIn = Literal["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]


class CardIn(BaseModel):
    rank: RankIn
    suit: SuitIn


class EvaluateRequest(BaseModel):
    cards: List[CardIn]


class EvaluateResponse(BaseModel):
    category: str
    category_rank: int = Field(..., ge=1, le=6)
    tiebreak: int


class RoundRequest(BaseModel):
    seed: Optional[int] = Field(None, ge=0)

    # None = free play; otherwise the controlled-outcome flow
    winner: Optional[Literal["A", "B", "C"]] = None


class PlayerOut(BaseModel):
    name: str
    cards: List[CardIn]
    category: str
    category_rank: int
    tiebreak: int


class RoundResponse(BaseModel):
    players: List[PlayerOut]
    winner: Optional[str] = None     # None = tie (free play only)
    deals: int
