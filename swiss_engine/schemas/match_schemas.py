from typing import Optional

from pydantic import BaseModel, Field

from swiss_engine.models.match_model import MatchModel

class MatchResultUpdate(BaseModel):
    match: MatchModel
    score_p1: int = Field(..., ge=0)
    score_p2: int = Field(..., ge=0)
    winner_id: Optional[str] = None # None records a double loss
