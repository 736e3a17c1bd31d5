from typing import List, Optional

from pydantic import BaseModel, Field

class ParticipantStats(BaseModel):
    """Running totals for one participant, recomputed from the full match history."""
    id: str
    user_id: Optional[str] = None

    points: int = 0
    real_wins: int = 0 # Wins excluding byes
    opponents: List[str] = Field(default_factory=list) # Rematches appear twice
    match_win_percentage: float = 0.0
    omw: float = 0.0
    has_bye: bool = False

class ParticipantSnapshot(BaseModel):
    """Per-participant payload the caller upserts onto its participant rows."""
    id: str
    tournament_id: str
    user_id: Optional[str] = None
    score: int
    real_wins: int
    omw: float
    rank: int = Field(ge=1)
