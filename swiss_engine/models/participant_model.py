from typing import Optional

from pydantic import BaseModel, Field

class ParticipantModel(BaseModel):
    id: str
    tournament_id: Optional[str] = None
    user_id: Optional[str] = None
    deck_name: Optional[str] = None

    # Snapshot written at round-advance / finish time, not live state
    score: int = Field(default=0, ge=0)
    real_wins: int = Field(default=0, ge=0)
    omw: float = 0.0
    rank: int = Field(default=0, ge=0) # 0 means not ranked yet

    class Config:
        from_attributes = True
