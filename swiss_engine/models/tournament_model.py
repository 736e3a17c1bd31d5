from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from swiss_engine.models.match_model import MatchModel
from swiss_engine.models.standing_model import ParticipantSnapshot, ParticipantStats

class TournamentType(str, Enum):
    SWISS = "SWISS"
    SINGLE_ELIMINATION = "SINGLE_ELIMINATION"
    ROUND_ROBIN = "ROUND_ROBIN"

class RoundStart(BaseModel):
    tournament_id: str
    round_number: int = 1
    total_rounds: int
    matches: List[MatchModel] = Field(default_factory=list)

class RoundAdvance(BaseModel):
    tournament_id: str
    round_number: int
    snapshot: List[ParticipantSnapshot] = Field(default_factory=list) # Standings after the previous round
    matches: List[MatchModel] = Field(default_factory=list)

class FinalStandings(BaseModel):
    tournament_id: str
    standings: List[ParticipantStats] = Field(default_factory=list)
    snapshot: List[ParticipantSnapshot] = Field(default_factory=list)
