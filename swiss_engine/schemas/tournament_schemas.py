from typing import List, Optional

from pydantic import BaseModel, Field

from swiss_engine.models.match_model import MatchModel
from swiss_engine.models.participant_model import ParticipantModel
from swiss_engine.models.tournament_model import TournamentType

class StartTournamentRequest(BaseModel):
    participants: List[ParticipantModel] = Field(..., description="Participants registered before the start")
    tournament_type: TournamentType = TournamentType.SWISS
    total_rounds: Optional[int] = Field(None, ge=1, description="Defaults to the recommended number of rounds")

class StandingsRequest(BaseModel):
    participants: List[ParticipantModel]
    matches: List[MatchModel] = Field(default_factory=list)
    rounds_so_far: int = Field(1, ge=0)

class NextRoundRequest(BaseModel):
    current_round: int = Field(..., ge=1, description="The round that has just been played")
    participants: List[ParticipantModel]
    matches: List[MatchModel] = Field(default_factory=list)

class FinishTournamentRequest(BaseModel):
    participants: List[ParticipantModel]
    matches: List[MatchModel] = Field(default_factory=list)
    total_rounds: Optional[int] = Field(None, ge=1)
    current_round: Optional[int] = Field(None, ge=1)

class RecommendedRoundsResponse(BaseModel):
    players: int
    rounds: int
