from typing import List, Sequence

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from swiss_engine.api.dependencies import get_tournament_service
from swiss_engine.models.match_model import MatchModel
from swiss_engine.models.participant_model import ParticipantModel
from swiss_engine.models.standing_model import ParticipantStats
from swiss_engine.models.tournament_model import FinalStandings, RoundAdvance, RoundStart, TournamentType
from swiss_engine.schemas import tournament_schemas
from swiss_engine.services.tournament_service import TournamentService

router = APIRouter()

def _check_same_tournament(
    tournament_id: str,
    participants: Sequence[ParticipantModel],
    matches: Sequence[MatchModel] = (),
):
    # Participants without a tournament_id are accepted as belonging to the path tournament
    foreign_participants = [
        p.id for p in participants if p.tournament_id is not None and p.tournament_id != tournament_id
    ]
    if foreign_participants:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Participant(s) {', '.join(foreign_participants)} belong to a different tournament than {tournament_id}",
        )
    foreign = [m for m in matches if m.tournament_id != tournament_id]
    if foreign:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{len(foreign)} match(es) belong to a different tournament than {tournament_id}",
        )

@router.get("/recommended-rounds", response_model=tournament_schemas.RecommendedRoundsResponse)
async def recommended_rounds_endpoint(
    players: int = Query(..., ge=0, description="Number of registered participants"),
    tournament_type: TournamentType = TournamentType.SWISS,
    service: TournamentService = Depends(get_tournament_service),
):
    return {"players": players, "rounds": service.recommended_rounds(players, tournament_type)}

@router.post("/{tournament_id}/start", response_model=RoundStart, status_code=status.HTTP_201_CREATED)
async def start_tournament_endpoint(
    request_in: tournament_schemas.StartTournamentRequest,
    tournament_id: str = Path(..., description="The ID of the tournament"),
    service: TournamentService = Depends(get_tournament_service),
):
    """
    Generates the random round 1 pairings. The caller stores the returned matches
    and marks the tournament active.
    """
    _check_same_tournament(tournament_id, request_in.participants)
    try:
        return service.start_tournament(
            tournament_id,
            request_in.participants,
            tournament_type=request_in.tournament_type,
            total_rounds=request_in.total_rounds,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotImplementedError as e:
        raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail=str(e))

@router.post("/{tournament_id}/standings", response_model=List[ParticipantStats])
async def standings_endpoint(
    request_in: tournament_schemas.StandingsRequest,
    tournament_id: str = Path(..., description="The ID of the tournament"),
    service: TournamentService = Depends(get_tournament_service),
):
    _check_same_tournament(tournament_id, request_in.participants, request_in.matches)
    return service.standings(request_in.participants, request_in.matches, request_in.rounds_so_far)

@router.post("/{tournament_id}/next-round", response_model=RoundAdvance, status_code=status.HTTP_201_CREATED)
async def next_round_endpoint(
    request_in: tournament_schemas.NextRoundRequest,
    tournament_id: str = Path(..., description="The ID of the tournament"),
    service: TournamentService = Depends(get_tournament_service),
):
    """
    Returns the standings snapshot after `current_round` (to be upserted onto the
    participants) and the Swiss pairings of the following round.
    """
    _check_same_tournament(tournament_id, request_in.participants, request_in.matches)
    try:
        return service.advance_round(
            tournament_id, request_in.current_round, request_in.participants, request_in.matches
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.post("/{tournament_id}/finish", response_model=FinalStandings)
async def finish_tournament_endpoint(
    request_in: tournament_schemas.FinishTournamentRequest,
    tournament_id: str = Path(..., description="The ID of the tournament"),
    service: TournamentService = Depends(get_tournament_service),
):
    _check_same_tournament(tournament_id, request_in.participants, request_in.matches)
    return service.finish_tournament(
        tournament_id,
        request_in.participants,
        request_in.matches,
        total_rounds=request_in.total_rounds,
        current_round=request_in.current_round,
    )
