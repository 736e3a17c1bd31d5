from fastapi import APIRouter, Depends, HTTPException, status

from swiss_engine.api.dependencies import get_tournament_service
from swiss_engine.models.match_model import MatchModel
from swiss_engine.schemas import match_schemas
from swiss_engine.services.tournament_service import TournamentService

router = APIRouter()

@router.post("/result", response_model=MatchModel)
async def submit_match_result_endpoint(
    result_in: match_schemas.MatchResultUpdate,
    service: TournamentService = Depends(get_tournament_service),
):
    try:
        return service.record_result(
            result_in.match, result_in.score_p1, result_in.score_p2, winner_id=result_in.winner_id
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
