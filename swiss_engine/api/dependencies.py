from fastapi import Depends

from swiss_engine.core.config import Settings, get_settings
from swiss_engine.services.tournament_service import TournamentService

def get_tournament_service(config: Settings = Depends(get_settings)) -> TournamentService:
    return TournamentService(config=config)
