import logging
from typing import Iterable, List, Tuple

from swiss_engine.core.config import Settings, settings
from swiss_engine.models.match_model import MatchModel
from swiss_engine.models.participant_model import ParticipantModel
from swiss_engine.models.standing_model import ParticipantSnapshot, ParticipantStats
from swiss_engine.services.stats_service import aggregate_stats
from swiss_engine.services.tiebreak_service import apply_tiebreaks

logger = logging.getLogger(__name__)

def standings_sort_key(stats: ParticipantStats) -> Tuple[int, int, float, str]:
    # points, real wins and OMW% descending; id ascending as the final tie-break
    return (-stats.points, -stats.real_wins, -stats.omw, stats.id)

def rank_standings(stats: Iterable[ParticipantStats]) -> List[ParticipantStats]:
    return sorted(stats, key=standings_sort_key)

def calculate_standings(
    participants: Iterable[ParticipantModel],
    matches: Iterable[MatchModel],
    rounds_so_far: int,
    config: Settings = settings,
) -> List[ParticipantStats]:
    """
    Recomputes the standings from scratch:
    points -> real wins -> OMW% -> participant id.
    """
    stats_by_id = aggregate_stats(participants, matches, config)
    apply_tiebreaks(stats_by_id, rounds_so_far, config)
    standings = rank_standings(stats_by_id.values())
    logger.debug("Calculated standings for %d participants after %d round(s)", len(standings), rounds_so_far)
    return standings

def build_snapshot(standings: List[ParticipantStats], tournament_id: str) -> List[ParticipantSnapshot]:
    return [
        ParticipantSnapshot(
            id=stats.id,
            tournament_id=tournament_id,
            user_id=stats.user_id,
            score=stats.points,
            real_wins=stats.real_wins,
            omw=stats.omw,
            rank=position,
        )
        for position, stats in enumerate(standings, start=1)
    ]
