import logging
from typing import Dict, Iterable

from swiss_engine.core.config import Settings, settings
from swiss_engine.models.match_model import MatchModel
from swiss_engine.models.participant_model import ParticipantModel
from swiss_engine.models.standing_model import ParticipantStats

logger = logging.getLogger(__name__)

def aggregate_stats(
    participants: Iterable[ParticipantModel],
    matches: Iterable[MatchModel],
    config: Settings = settings,
) -> Dict[str, ParticipantStats]:
    """
    Folds the match history into fresh per-participant totals.
    Tie-break fields are left at zero; see tiebreak_service.apply_tiebreaks.
    Matches that reference unknown participants are skipped.
    """
    stats_by_id: Dict[str, ParticipantStats] = {}
    for p in participants:
        if p.id in stats_by_id:
            logger.warning("Duplicate participant id %s; keeping the first entry", p.id)
            continue
        stats_by_id[p.id] = ParticipantStats(id=p.id, user_id=p.user_id)

    for match in matches:
        if match.is_bye:
            bye_stats = stats_by_id.get(match.player1_id)
            if bye_stats is None:
                logger.debug("Skipping bye %s for unknown participant %s", match.id, match.player1_id)
                continue
            # Byes score like a win but never count as a real win
            bye_stats.points += config.BYE_POINTS
            bye_stats.has_bye = True
            continue

        p1 = stats_by_id.get(match.player1_id)
        p2 = stats_by_id.get(match.player2_id)
        if p1 is None or p2 is None:
            logger.debug(
                "Skipping match %s (round %s): unknown participant in %s vs %s",
                match.id, match.round_number, match.player1_id, match.player2_id,
            )
            continue

        # Unplayed matches and double losses still count as faced opponents
        p1.opponents.append(p2.id)
        p2.opponents.append(p1.id)

        if match.winner_id == p1.id:
            p1.points += config.POINTS_PER_WIN
            p1.real_wins += 1
        elif match.winner_id == p2.id:
            p2.points += config.POINTS_PER_WIN
            p2.real_wins += 1

    return stats_by_id
