from typing import Dict

from swiss_engine.core.config import Settings, settings
from swiss_engine.models.standing_model import ParticipantStats

def match_win_percentage(points: int, rounds_so_far: int, config: Settings = settings) -> float:
    # Floored so a very weak opponent doesn't drag everyone they played down with them
    rounds = max(1, rounds_so_far)
    raw = points / (config.POINTS_PER_WIN * rounds)
    return max(raw, config.MIN_MATCH_WIN_PERCENTAGE)

def opponents_match_win_percentage(
    stats: ParticipantStats,
    stats_by_id: Dict[str, ParticipantStats],
    config: Settings = settings,
) -> float:
    """
    Mean of the opponents' match-win percentages. An opponent faced twice is
    counted twice. Participants with no opponents get the default value.
    """
    if not stats.opponents:
        return config.DEFAULT_OMW

    total = 0.0
    for opponent_id in stats.opponents:
        opponent = stats_by_id.get(opponent_id)
        if opponent is not None:
            total += opponent.match_win_percentage
    return total / len(stats.opponents)

def apply_tiebreaks(
    stats_by_id: Dict[str, ParticipantStats],
    rounds_so_far: int,
    config: Settings = settings,
) -> Dict[str, ParticipantStats]:
    # Every MW% has to exist before any OMW% can be averaged from them
    for stats in stats_by_id.values():
        stats.match_win_percentage = match_win_percentage(stats.points, rounds_so_far, config)

    for stats in stats_by_id.values():
        stats.omw = opponents_match_win_percentage(stats, stats_by_id, config)

    return stats_by_id
