import logging
import math
import random
from typing import List, Optional, Sequence

from swiss_engine.core.config import Settings, settings
from swiss_engine.models.match_model import MatchModel
from swiss_engine.models.participant_model import ParticipantModel
from swiss_engine.models.tournament_model import FinalStandings, RoundAdvance, RoundStart, TournamentType
from swiss_engine.models.standing_model import ParticipantStats
from swiss_engine.services.pairing_service import generate_round1_pairings, generate_swiss_pairings
from swiss_engine.services.standings_service import build_snapshot, calculate_standings

logger = logging.getLogger(__name__)

class TournamentService:
    """
    Round lifecycle of a Swiss tournament: start, advance, finish and result reporting.
    Nothing is stored here; callers pass in the records they hold and persist what comes back.
    """

    def __init__(self, config: Settings = settings):
        self.config = config

    def recommended_rounds(self, num_players: int, tournament_type: TournamentType = TournamentType.SWISS) -> int:
        if num_players < 2:
            return 1
        if tournament_type == TournamentType.SINGLE_ELIMINATION:
            return math.ceil(math.log2(num_players))
        if num_players <= 8:
            return 3
        if num_players <= 16:
            return 4
        if num_players <= 32:
            return 5
        if num_players <= 64:
            return 6
        return math.ceil(math.log2(num_players))

    def _check_supported(self, tournament_type: TournamentType):
        if tournament_type != TournamentType.SWISS:
            raise NotImplementedError(f"Pairing for {TournamentType(tournament_type).value} is not implemented.")

    def standings(
        self,
        participants: Sequence[ParticipantModel],
        matches: Sequence[MatchModel],
        rounds_so_far: int,
    ) -> List[ParticipantStats]:
        return calculate_standings(participants, matches, rounds_so_far, self.config)

    def start_tournament(
        self,
        tournament_id: str,
        participants: Sequence[ParticipantModel],
        tournament_type: TournamentType = TournamentType.SWISS,
        total_rounds: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> RoundStart:
        self._check_supported(tournament_type)
        if not participants:
            raise ValueError("Tournament has no players. Cannot generate pairings.")
        if total_rounds is not None and total_rounds < 1:
            raise ValueError("Total rounds must be at least 1.")

        rounds = total_rounds or self.recommended_rounds(len(participants), tournament_type)
        matches = generate_round1_pairings(tournament_id, participants, rng=rng, config=self.config)
        logger.info("Started tournament %s with %d participants over %d rounds", tournament_id, len(participants), rounds)
        return RoundStart(tournament_id=tournament_id, round_number=1, total_rounds=rounds, matches=matches)

    def advance_round(
        self,
        tournament_id: str,
        current_round: int,
        participants: Sequence[ParticipantModel],
        matches: Sequence[MatchModel],
    ) -> RoundAdvance:
        """
        Snapshots the standings after `current_round` and pairs the next round from them.
        """
        if current_round < 1:
            raise ValueError("Tournament has not started yet. Generate round 1 first.")

        current_standings = self.standings(participants, matches, current_round)
        snapshot = build_snapshot(current_standings, tournament_id)

        next_round = current_round + 1
        new_matches = generate_swiss_pairings(tournament_id, next_round, current_standings, matches, self.config)
        return RoundAdvance(
            tournament_id=tournament_id,
            round_number=next_round,
            snapshot=snapshot,
            matches=new_matches,
        )

    def finish_tournament(
        self,
        tournament_id: str,
        participants: Sequence[ParticipantModel],
        matches: Sequence[MatchModel],
        total_rounds: Optional[int] = None,
        current_round: Optional[int] = None,
    ) -> FinalStandings:
        rounds_so_far = total_rounds or current_round or 1
        final_standings = self.standings(participants, matches, rounds_so_far)
        logger.info("Finished tournament %s after %d round(s)", tournament_id, rounds_so_far)
        return FinalStandings(
            tournament_id=tournament_id,
            standings=final_standings,
            snapshot=build_snapshot(final_standings, tournament_id),
        )

    def record_result(
        self,
        match: MatchModel,
        score_p1: int,
        score_p2: int,
        winner_id: Optional[str] = None,
    ) -> MatchModel:
        """
        Returns a copy of `match` with the reported scores. A winner of None is a
        double loss.
        """
        if match.is_bye:
            raise ValueError("Bye matches have no result to report.")
        if score_p1 < 0 or score_p2 < 0:
            raise ValueError("Scores cannot be negative.")
        if winner_id is not None and winner_id not in (match.player1_id, match.player2_id):
            raise ValueError("Winner must be one of the players in the match.")

        return match.model_copy(update={"score_p1": score_p1, "score_p2": score_p2, "winner_id": winner_id})
