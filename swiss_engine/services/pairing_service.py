import logging
import random
from typing import FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

from swiss_engine.core.config import Settings, settings
from swiss_engine.models.match_model import MatchModel
from swiss_engine.models.participant_model import ParticipantModel
from swiss_engine.models.standing_model import ParticipantStats

logger = logging.getLogger(__name__)

class SearchBudgetExceeded(Exception):
    pass

def _bye_match(tournament_id: str, round_number: int, participant_id: str, config: Settings) -> MatchModel:
    return MatchModel(
        tournament_id=tournament_id,
        round_number=round_number,
        player1_id=participant_id,
        player2_id=None,
        winner_id=participant_id,
        is_bye=True,
        score_p1=config.BYE_SCORE_P1,
        score_p2=config.BYE_SCORE_P2,
    )

def _pair_match(tournament_id: str, round_number: int, player1_id: str, player2_id: str) -> MatchModel:
    return MatchModel(
        tournament_id=tournament_id,
        round_number=round_number,
        player1_id=player1_id,
        player2_id=player2_id,
        is_bye=False,
    )

def generate_round1_pairings(
    tournament_id: str,
    participants: Sequence[ParticipantModel],
    rng: Optional[random.Random] = None,
    config: Settings = settings,
) -> List[MatchModel]:
    """
    Random pairing for the first round. With an odd count the last participant
    of the shuffled order gets the bye, which is appended after the pairings.
    """
    rng = rng or random
    shuffled = rng.sample(list(participants), len(participants))

    bye_participant: Optional[ParticipantModel] = None
    if len(shuffled) % 2 != 0:
        bye_participant = shuffled.pop()

    matches: List[MatchModel] = []
    for i in range(0, len(shuffled), 2):
        matches.append(_pair_match(tournament_id, 1, shuffled[i].id, shuffled[i + 1].id))

    if bye_participant is not None:
        matches.append(_bye_match(tournament_id, 1, bye_participant.id, config))

    logger.info(
        "Round 1 for tournament %s: %d match(es), bye=%s",
        tournament_id, len(shuffled) // 2, bye_participant.id if bye_participant else None,
    )
    return matches

def previous_pairings(matches: Iterable[MatchModel]) -> Set[FrozenSet[str]]:
    return {
        frozenset((m.player1_id, m.player2_id))
        for m in matches
        if not m.is_bye and m.player2_id is not None
    }

def previous_byes(matches: Iterable[MatchModel]) -> Set[str]:
    return {m.player1_id for m in matches if m.is_bye}

def select_bye(standings_ids: Sequence[str], had_bye: Set[str]) -> Optional[str]:
    """Lowest-ranked participant without a previous bye, else the lowest-ranked one."""
    if not standings_ids:
        return None
    for participant_id in reversed(standings_ids):
        if participant_id not in had_bye:
            return participant_id
    return standings_ids[-1]

class PairingSearch:
    """
    Backtracking search for a rematch-free pairing of `pool`, kept in standings
    order. The pool itself is never modified; chosen participants are tracked
    as a set of used indices.
    """

    def __init__(self, pool: Sequence[str], played: Set[FrozenSet[str]], budget: int):
        self.pool: Tuple[str, ...] = tuple(pool)
        self.played = played
        self.budget = budget
        self.used: Set[int] = set()
        self.steps = 0

    def has_played(self, a: int, b: int) -> bool:
        return frozenset((self.pool[a], self.pool[b])) in self.played

    def run(self) -> Optional[List[Tuple[str, str]]]:
        self.used = set()
        self.steps = 0
        try:
            index_pairs = self._solve()
        except SearchBudgetExceeded:
            logger.warning(
                "Pairing search gave up after %d steps for a pool of %d", self.steps, len(self.pool)
            )
            return None
        logger.debug("Pairing search finished in %d steps", self.steps)
        if index_pairs is None:
            return None
        return [(self.pool[a], self.pool[b]) for a, b in index_pairs]

    def _first_unused(self, start: int = 0) -> Optional[int]:
        return next((i for i in range(start, len(self.pool)) if i not in self.used), None)

    def _next_candidate(self, top: int, after: int) -> Optional[int]:
        for candidate in range(after + 1, len(self.pool)):
            if candidate not in self.used and not self.has_played(top, candidate):
                return candidate
        return None

    def _solve(self) -> Optional[List[Tuple[int, int]]]:
        # Explicit stack of [top, current opponent] frames, so search depth is not
        # tied to the interpreter's recursion limit. An opponent equal to top means
        # none has been placed yet.
        top = self._first_unused()
        if top is None:
            return []

        self.used.add(top)
        stack: List[List[int]] = [[top, top]]
        while stack:
            self.steps += 1
            if self.steps > self.budget:
                raise SearchBudgetExceeded()

            frame = stack[-1]
            top, opponent = frame
            if opponent != top:
                self.used.discard(opponent)

            candidate = self._next_candidate(top, opponent)
            if candidate is None:
                # Dead end: free top and let the previous frame try its next opponent
                self.used.discard(top)
                stack.pop()
                continue

            frame[1] = candidate
            self.used.add(candidate)
            next_top = self._first_unused(top + 1)
            if next_top is None:
                return [(a, b) for a, b in stack]
            self.used.add(next_top)
            stack.append([next_top, next_top])
        return None

def generate_swiss_pairings(
    tournament_id: str,
    round_number: int,
    standings: Sequence[ParticipantStats],
    matches: Sequence[MatchModel],
    config: Settings = settings,
) -> List[MatchModel]:
    """
    Pairs a round >= 2 from the current standings (best first).

    1. Odd pool: the bye goes to the lowest-ranked participant without a
       previous bye (the lowest-ranked overall if everyone already had one).
    2. Backtracking pairs top-down and never repeats a previous pairing.
    3. If no such pairing exists (or the search budget runs out) the pool is
       paired by adjacent standings position, rematches allowed.
    """
    pool = [s.id for s in standings]
    result: List[MatchModel] = []

    if len(pool) % 2 != 0:
        bye_id = select_bye(pool, previous_byes(matches))
        pool.remove(bye_id)
        result.append(_bye_match(tournament_id, round_number, bye_id, config))

    search = PairingSearch(pool, previous_pairings(matches), config.PAIRING_SEARCH_BUDGET)
    pairs = search.run()

    if pairs is None:
        logger.warning(
            "Strict pairing failed for tournament %s round %d, relaxing rematch constraint.",
            tournament_id, round_number,
        )
        pairs = [(pool[i], pool[i + 1]) for i in range(0, len(pool), 2)]

    for player1_id, player2_id in pairs:
        result.append(_pair_match(tournament_id, round_number, player1_id, player2_id))

    logger.info(
        "Round %d for tournament %s: %d match(es)%s",
        round_number, tournament_id, len(pairs), " + bye" if len(result) > len(pairs) else "",
    )
    return result
