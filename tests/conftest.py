import random
from typing import List

import pytest

from swiss_engine.models.match_model import MatchModel
from swiss_engine.models.participant_model import ParticipantModel
from swiss_engine.services.pairing_service import generate_round1_pairings, generate_swiss_pairings
from swiss_engine.services.standings_service import calculate_standings

TOURNAMENT_ID = "tournament_1"


def _participants(*ids: str) -> List[ParticipantModel]:
    return [ParticipantModel(id=pid, tournament_id=TOURNAMENT_ID, user_id=f"user_{pid}") for pid in ids]


def _played(player1_id: str, player2_id: str, winner_id=None, round_number: int = 1) -> MatchModel:
    return MatchModel(
        tournament_id=TOURNAMENT_ID, round_number=round_number,
        player1_id=player1_id, player2_id=player2_id, winner_id=winner_id,
    )


def _bye(player_id: str, round_number: int = 1) -> MatchModel:
    return MatchModel(
        tournament_id=TOURNAMENT_ID, round_number=round_number,
        player1_id=player_id, winner_id=player_id, is_bye=True, score_p1=2,
    )


@pytest.fixture
def make_participants():
    return _participants


@pytest.fixture
def played():
    return _played


@pytest.fixture
def bye():
    return _bye


@pytest.fixture
def simulate_tournament():
    """
    Plays `rounds` rounds with random winners (and the occasional double loss),
    returning (participants, match history, per-round generated matches).
    """
    def _simulate(num_players: int, rounds: int, seed: int = 7):
        rng = random.Random(seed)
        participants = _participants(*[f"P{i:02d}" for i in range(num_players)])
        history: List[MatchModel] = []
        generated: List[List[MatchModel]] = []

        for round_number in range(1, rounds + 1):
            if round_number == 1:
                new_matches = generate_round1_pairings(TOURNAMENT_ID, participants, rng=rng)
            else:
                standings = calculate_standings(participants, history, round_number - 1)
                new_matches = generate_swiss_pairings(TOURNAMENT_ID, round_number, standings, history)
            generated.append(new_matches)

            for match in new_matches:
                if match.is_bye:
                    history.append(match)
                    continue
                outcome = rng.random()
                if outcome < 0.45:
                    winner = match.player1_id
                elif outcome < 0.9:
                    winner = match.player2_id
                else:
                    winner = None
                history.append(match.model_copy(update={"winner_id": winner}))

        return participants, history, generated

    return _simulate
