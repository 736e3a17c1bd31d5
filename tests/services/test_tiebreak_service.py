import pytest

from swiss_engine.models.standing_model import ParticipantStats
from swiss_engine.services.stats_service import aggregate_stats
from swiss_engine.services.tiebreak_service import (
    apply_tiebreaks,
    match_win_percentage,
    opponents_match_win_percentage,
)


class TestMatchWinPercentage:

    def test_ratio_of_possible_points(self):
        assert match_win_percentage(6, 2) == pytest.approx(1.0)
        assert match_win_percentage(3, 2) == pytest.approx(0.5)

    def test_floored(self):
        assert match_win_percentage(0, 3) == pytest.approx(0.33)
        assert match_win_percentage(3, 4) == pytest.approx(0.33) # 0.25 raw

    def test_zero_rounds_counts_as_one(self):
        assert match_win_percentage(3, 0) == pytest.approx(1.0)


class TestOpponentsMatchWinPercentage:

    def test_default_without_opponents(self):
        lonely = ParticipantStats(id="A")
        assert opponents_match_win_percentage(lonely, {"A": lonely}) == pytest.approx(0.33)

    def test_rematch_counts_twice(self):
        strong = ParticipantStats(id="S", match_win_percentage=1.0)
        weak = ParticipantStats(id="W", match_win_percentage=0.4)
        player = ParticipantStats(id="A", opponents=["S", "S", "W"])
        by_id = {"S": strong, "W": weak, "A": player}
        assert opponents_match_win_percentage(player, by_id) == pytest.approx(2.4 / 3)


class TestApplyTiebreaks:

    def test_two_rounds(self, make_participants, played):
        matches = [
            played("A", "B", winner_id="A", round_number=1),
            played("C", "D", winner_id="C", round_number=1),
            played("A", "C", winner_id="A", round_number=2),
            played("B", "D", winner_id="B", round_number=2),
        ]
        stats = apply_tiebreaks(aggregate_stats(make_participants("A", "B", "C", "D"), matches), rounds_so_far=2)

        assert stats["A"].match_win_percentage == pytest.approx(1.0)
        assert stats["B"].match_win_percentage == pytest.approx(0.5)
        assert stats["D"].match_win_percentage == pytest.approx(0.33)

        # Needs every opponent's MW% already in place
        assert stats["A"].omw == pytest.approx(0.5)
        assert stats["B"].omw == pytest.approx((1.0 + 0.33) / 2)
        assert stats["C"].omw == pytest.approx((0.33 + 1.0) / 2)
        assert stats["D"].omw == pytest.approx(0.5)

    def test_bounds_hold_over_a_simulated_event(self, simulate_tournament):
        participants, history, _ = simulate_tournament(num_players=13, rounds=5, seed=3)
        stats = apply_tiebreaks(aggregate_stats(participants, history), rounds_so_far=5)
        for s in stats.values():
            assert 0.33 <= s.match_win_percentage <= 1.0
            assert 0.33 <= s.omw <= 1.0
