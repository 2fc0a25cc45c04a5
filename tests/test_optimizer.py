import pytest

from maxprofit.engine.exhaustive import exhaustive_search
from maxprofit.engine.optimizer import optimize, solve_max_profit
from maxprofit.models.entities import PUB, THEATRE
from maxprofit.utils.scoring import count_buildings, sequence_profit


class TestOptimizer:
    """Unit tests for the dynamic-programming optimizer."""

    def test_reference_scenarios(self, reference_scenarios):
        """Known horizons reproduce their counts and profit exactly."""
        for n, (counts, profit) in reference_scenarios.items():
            result = optimize(n)
            assert result.best_counts == counts, f"horizon {n}"
            assert result.max_profit == profit, f"horizon {n}"

    @pytest.mark.parametrize("n, counts, profit", [
        (5, {"T": 0, "P": 1, "C": 0}, 1000),
        (9, {"T": 0, "P": 2, "C": 0}, 6000),
        (12, {"T": 2, "P": 0, "C": 0}, 13500),
        (20, {"T": 3, "P": 1, "C": 0}, 46000),
        (50, {"T": 9, "P": 1, "C": 0}, 338500),
        (100, {"T": 19, "P": 1, "C": 0}, 1426000),
    ])
    def test_additional_horizons(self, n, counts, profit):
        result = optimize(n)
        assert result.best_counts == counts
        assert result.max_profit == profit

    def test_build_order_for_49(self):
        """Theatres come first; the plan finishes at 48, not 45 or 49."""
        result = optimize(49)
        assert result.best_sequence == [THEATRE] * 8 + [PUB] * 2
        assert result.finish_time == 48

    def test_short_horizon_prefers_pub(self):
        """At n=5 a theatre would finish with no operating time left."""
        result = optimize(5)
        assert result.best_sequence == [PUB]
        assert result.finish_time == 4

    def test_profit_round_trip(self):
        """Recomputing profit from the returned sequence matches max_profit."""
        for n in range(0, 120):
            result = optimize(n)
            assert sequence_profit(result.best_sequence, n) == result.max_profit

    def test_never_overruns_horizon(self):
        for n in range(0, 120):
            result = optimize(n)
            total = sum(b.duration for b in result.best_sequence)
            assert total == result.finish_time
            assert total <= n

    def test_counts_match_sequence(self):
        for n in (7, 13, 49, 77):
            result = optimize(n)
            assert result.best_counts == count_buildings(result.best_sequence)

    def test_profit_never_negative(self):
        assert all(optimize(n).max_profit >= 0 for n in range(0, 60))

    def test_deterministic(self):
        assert optimize(49) == optimize(49)
        assert optimize(52, all_optimal=True) == optimize(52, all_optimal=True)

    def test_solve_max_profit_formats_counts(self):
        assert solve_max_profit(49) == "T: 8 P: 2 C: 0"
        assert solve_max_profit(3) == "T: 0 P: 0 C: 0"


class TestTieBreak:
    """Degenerate-finish exclusion and choice among tied plans."""

    def test_degenerate_finish_avoided(self):
        """A plan ending exactly at n is never chosen when n > 0."""
        for n in range(1, 120):
            assert optimize(n).finish_time < n

    def test_largest_non_degenerate_finish_wins(self):
        """n=7: pub (finish 4) and theatre (finish 5) both earn 3000."""
        result = optimize(7, all_optimal=True)
        assert result.best_sequence == [THEATRE]
        assert result.all_optimal_counts == [
            {"T": 1, "P": 0, "C": 0},
            {"T": 0, "P": 1, "C": 0},
        ]

    def test_zero_horizon(self):
        result = optimize(0)
        assert result.finish_time == 0
        assert result.best_sequence == []


class TestAllOptimal:
    """Exploratory mode: every distinct optimal count-profile."""

    def test_disabled_by_default(self):
        assert optimize(49).all_optimal_counts is None

    @pytest.mark.parametrize("n, expected", [
        (0, [(0, 0, 0)]),
        (4, [(0, 0, 0)]),
        (9, [(1, 0, 0), (0, 2, 0)]),
        (12, [(2, 0, 0), (1, 1, 0)]),
        (49, [(9, 0, 0), (8, 2, 0)]),
        (52, [(10, 0, 0), (9, 1, 0)]),
        (53, [(10, 0, 0)]),
    ])
    def test_tied_profiles(self, n, expected):
        result = optimize(n, all_optimal=True)
        profiles = [(c["T"], c["P"], c["C"]) for c in result.all_optimal_counts]
        assert profiles == expected

    def test_best_counts_among_optimal(self):
        for n in range(0, 80):
            result = optimize(n, all_optimal=True)
            assert result.best_counts in result.all_optimal_counts

    def test_all_optimal_does_not_change_best(self):
        for n in (7, 9, 49, 52):
            plain = optimize(n)
            explored = optimize(n, all_optimal=True)
            assert plain.best_sequence == explored.best_sequence
            assert plain.max_profit == explored.max_profit


class TestAgainstExhaustive:
    """Cross-check the dynamic program against brute-force enumeration."""

    def test_max_profit_agrees(self):
        for n in range(0, 41):
            assert optimize(n).max_profit == exhaustive_search(n).max_profit, f"horizon {n}"

    def test_optimal_profiles_agree(self):
        for n in range(0, 41):
            dp = optimize(n, all_optimal=True)
            brute = exhaustive_search(n)
            assert dp.all_optimal_counts == brute.optimal_counts, f"horizon {n}"
