# -*- coding: utf-8 -*-
"""
Tests for the exhaustive-search solver and its agreement with the DP solver.
"""

import pytest

from src.business_objects import InputSizeError, RideItem
from src.planning.solvers.dynamic import dynamic_max_time
from src.planning.solvers.exhaustive import MAX_EXHAUSTIVE_SIZE, exhaustive_max_time
from src.utils.ride_vectors import sum_ride_vector
from tests.ride_factory import make_random_rides


class TestExhaustiveTrivialCases:
    """Two-ride catalog: Ferris Wheel (10, 20) and Speedway (4, 5)."""

    def test_nothing_fits(self, trivial_rides):
        assert exhaustive_max_time(trivial_rides, 3) == []

    def test_ferris_wheel_only(self, trivial_rides):
        soln = exhaustive_max_time(trivial_rides, 10)
        assert [r.description for r in soln] == ["test Ferris Wheel"]

    def test_speedway_only(self, trivial_rides):
        soln = exhaustive_max_time(trivial_rides, 9)
        assert [r.description for r in soln] == ["test Speedway"]

    def test_both_in_original_order(self, trivial_rides):
        soln = exhaustive_max_time(trivial_rides, 14)
        assert [r.description for r in soln] == ["test Ferris Wheel", "test Speedway"]


class TestExhaustiveRules:
    def test_too_many_rides_refused(self):
        rides = [RideItem(f"ride {i}", 1, 1.0) for i in range(MAX_EXHAUSTIVE_SIZE)]
        with pytest.raises(InputSizeError):
            exhaustive_max_time(rides, 10)

    def test_refused_even_with_zero_budget(self):
        rides = [RideItem(f"ride {i}", 1, 1.0) for i in range(MAX_EXHAUSTIVE_SIZE + 10)]
        with pytest.raises(InputSizeError):
            exhaustive_max_time(rides, 0)

    def test_ties_keep_earliest_mask(self):
        rides = [RideItem("first", 5, 10.0), RideItem("second", 5, 10.0)]
        soln = exhaustive_max_time(rides, 5)
        assert [r.description for r in soln] == ["first"]

    def test_empty_best_replaced_by_any_feasible_subset(self):
        # A zero-time ride still displaces the empty selection.
        soln = exhaustive_max_time([RideItem("idle", 1, 0.0)], 1)
        assert [r.description for r in soln] == ["idle"]

    def test_real_valued_budget(self, trivial_rides):
        soln = exhaustive_max_time(trivial_rides, 13.5)
        assert [r.description for r in soln] == ["test Ferris Wheel"]

    def test_negative_budget_gives_empty(self, trivial_rides):
        assert exhaustive_max_time(trivial_rides, -1) == []

    def test_no_rides(self):
        assert exhaustive_max_time([], 10) == []


class TestSolversAgree:
    """The DP and the brute-force oracle must find the same optimal time."""

    @pytest.mark.parametrize("seed", range(20))
    def test_same_total_time(self, seed):
        n = seed % 11
        rides = make_random_rides(seed=seed, n=n)
        for budget in (0, 1, 5, 12, 25, 60):
            dyn = dynamic_max_time(rides, budget)
            exh = exhaustive_max_time(rides, budget)
            dyn_cost, dyn_time = sum_ride_vector(dyn)
            exh_cost, exh_time = sum_ride_vector(exh)
            assert dyn_cost <= budget
            assert exh_cost <= budget
            assert dyn_time == pytest.approx(exh_time)

    def test_same_set_when_optimum_is_unique(self, trivial_rides):
        for budget in (3, 9, 10, 14):
            dyn = dynamic_max_time(trivial_rides, budget)
            exh = exhaustive_max_time(trivial_rides, budget)
            assert sorted(r.description for r in dyn) == sorted(r.description for r in exh)
