import math
from itertools import permutations

import pytest

from duorank.core.errors import RatingInvariantError
from duorank.core.records import PlayerRecord


def test_new_record_is_empty():
    record = PlayerRecord(1, 10)
    assert record.id == 1
    assert record.rating == 0.0
    assert record.n_results == 0
    assert record.results == []


def test_results_below_capacity_are_summed():
    record = PlayerRecord(1, 5)
    assert record.add_result(3.0) == (True, 3.0)
    assert record.add_result(1.0) == (True, 4.0)
    assert record.add_result(2.0) == (True, 6.0)
    assert record.results == [3.0, 2.0, 1.0]


def test_zero_points_below_capacity_report_no_change():
    record = PlayerRecord(1, 5)
    record.add_result(2.0)
    assert record.add_result(0.0) == (False, 2.0)
    assert record.n_results == 2


def test_full_record_evicts_minimum():
    record = PlayerRecord.with_points(1, 3, [5.0, 1.0, 4.0])
    assert record.rating == 10.0

    assert record.add_result(3.0) == (True, 12.0)
    assert record.results == [5.0, 4.0, 3.0]


def test_new_minimum_on_full_record_is_no_op():
    record = PlayerRecord.with_points(1, 3, [5.0, 4.0, 3.0])
    assert record.add_result(0.5) == (False, 12.0)
    assert record.results == [5.0, 4.0, 3.0]


def test_value_equal_to_minimum_is_no_op():
    record = PlayerRecord.with_points(1, 3, [5.0, 4.0, 3.0])
    assert record.add_result(3.0) == (False, 12.0)
    assert record.n_results == 3


@pytest.mark.parametrize("order", list(permutations([1.5, 2.5, 3.0, 0.5])))
def test_rating_independent_of_order_within_capacity(order):
    record = PlayerRecord.with_points(1, 4, order)
    assert record.rating == pytest.approx(7.5)


@pytest.mark.parametrize("order", list(permutations([1.5, 2.5, 3.0, 0.5])))
def test_overflow_drops_smallest_result(order):
    record = PlayerRecord.with_points(1, 3, order)
    assert record.rating == pytest.approx(7.0)
    assert record.results == [3.0, 2.5, 1.5]


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_points_rejected(value):
    record = PlayerRecord(1, 3)
    with pytest.raises(RatingInvariantError):
        record.add_result(value)
    assert record.n_results == 0


@pytest.mark.parametrize("order", list(permutations([0.1, 0.2, 0.3])))
def test_rating_is_exact_sum_of_retained_results(order):
    assert PlayerRecord.with_points(1, 3, order).rating == math.fsum(
        [0.1, 0.2, 0.3]
    )


def test_rating_after_eviction_is_exact_sum():
    record = PlayerRecord.with_points(1, 2, [0.1, 0.7, 0.2, 0.3])
    assert record.results == [0.7, 0.3]
    assert record.rating == math.fsum([0.7, 0.3])
