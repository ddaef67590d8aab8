import math
import random

import pytest

from semantic import InvalidArgumentError, Option, Statistics, empty, fill, of
from tests.utils.func import CountingSupplier, Recorder
from tests.utils.source import INTEGERS, N, ints

one_to_five = of(5, 3, 1, 4, 2).to_statistics()


def test_to_statistics() -> None:
    statistics = ints.parallel(3).to_statistics()
    assert isinstance(statistics, Statistics)
    assert statistics.concurrency == 3


def test_get_values_are_sorted() -> None:
    assert one_to_five.get_values() == [1, 2, 3, 4, 5]


def test_mapper() -> None:
    statistics = of("ccc", "a", "bb").to_statistics(len)
    assert statistics.get_values() == [1, 2, 3]
    assert statistics.sum() == 6
    assert statistics.mapper is len


def test_mapper_must_be_callable() -> None:
    with pytest.raises(InvalidArgumentError, match="`mapper` must be callable"):
        ints.to_statistics("len")  # type: ignore


def test_minimum_and_maximum() -> None:
    assert one_to_five.minimum() == Option.of(1)
    assert one_to_five.maximum() == Option.of(5)


def test_minimum_and_maximum_with_comparator() -> None:
    def reversed_order(a: int, b: int) -> int:
        return b - a

    assert one_to_five.minimum(reversed_order) == Option.of(5)
    assert one_to_five.maximum(reversed_order) == Option.of(1)


def test_central_tendency() -> None:
    assert one_to_five.sum() == 15
    assert one_to_five.mean() == 3
    assert one_to_five.median() == 3


def test_median_of_even_count() -> None:
    assert of(4, 1, 3, 2).to_statistics().median() == 2.5


def test_mode_is_the_smallest_among_ties() -> None:
    assert of(3, 2, 3, 2, 1).to_statistics().mode() == 2
    assert of(7, 7, 1).to_statistics().mode() == 7
    assert one_to_five.mode() == 1


def test_dispersion() -> None:
    assert one_to_five.variance() == 2.5
    assert one_to_five.standard_deviation() == math.sqrt(2.5)
    assert one_to_five.range() == 4


def test_variance_of_a_single_value() -> None:
    assert of(42).to_statistics().variance() == 0
    assert of(42).to_statistics().standard_deviation() == 0


def test_quartiles_follow_the_floor_index_rule() -> None:
    assert one_to_five.quartiles() == [2, 3, 4]
    assert one_to_five.interquartile_range() == 2
    assert of(*INTEGERS).to_statistics().quartiles() == [N // 4, N // 2, 3 * N // 4]


def test_shape() -> None:
    assert one_to_five.skewness() == 0
    assert one_to_five.kurtosis() == pytest.approx(6.8 / 6.25 - 3)


def test_skewness_sign() -> None:
    assert of(1, 1, 1, 10).to_statistics().skewness() > 0
    assert of(1, 10, 10, 10).to_statistics().skewness() < 0


def test_shape_needs_enough_values() -> None:
    assert of(1, 2).to_statistics().skewness() == 0
    assert of(1, 2, 3).to_statistics().kurtosis() == 0


def test_shape_without_deviation() -> None:
    constant = of(2, 2, 2, 2).to_statistics()
    assert constant.skewness() == 0
    assert constant.kurtosis() == 0


def test_frequency_in_ascending_order() -> None:
    frequency = of(3, 1, 3, 2, 3).to_statistics().frequency()
    assert frequency == {1: 1, 2: 1, 3: 3}
    assert list(frequency) == [1, 2, 3]


def test_is_empty() -> None:
    assert empty().to_statistics().is_empty()
    assert not one_to_five.is_empty()


def test_no_input() -> None:
    statistics = empty().to_statistics()
    # optional results for extrema, zeros for the rest
    assert statistics.minimum() == Option.empty()
    assert statistics.maximum() == Option.empty()
    assert statistics.sum() == 0
    assert statistics.mean() == 0
    assert statistics.median() == 0
    assert statistics.mode() == 0
    assert statistics.variance() == 0
    assert statistics.range() == 0
    assert statistics.quartiles() == [0, 0, 0]
    assert statistics.frequency() == {}


def test_each_statistic_is_a_fresh_traversal() -> None:
    recorder = Recorder()
    statistics = of(1, 2).peek(recorder).to_statistics()
    statistics.sum()
    statistics.median()
    assert recorder.elements == [1, 2, 1, 2]


def test_statistics_are_ordered_consumers() -> None:
    assert of(2, 1).to_statistics().sorted().to_unordered().to_list() == [1, 2]


@pytest.mark.parametrize(
    "statistic, expected",
    [
        ("minimum", Option.of(0)),
        ("maximum", Option.of(2)),
        ("sum", 3),
        ("mean", 1),
        ("median", 1),
        ("variance", 1),
        ("standard_deviation", 1),
        ("range", 2),
        ("skewness", 0),
        ("kurtosis", 0),
        ("quartiles", [0, 1, 2]),
    ],
)
def test_each_statistic_drives_the_source_once(statistic, expected) -> None:
    supplier = CountingSupplier()
    statistics = fill(supplier, 3).to_statistics()
    assert getattr(statistics, statistic)() == expected
    assert supplier.calls == 3


def test_shape_statistics_drive_the_source_once() -> None:
    recorder = Recorder()
    statistics = of(1, 2, 3, 10).peek(recorder).to_statistics()
    statistics.skewness()
    assert recorder.elements == [1, 2, 3, 10]
    statistics.kurtosis()
    assert len(recorder.elements) == 8


def test_range_of_non_deterministic_source_is_never_negative() -> None:
    statistics = fill(random.Random(0).random, 2).to_statistics()
    assert all(statistics.range() >= 0 for _ in range(200))
