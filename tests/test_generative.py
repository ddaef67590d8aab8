import itertools
import random

import pytest

from semantic import (
    InvalidArgumentError,
    Pipeline,
    empty,
    fill,
    from_iterable,
    iterate,
    of,
    range,
)
from tests.utils.func import CountingSupplier, naturals
from tests.utils.iteration import indexed, to_list


def test_empty() -> None:
    assert to_list(empty()) == []


def test_of() -> None:
    assert indexed(of("a", "b", "c")) == [("a", 0), ("b", 1), ("c", 2)]


def test_fill_repeats_value() -> None:
    element = object()
    assert to_list(fill(element, 3)) == [element, element, element]
    assert to_list(fill("x")) == ["x"]


def test_fill_calls_supplier_per_position() -> None:
    supplier = CountingSupplier()
    assert indexed(fill(supplier, 4)) == [(0, 0), (1, 1), (2, 2), (3, 3)]
    assert supplier.calls == 4


def test_fill_zero_count() -> None:
    assert to_list(fill(1, 0)) == []


@pytest.mark.parametrize("count", [-1, 1.5, "3", None, True])
def test_fill_raises_on_invalid_count(count) -> None:
    with pytest.raises(InvalidArgumentError, match="`count`"):
        fill(1, count)


def test_fill_honors_interruption() -> None:
    supplier = CountingSupplier()
    assert fill(supplier, 1_000_000).to_unordered().find_first().get() == 0
    assert supplier.calls == 2


def test_fill_with_random_supplier_differs_between_traversals() -> None:
    rng = random.Random(42)
    consumer = fill(rng.random, 5).to_unordered()
    first, second = consumer.to_list(), consumer.to_list()
    assert len(first) == len(second) == 5
    assert first != second


def test_from_iterable_takes_fresh_iterator_per_traversal() -> None:
    consumer = from_iterable([1, 2, 3]).to_unordered()
    assert consumer.to_list() == consumer.to_list() == [1, 2, 3]


def test_from_iterable_string() -> None:
    assert to_list(from_iterable("abc")) == ["a", "b", "c"]


@pytest.mark.parametrize("not_iterable", [None, 42, object()])
def test_from_iterable_non_iterable_gives_empty_pipeline(not_iterable) -> None:
    pipeline = from_iterable(not_iterable)
    assert isinstance(pipeline, Pipeline)
    assert to_list(pipeline) == []


def test_from_iterable_infinite() -> None:
    assert to_list(from_iterable(itertools.count()).limit(3)) == [0, 1, 2]


@pytest.mark.parametrize(
    "start, end, step, expected",
    [
        (0, 5, 1, [0, 1, 2, 3, 4]),
        (0, 10, 3, [0, 3, 6, 9]),
        (5, 0, 1, [5, 4, 3, 2, 1]),
        (10, 0, 3, [10, 7, 4, 1]),
        # the sign of the step is ignored: the direction comes from start and end
        (0, 3, -1, [0, 1, 2]),
        (3, 0, -1, [3, 2, 1]),
        (2, 2, 1, []),
        (0, 1, 0.25, [0, 0.25, 0.5, 0.75]),
    ],
)
def test_range(start, end, step, expected) -> None:
    assert to_list(range(start, end, step)) == expected


def test_range_indexes_by_step_count() -> None:
    assert indexed(range(10, 20, 5)) == [(10, 0), (15, 1)]
    assert indexed(range(20, 10, 5)) == [(20, 0), (15, 1)]


def test_range_default_step() -> None:
    assert to_list(range(0, 3)) == [0, 1, 2]


def test_range_raises_on_zero_step() -> None:
    with pytest.raises(InvalidArgumentError, match="`step` must not be 0"):
        range(0, 10, 0)


@pytest.mark.parametrize("args", [("0", 10, 1), (0, None, 1), (0, 10, "1"), (True, 3, 1)])
def test_range_raises_on_non_numbers(args) -> None:
    with pytest.raises(InvalidArgumentError, match="must be numbers"):
        range(*args)


def test_iterate_wraps_drive_procedure() -> None:
    assert to_list(iterate(naturals).limit(4)) == [0, 1, 2, 3]


def test_iterate_raises_on_non_callable() -> None:
    with pytest.raises(InvalidArgumentError, match="`drive` must be callable"):
        iterate([1, 2])  # type: ignore


def test_factories_do_not_drive_at_construction() -> None:
    supplier = CountingSupplier()
    fill(supplier, 10).map(str).filter(bool)
    assert supplier.calls == 0
