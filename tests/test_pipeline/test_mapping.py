from typing import List

import pytest

from semantic import InvalidArgumentError, empty, from_iterable, of
from tests.utils.func import Recorder, identity, square
from tests.utils.iteration import indexed, to_list
from tests.utils.source import INTEGERS, N, ints


def test_map() -> None:
    assert to_list(ints.map(square)) == list(map(square, INTEGERS))


def test_map_keeps_indexes() -> None:
    assert indexed(of("a", "b").map(str.upper)) == [("A", 0), ("B", 1)]


def test_map_is_lazy() -> None:
    recorder = Recorder()
    pipeline = ints.map(recorder)
    assert recorder.elements == []
    to_list(pipeline)
    assert recorder.elements == INTEGERS


@pytest.mark.parametrize("mapper", [None, 1, "str"])
def test_map_raises_on_non_callable(mapper) -> None:
    with pytest.raises(InvalidArgumentError, match="`mapper` must be callable"):
        ints.map(mapper)


def test_flat_map_iterables() -> None:
    assert to_list(of(1, 2, 3).flat_map(lambda n: [n] * n)) == [1, 2, 2, 3, 3, 3]


def test_flat_map_pipelines() -> None:
    assert to_list(of(1, 2).flat_map(lambda n: of(n, -n))) == [1, -1, 2, -2]


def test_flat_map_nested_elements_carry_outer_index() -> None:
    assert indexed(of("ab", "c").flat_map(identity)) == [("a", 0), ("b", 0), ("c", 1)]


def test_flat_map_drops_non_iterable_results() -> None:
    assert to_list(of(1, 2, 3).flat_map(lambda n: [n] if n != 2 else n)) == [1, 3]


def test_flat_map_empty_results() -> None:
    assert to_list(ints.flat_map(lambda _: empty())) == []
    assert to_list(ints.flat_map(lambda _: [])) == []


def test_flat_map_stops_nested_traversal_on_interruption() -> None:
    visited: List[int] = []
    nested = from_iterable(INTEGERS).peek(visited.append)
    first = of(0).flat_map(lambda _: nested).to_unordered().find_first()
    assert first.get() == 0
    assert visited == [0]


def test_peek() -> None:
    recorder = Recorder()
    assert to_list(ints.peek(recorder)) == INTEGERS
    assert recorder.elements == INTEGERS


def test_peek_runs_on_each_traversal() -> None:
    recorder = Recorder()
    consumer = ints.peek(recorder).to_unordered()
    consumer.count()
    consumer.count()
    assert len(recorder.elements) == 2 * N


def test_peek_raises_on_non_callable() -> None:
    with pytest.raises(InvalidArgumentError, match="`consumer` must be callable"):
        ints.peek(None)  # type: ignore
