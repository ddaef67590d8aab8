import pytest

from semantic import InvalidArgumentError, iterate, of
from tests.utils.func import Recorder, is_even, naturals
from tests.utils.iteration import indexed, to_list
from tests.utils.source import EVEN_INTEGERS, INTEGERS, N, ints


def test_filter() -> None:
    assert to_list(ints.filter(is_even)) == EVEN_INTEGERS


def test_filter_reindexes_from_zero() -> None:
    assert indexed(of(1, 2, 3, 4).filter(is_even)) == [(2, 0), (4, 1)]


def test_filter_uses_truthiness() -> None:
    assert to_list(of(0, 1, "", "a", None, [1]).filter(lambda x: x)) == [1, "a", [1]]


def test_filter_raises_on_non_callable() -> None:
    with pytest.raises(InvalidArgumentError, match="`predicate` must be callable"):
        ints.filter(True)  # type: ignore


def test_take_while() -> None:
    assert to_list(ints.take_while(lambda n: n < 5)) == [0, 1, 2, 3, 4]


def test_take_while_emits_nothing_after_first_failure() -> None:
    assert to_list(of(1, 2, 9, 3, 4).take_while(lambda n: n < 5)) == [1, 2]


def test_take_while_does_not_stop_the_upstream() -> None:
    recorder = Recorder()
    to_list(ints.peek(recorder).take_while(lambda n: n < 5))
    assert recorder.elements == INTEGERS


def test_take_while_keeps_indexes() -> None:
    assert indexed(of("a", "b", "c").take_while(lambda s: s != "c")) == [
        ("a", 0),
        ("b", 1),
    ]


def test_take_while_is_reset_between_traversals() -> None:
    consumer = of(1, 9, 2).take_while(lambda n: n < 5).to_unordered()
    assert consumer.to_list() == consumer.to_list() == [1]


def test_drop_while() -> None:
    assert to_list(ints.drop_while(lambda n: n < N - 3)) == [N - 3, N - 2, N - 1]


def test_drop_while_emits_everything_after_first_failure() -> None:
    assert to_list(of(1, 9, 2, 10).drop_while(lambda n: n < 5)) == [9, 2, 10]


def test_drop_while_keeps_indexes() -> None:
    assert indexed(of(1, 9, 2).drop_while(lambda n: n < 5)) == [(9, 1), (2, 2)]


def test_drop_while_is_reset_between_traversals() -> None:
    consumer = of(1, 9, 2).drop_while(lambda n: n < 5).to_unordered()
    assert consumer.to_list() == consumer.to_list() == [9, 2]


def test_distinct() -> None:
    assert to_list(of(3, 1, 3, 2, 1).distinct()) == [3, 1, 2]


def test_distinct_keeps_first_occurrence_per_key() -> None:
    words = of("apple", "avocado", "banana", "blueberry", "cherry")
    assert to_list(words.distinct(lambda word: word[0])) == ["apple", "banana", "cherry"]


def test_distinct_keeps_upstream_indexes() -> None:
    assert indexed(of("a", "a", "b").distinct()) == [("a", 0), ("b", 2)]


def test_distinct_unhashable_keys() -> None:
    assert to_list(of([1], [2], [1]).distinct()) == [[1], [2]]
    assert to_list(of((1, [2]), (1, [2]), (1, [3])).distinct()) == [(1, [2]), (1, [3])]
    assert to_list(of({"a": 1}, {"a": 1}).distinct()) == [{"a": 1}]


def test_distinct_forgets_seen_keys_between_traversals() -> None:
    consumer = of(1, 1, 2).distinct().to_unordered()
    assert consumer.to_list() == consumer.to_list() == [1, 2]


def test_distinct_on_infinite_source() -> None:
    pipeline = iterate(naturals).map(lambda n: n % 3).distinct().limit(3)
    assert to_list(pipeline) == [0, 1, 2]


def test_distinct_raises_on_non_callable_identifier() -> None:
    with pytest.raises(InvalidArgumentError, match="`identifier` must be callable"):
        ints.distinct(42)  # type: ignore
