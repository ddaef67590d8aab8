import datetime
from typing import List

import pytest

from semantic import InvalidArgumentError, Observation, empty, of
from tests.utils.iteration import to_list
from tests.utils.source import INTEGERS, ints


def observed_counts(pipeline_elements: int) -> List[int]:
    observations: List[Observation] = []
    to_list(
        of(*INTEGERS[:pipeline_elements]).observe("ints", do=observations.append)
    )
    return [observation.elements for observation in observations]


@pytest.mark.parametrize(
    "elements, expected_counts",
    [
        (0, [0]),
        (1, [1]),
        (2, [1, 2]),
        (3, [1, 2, 3]),
        (5, [1, 2, 4, 5]),
        (8, [1, 2, 4, 8]),
        (9, [1, 2, 4, 8, 9]),
    ],
)
def test_observe_at_powers_of_two_and_at_the_end(elements, expected_counts) -> None:
    assert observed_counts(elements) == expected_counts


def test_observe_forwards_elements_unchanged() -> None:
    assert to_list(ints.observe(do=lambda _: None)) == INTEGERS


def test_observation_fields() -> None:
    observations: List[Observation] = []
    to_list(of("a").observe("letters", do=observations.append))
    (observation,) = observations
    assert observation.subject == "letters"
    assert observation.elements == 1
    assert isinstance(observation.elapsed, datetime.timedelta)
    assert observation.elapsed >= datetime.timedelta(0)


def test_observation_str_is_logfmt() -> None:
    observation = Observation(
        subject="big cats", elapsed=datetime.timedelta(seconds=1), elements=3
    )
    assert str(observation) == 'observed="big cats" elapsed=0:00:01 elements=3'


def test_observe_counts_are_reset_between_traversals() -> None:
    observations: List[Observation] = []
    consumer = of(1, 2).observe(do=observations.append).to_unordered()
    consumer.count()
    consumer.count()
    assert [observation.elements for observation in observations] == [1, 2, 1, 2]


def test_observe_logs_by_default(info_caplog) -> None:
    to_list(of(1, 2, 3).observe("digits"))
    messages = [record.getMessage() for record in info_caplog.records]
    assert len(messages) == 3
    assert all(message.startswith("observed=digits elapsed=") for message in messages)
    assert messages[-1].endswith("elements=3")


def test_observe_empty_pipeline_logs_once(info_caplog) -> None:
    to_list(empty().observe())
    assert [record.getMessage()[-len("elements=0") :] for record in info_caplog.records] == [
        "elements=0"
    ]


def test_observe_raises_on_invalid_arguments() -> None:
    with pytest.raises(InvalidArgumentError, match="`subject` must be a str"):
        ints.observe(1)  # type: ignore
    with pytest.raises(InvalidArgumentError, match="`do` must be callable"):
        ints.observe(do="print")  # type: ignore
