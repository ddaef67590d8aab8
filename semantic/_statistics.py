import math
from typing import Any, Callable, Dict, List, Optional, TypeVar

from semantic._consumers import OrderedConsumer
from semantic._drives import DriveProcedure
from semantic._option import Option
from semantic._tools._func import identity, never

T = TypeVar("T")


def _extremum(
    values: List[Any], comparator: Callable[[Any, Any], int], sign: int
) -> Any:
    extremum = values[0]
    for value in values[1:]:
        if comparator(value, extremum) * sign > 0:
            extremum = value
    return extremum


def _mean(values: List[Any]) -> Any:
    if not values:
        return 0
    return sum(values, 0) / len(values)


def _variance(values: List[Any]) -> float:
    if len(values) < 2:
        return 0
    mean = _mean(values)
    return sum((value - mean) ** 2 for value in values) / (len(values) - 1)


def _standard_deviation(values: List[Any]) -> float:
    return math.sqrt(_variance(values))


def _standardized_moment(values: List[Any], order: int) -> float:
    standard_deviation = _standard_deviation(values)
    if standard_deviation == 0:
        return 0
    mean = _mean(values)
    moment = sum((value - mean) ** order for value in values) / len(values)
    return moment / standard_deviation**order


class Statistics(OrderedConsumer[T]):
    """
    Numeric aggregation over ``mapper(elem)`` values.

    Every statistic runs exactly one fresh traversal and works on the ascending-sorted values it
    collected (see ``get_values``). On no input, ``minimum`` and ``maximum`` return an empty ``Option``
    while ``sum``, ``mean``, ``median`` and ``mode`` return 0.

    Args:
        drive (``Callable[[Callable[[T, int], Any], Callable[[T], Any]], None]``): The drive procedure to consume.
        concurrency (``int``, optional): Concurrency degree carried over from the pipeline. (default: 1)
        mapper (``Callable[[T], Any]``, optional): Projects elements to numbers. (default: identity)
    """

    __slots__ = ("_mapper",)

    def __init__(
        self,
        drive: DriveProcedure[T],
        concurrency: int = 1,
        mapper: Callable[[T], Any] = identity,
    ) -> None:
        super().__init__(drive, concurrency)
        self._mapper = mapper

    @property
    def mapper(self) -> Callable[[T], Any]:
        return self._mapper

    def get_values(self) -> List[Any]:
        values: List[Any] = []

        def accept(element: T, _: int) -> None:
            values.append(self._mapper(element))

        self._drive(accept, never)
        values.sort()
        return values

    def minimum(
        self, comparator: Optional[Callable[[Any, Any], int]] = None
    ) -> Option[Any]:
        values = self.get_values()
        if not values:
            return Option.empty()
        if comparator is None:
            return Option.of(values[0])
        return Option.of(_extremum(values, comparator, -1))

    def maximum(
        self, comparator: Optional[Callable[[Any, Any], int]] = None
    ) -> Option[Any]:
        values = self.get_values()
        if not values:
            return Option.empty()
        if comparator is None:
            return Option.of(values[-1])
        return Option.of(_extremum(values, comparator, 1))

    def sum(self) -> Any:
        return sum(self.get_values(), 0)

    def mean(self) -> Any:
        return _mean(self.get_values())

    def median(self) -> Any:
        values = self.get_values()
        if not values:
            return 0
        mid = len(values) // 2
        if len(values) % 2 == 0:
            return (values[mid - 1] + values[mid]) / 2
        return values[mid]

    def mode(self) -> Any:
        """
        Returns:
            The most frequent value, the smallest one among ties. 0 if there is no value.
        """
        values = self.get_values()
        if not values:
            return 0
        frequencies: Dict[Any, int] = {}
        max_frequency = 0
        mode = values[0]
        for value in values:
            frequency = frequencies.get(value, 0) + 1
            frequencies[value] = frequency
            if frequency > max_frequency:
                max_frequency = frequency
                mode = value
        return mode

    def variance(self) -> float:
        """
        Returns:
            ``float``: The sample variance (denominator ``n - 1``), 0 with fewer than 2 values.
        """
        return _variance(self.get_values())

    def standard_deviation(self) -> float:
        return _standard_deviation(self.get_values())

    def range(self) -> Any:
        values = self.get_values()
        if not values:
            return 0
        return values[-1] - values[0]

    def quartiles(self) -> List[Any]:
        """
        Returns:
            ``List``: The values at indices ``floor(n * 0.25)``, ``floor(n * 0.5)`` and ``floor(n * 0.75)``; ``[0, 0, 0]`` if there is no value.
        """
        values = self.get_values()
        if not values:
            return [0, 0, 0]
        return [values[math.floor(len(values) * ratio)] for ratio in (0.25, 0.5, 0.75)]

    def interquartile_range(self) -> Any:
        q1, _, q3 = self.quartiles()
        return q3 - q1

    def skewness(self) -> float:
        """
        Returns:
            ``float``: Third central moment over the cubed standard deviation; 0 with fewer than 3 values or no deviation.
        """
        values = self.get_values()
        if len(values) < 3:
            return 0
        return _standardized_moment(values, 3)

    def kurtosis(self) -> float:
        """
        Returns:
            ``float``: Excess kurtosis, fourth central moment over the standard deviation to the fourth, minus 3; 0 with fewer than 4 values or no deviation.
        """
        values = self.get_values()
        if len(values) < 4:
            return 0
        moment = _standardized_moment(values, 4)
        return moment - 3 if moment else 0

    def frequency(self) -> Dict[Any, int]:
        """
        Returns:
            ``Dict``: Each value mapped to its number of occurrences, in ascending value order.
        """
        frequencies: Dict[Any, int] = {}
        for value in self.get_values():
            frequencies[value] = frequencies.get(value, 0) + 1
        return frequencies

    def is_empty(self) -> bool:
        return self.count() == 0
