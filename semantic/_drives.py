import builtins
import datetime
import time
from abc import ABC, abstractmethod
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    Hashable,
    Iterable,
    List,
    Optional,
    Set,
    TypeVar,
    Union,
)

from semantic._tools._logging import get_logger

if TYPE_CHECKING:  # pragma: no cover
    from semantic._observation import Observation

T = TypeVar("T")
U = TypeVar("U")

Accept = Callable[[T, int], Any]
Interrupt = Callable[[T], Any]
DriveProcedure = Callable[[Accept[T], Interrupt[T]], None]


class Drive(ABC, Generic[T]):
    """
    A traversal stage: pushes elements into ``accept`` and consults ``interrupt`` before each emission.

    Drives carry configuration only; every call builds its own traversal state.
    """

    @abstractmethod
    def __call__(self, accept: Accept[T], interrupt: Interrupt[T]) -> None: ...

    def __eq__(self, other: Any) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)


class SourceDrive(Drive[T]):
    """
    A drive at the root of a lineage, represented by the factory call that built it.
    """


###########
# sources #
###########


class EmptyDrive(SourceDrive[Any]):
    def __call__(self, accept: Accept[Any], interrupt: Interrupt[Any]) -> None:
        return None

    def __repr__(self) -> str:
        return "empty()"


class IterableDrive(SourceDrive[T]):
    def __init__(self, iterable: Iterable[T]) -> None:
        self.iterable = iterable

    def __call__(self, accept: Accept[T], interrupt: Interrupt[T]) -> None:
        index = 0
        for element in self.iterable:
            if interrupt(element):
                break
            accept(element, index)
            index += 1

    def __repr__(self) -> str:
        return f"from_iterable({repr(self.iterable)})"


class FillDrive(SourceDrive[T]):
    def __init__(self, element: Union[T, Callable[[], T]], count: int) -> None:
        self.element = element
        self.count = count

    def __call__(self, accept: Accept[T], interrupt: Interrupt[T]) -> None:
        supplier: Optional[Callable[[], T]] = (
            self.element if callable(self.element) else None
        )
        for index in builtins.range(self.count):
            element = supplier() if supplier else self.element
            if interrupt(element):
                break
            accept(element, index)

    def __repr__(self) -> str:
        return f"fill({repr(self.element)}, count={self.count})"


class RangeDrive(SourceDrive[Any]):
    def __init__(self, start: Any, end: Any, step: Any) -> None:
        self.start = start
        self.end = end
        self.step = step

    def __call__(self, accept: Accept[Any], interrupt: Interrupt[Any]) -> None:
        magnitude = abs(self.step)
        ascending = self.start < self.end
        index = 0
        while True:
            if ascending:
                value = self.start + index * magnitude
                if value >= self.end:
                    break
            else:
                value = self.start - index * magnitude
                if value <= self.end:
                    break
            if interrupt(value):
                break
            accept(value, index)
            index += 1

    def __repr__(self) -> str:
        return f"range({repr(self.start)}, {repr(self.end)}, {repr(self.step)})"


################
# intermediate #
################


class ConcatDrive(Drive[T]):
    def __init__(self, upstream: DriveProcedure[T], other: DriveProcedure[T]) -> None:
        self.upstream = upstream
        self.other = other

    def __call__(self, accept: Accept[T], interrupt: Interrupt[T]) -> None:
        index = 0

        def concat_accept(element: T, _: int) -> None:
            nonlocal index
            if interrupt(element):
                return
            accept(element, index)
            index += 1

        self.upstream(concat_accept, interrupt)
        self.other(concat_accept, interrupt)


class DistinctDrive(Drive[T]):
    def __init__(
        self, upstream: DriveProcedure[T], identifier: Optional[Callable[[T], Any]]
    ) -> None:
        self.upstream = upstream
        self.identifier = identifier

    def __call__(self, accept: Accept[T], interrupt: Interrupt[T]) -> None:
        seen: Set[Hashable] = set()
        # keys that cannot be hashed fall back to equality lookups
        seen_unhashable: List[Any] = []
        identifier = self.identifier

        def distinct_accept(element: T, index: int) -> None:
            if interrupt(element):
                return
            key = identifier(element) if identifier else element
            try:
                if key in seen:
                    return
                seen.add(key)
            except TypeError:
                if key in seen_unhashable:
                    return
                seen_unhashable.append(key)
            accept(element, index)

        self.upstream(distinct_accept, interrupt)


class DropWhileDrive(Drive[T]):
    def __init__(self, upstream: DriveProcedure[T], predicate: Callable[[T], Any]) -> None:
        self.upstream = upstream
        self.predicate = predicate

    def __call__(self, accept: Accept[T], interrupt: Interrupt[T]) -> None:
        dropping = True

        def drop_while_accept(element: T, index: int) -> None:
            nonlocal dropping
            if interrupt(element):
                return
            if dropping:
                if self.predicate(element):
                    return
                dropping = False
            accept(element, index)

        self.upstream(drop_while_accept, interrupt)


class FilterDrive(Drive[T]):
    def __init__(self, upstream: DriveProcedure[T], predicate: Callable[[T], Any]) -> None:
        self.upstream = upstream
        self.predicate = predicate

    def __call__(self, accept: Accept[T], interrupt: Interrupt[T]) -> None:
        filtered_index = 0

        def filter_accept(element: T, _: int) -> None:
            nonlocal filtered_index
            if interrupt(element) or not self.predicate(element):
                return
            accept(element, filtered_index)
            filtered_index += 1

        self.upstream(filter_accept, interrupt)


class FlatMapDrive(Drive[U], Generic[T, U]):
    def __init__(self, upstream: DriveProcedure[T], mapper: Callable[[T], Any]) -> None:
        self.upstream = upstream
        self.mapper = mapper

    def __call__(self, accept: Accept[U], interrupt: Interrupt[Any]) -> None:
        from semantic._pipeline import Pipeline

        def flat_map_accept(element: T, index: int) -> None:
            if interrupt(element):
                return
            nested = self.mapper(element)
            if isinstance(nested, Pipeline):

                def nested_accept(nested_element: U, _: int) -> None:
                    if interrupt(nested_element):
                        return
                    accept(nested_element, index)

                nested.drive(nested_accept, interrupt)
            elif isinstance(nested, Iterable):
                for nested_element in nested:
                    if interrupt(nested_element):
                        break
                    accept(nested_element, index)
            else:
                get_logger().debug(
                    "flat_map dropped a result that is neither a Pipeline nor an Iterable: %r",
                    nested,
                )

        self.upstream(flat_map_accept, interrupt)


class LimitDrive(Drive[T]):
    def __init__(self, upstream: DriveProcedure[T], count: Any) -> None:
        self.upstream = upstream
        self.count = count

    def __call__(self, accept: Accept[T], interrupt: Interrupt[T]) -> None:
        forwarded = 0

        def limit_accept(element: T, index: int) -> None:
            nonlocal forwarded
            if interrupt(element) or forwarded >= self.count:
                return
            accept(element, index)
            forwarded += 1

        def limit_interrupt(element: T) -> Any:
            return forwarded >= self.count or interrupt(element)

        self.upstream(limit_accept, limit_interrupt)


class MapDrive(Drive[U], Generic[T, U]):
    def __init__(self, upstream: DriveProcedure[T], mapper: Callable[[T], U]) -> None:
        self.upstream = upstream
        self.mapper = mapper

    def __call__(self, accept: Accept[U], interrupt: Interrupt[Any]) -> None:
        def map_accept(element: T, index: int) -> None:
            if interrupt(element):
                return
            accept(self.mapper(element), index)

        self.upstream(map_accept, interrupt)


class ObserveDrive(Drive[T]):
    def __init__(
        self,
        upstream: DriveProcedure[T],
        subject: str,
        do: Optional[Callable[["Observation"], Any]],
    ) -> None:
        self.upstream = upstream
        self.subject = subject
        self.do = do

    def __call__(self, accept: Accept[T], interrupt: Interrupt[T]) -> None:
        from semantic._observation import Observation

        start = time.perf_counter()
        elements = 0
        elements_observed = -1
        threshold = 1

        def observe() -> None:
            nonlocal elements_observed
            observation = Observation(
                subject=self.subject,
                elapsed=datetime.timedelta(seconds=time.perf_counter() - start),
                elements=elements,
            )
            if self.do:
                self.do(observation)
            else:
                get_logger().info("%s", observation)
            elements_observed = elements

        def observe_accept(element: T, index: int) -> None:
            nonlocal elements, threshold
            if interrupt(element):
                return
            elements += 1
            if elements >= threshold:
                observe()
                threshold *= 2
            accept(element, index)

        self.upstream(observe_accept, interrupt)
        if elements != elements_observed:
            observe()


class PeekDrive(Drive[T]):
    def __init__(self, upstream: DriveProcedure[T], consumer: Callable[[T], Any]) -> None:
        self.upstream = upstream
        self.consumer = consumer

    def __call__(self, accept: Accept[T], interrupt: Interrupt[T]) -> None:
        def peek_accept(element: T, index: int) -> None:
            if interrupt(element):
                return
            self.consumer(element)
            accept(element, index)

        self.upstream(peek_accept, interrupt)


class SkipDrive(Drive[T]):
    def __init__(self, upstream: DriveProcedure[T], count: Any) -> None:
        self.upstream = upstream
        self.count = count

    def __call__(self, accept: Accept[T], interrupt: Interrupt[T]) -> None:
        skipped = 0

        def skip_accept(element: T, index: int) -> None:
            nonlocal skipped
            if interrupt(element):
                return
            if skipped < self.count:
                skipped += 1
                return
            accept(element, index - skipped)

        self.upstream(skip_accept, interrupt)


class TakeWhileDrive(Drive[T]):
    def __init__(self, upstream: DriveProcedure[T], predicate: Callable[[T], Any]) -> None:
        self.upstream = upstream
        self.predicate = predicate

    def __call__(self, accept: Accept[T], interrupt: Interrupt[T]) -> None:
        taking = True

        def take_while_accept(element: T, index: int) -> None:
            nonlocal taking
            if not taking or interrupt(element):
                return
            if not self.predicate(element):
                taking = False
                return
            accept(element, index)

        # the upstream keeps driving: only `interrupt` may stop it
        self.upstream(take_while_accept, interrupt)
