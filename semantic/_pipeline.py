import copy
import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Optional,
    TypeVar,
    Union,
)

from semantic._drives import DriveProcedure
from semantic._tools._func import identity
from semantic._tools._logging import get_logger
from semantic._tools._validation import (
    validate_bounds,
    validate_callable,
    validate_int,
    validate_number,
)
from semantic.errors import InvalidArgumentError

if TYPE_CHECKING:  # pragma: no cover
    from semantic._consumers import OrderedConsumer, UnorderedConsumer
    from semantic._observation import Observation
    from semantic._statistics import Statistics
    from semantic._window import WindowConsumer
    from semantic.visitors import Visitor

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


class Pipeline(Generic[T]):
    """
    ``Pipeline[T]`` is an immutable, lazy description of a traversal producing elements of type ``T``.

    A source pipeline wraps a *drive procedure* ``drive(accept, interrupt)`` that pushes each element
    (with its index) into ``accept`` and consults ``interrupt(element)`` before each emission.
    Intermediate operations return new pipelines whose upstream is the receiver; nothing runs
    until a consumer (``to_ordered()``, ``to_unordered()``, ``to_statistics()``, ``to_window()``)
    calls a terminal operation.

    .. code-block:: python

        >>> from semantic import range
        >>> range(0, 10).filter(lambda n: n % 2).map(str).to_unordered().to_list()
        ['1', '3', '5', '7', '9']

    Args:
        source (``Callable[[Callable[[T, int], Any], Callable[[T], Any]], None]``): The drive procedure.
        concurrency (``int``, optional): Concurrency degree carried along the pipeline. Configuration only: traversals are sequential. (default: 1)
    """

    __slots__ = ("_source", "_upstream", "_concurrency")

    def __init__(self, source: DriveProcedure[T], concurrency: int = 1) -> None:
        self._source = source
        self._upstream: "Optional[Pipeline]" = None
        self._concurrency = concurrency

    @property
    def upstream(self) -> "Optional[Pipeline]":
        """
        The parent pipeline if any.

        Returns:
            ``Pipeline | None``
        """
        return self._upstream

    @property
    def source(self) -> DriveProcedure:
        """
        The drive procedure at the root of the lineage.

        Returns:
            ``Callable[[Callable[[T, int], Any], Callable[[T], Any]], None]``
        """
        return self._source

    @property
    def concurrency(self) -> int:
        """
        The concurrency degree carried by this pipeline.

        Returns:
            ``int``
        """
        return self._concurrency

    @property
    def drive(self) -> DriveProcedure[T]:
        """
        Compiles the lineage into a single drive procedure.

        Returns:
            ``Callable[[Callable[[T, int], Any], Callable[[T], Any]], None]``
        """
        from semantic.visitors._drive import DriveVisitor

        return self.accept(DriveVisitor[T]())

    def __eq__(self, other: Any) -> bool:
        """
        Two pipelines are considered equal if they apply the same operations, with the same parameters, to the same source.

        Returns:
            ``bool``: True if this pipeline is equal to ``other``.
        """
        from semantic.visitors._eq import EqualityVisitor

        return self.accept(EqualityVisitor(other))

    def __repr__(self) -> str:
        from semantic.visitors._repr import ReprVisitor

        return self.accept(ReprVisitor())

    def __str__(self) -> str:
        from semantic.visitors._repr import StrVisitor

        return self.accept(StrVisitor())

    def __add__(self, other: "Pipeline[T]") -> "Pipeline[T]":
        """
        ``a + b`` returns a pipeline emitting all elements of ``a``, followed by all elements of ``b``.
        """
        return self.concat(other)

    def accept(self, visitor: "Visitor[V]") -> V:
        """
        Entry point to visit the pipeline lineage.
        """
        return visitor.visit_pipeline(self)

    def display(self, level: int = logging.INFO) -> "Pipeline[T]":
        """
        Logs a representation of the pipeline.

        Args:
            level (``int``, optional): The level of the log. (default: INFO)

        Returns:
            ``Pipeline[T]``: This pipeline.
        """
        get_logger().log(level, str(self))
        return self

    def concat(self, other: "Pipeline[T]") -> "Pipeline[T]":
        """
        Emits all elements of this pipeline, then all elements of ``other``, indexed by a single increasing counter.

        Args:
            other (``Pipeline[T]``): The pipeline drained once this one is exhausted.

        Returns:
            ``Pipeline[T]``
        """
        if not isinstance(other, Pipeline):
            raise InvalidArgumentError(
                f"`other` must be a Pipeline but got {repr(other)}"
            )
        return ConcatPipeline(self, other)

    def distinct(self, identifier: Optional[Callable[[T], Any]] = None) -> "Pipeline[T]":
        """
        Emits only the first occurrence of each element (or of each ``identifier(elem)`` key).

        Warning:
            The keys seen during a traversal are retained in memory until the traversal ends.

        Args:
            identifier (``Callable[[T], Any] | None``, optional): Elements are deduplicated based on ``identifier(elem)``. (default: the elements themselves)

        Returns:
            ``Pipeline[T]``
        """
        if identifier is not None:
            validate_callable(identifier, name="identifier")
        return DistinctPipeline(self, identifier)

    def drop_while(self, predicate: Callable[[T], Any]) -> "Pipeline[T]":
        """
        Drops elements as long as ``predicate(elem)`` is truthy, then emits every remaining element.

        Returns:
            ``Pipeline[T]``
        """
        validate_callable(predicate, name="predicate")
        return DropWhilePipeline(self, predicate)

    def filter(self, predicate: Callable[[T], Any]) -> "Pipeline[T]":
        """
        Emits only the elements satisfying ``predicate``, re-indexed from 0.

        Args:
            predicate (``Callable[[T], Any]``): An element is kept if ``predicate(elem)`` is truthy.

        Returns:
            ``Pipeline[T]``
        """
        validate_callable(predicate, name="predicate")
        return FilterPipeline(self, predicate)

    def flat_map(
        self, mapper: Callable[[T], Union["Pipeline[U]", Iterable[U]]]
    ) -> "Pipeline[U]":
        """
        Emits the elements of the pipeline or iterable returned by ``mapper(elem)``, each carrying the index of ``elem``.
        Results that are neither pipelines nor iterables emit nothing.

        Returns:
            ``Pipeline[U]``
        """
        validate_callable(mapper, name="mapper")
        return FlatMapPipeline(self, mapper)

    def limit(self, count: int) -> "Pipeline[T]":
        """
        Emits at most ``count`` elements, then stops the upstream traversal.

        Returns:
            ``Pipeline[T]``
        """
        validate_number(count, gte=0, name="count")
        return LimitPipeline(self, count)

    def map(self, mapper: Callable[[T], U]) -> "Pipeline[U]":
        """
        Applies ``mapper`` on each element.

        Returns:
            ``Pipeline[U]``
        """
        validate_callable(mapper, name="mapper")
        return MapPipeline(self, mapper)

    def observe(
        self,
        subject: str = "elements",
        *,
        do: Optional[Callable[["Observation"], Any]] = None,
    ) -> "Pipeline[T]":
        """
        Observes the progress of traversals: an ``Observation`` is emitted when the count of forwarded elements
        reaches a power of 2, and once more when the traversal ends.

        Args:
            subject (``str``, optional): A plural noun describing the elements (e.g., "cats", "dogs").
            do (``Callable[[Observation], Any] | None``, optional): Called with each observation. (default: logs it at INFO level)

        Returns:
            ``Pipeline[T]``
        """
        if not isinstance(subject, str):
            raise InvalidArgumentError(f"`subject` must be a str but got {repr(subject)}")
        if do is not None:
            validate_callable(do, name="do")
        return ObservePipeline(self, subject, do)

    def parallel(self, concurrency: int) -> "Pipeline[T]":
        """
        Sets the concurrency degree carried by the pipeline. Traversals stay sequential: ordering and results are unchanged.

        Args:
            concurrency (``int``): Concurrency degree, >= 1.

        Returns:
            ``Pipeline[T]``
        """
        validate_int(concurrency, gte=1, name="concurrency")
        return ParallelPipeline(self, concurrency)

    def peek(self, consumer: Callable[[T], Any]) -> "Pipeline[T]":
        """
        Calls ``consumer`` on each element before forwarding it unchanged.

        Returns:
            ``Pipeline[T]``
        """
        validate_callable(consumer, name="consumer")
        return PeekPipeline(self, consumer)

    def skip(self, count: int) -> "Pipeline[T]":
        """
        Skips the first ``count`` elements; survivors are re-indexed as ``index - count``.

        Returns:
            ``Pipeline[T]``
        """
        validate_number(count, gte=0, name="count")
        return SkipPipeline(self, count)

    def sub(self, start: int, end: int) -> "Pipeline[T]":
        """
        Emits the elements at positions ``start`` (inclusive) to ``end`` (exclusive): ``skip(start).limit(end - start)``.

        Returns:
            ``Pipeline[T]``
        """
        validate_bounds(start, end)
        return self.skip(start).limit(end - start)

    def take_while(self, predicate: Callable[[T], Any]) -> "Pipeline[T]":
        """
        Emits elements as long as ``predicate(elem)`` is truthy, and nothing after the first failing element.
        The upstream traversal itself is only stopped by the consumer.

        Returns:
            ``Pipeline[T]``
        """
        validate_callable(predicate, name="predicate")
        return TakeWhilePipeline(self, predicate)

    def to_ordered(self) -> "OrderedConsumer[T]":
        from semantic._consumers import OrderedConsumer

        return OrderedConsumer(self.drive, self.concurrency)

    def to_unordered(self) -> "UnorderedConsumer[T]":
        from semantic._consumers import UnorderedConsumer

        return UnorderedConsumer(self.drive, self.concurrency)

    def to_statistics(self, mapper: Callable[[T], Any] = identity) -> "Statistics[T]":
        from semantic._statistics import Statistics

        validate_callable(mapper, name="mapper")
        return Statistics(self.drive, self.concurrency, mapper)

    def to_window(self) -> "WindowConsumer[T]":
        from semantic._window import WindowConsumer

        return WindowConsumer(self.drive, self.concurrency)


class DownPipeline(Pipeline[U], Generic[T, U]):
    """
    Pipeline having an upstream.
    """

    __slots__ = ()

    def __init__(self, upstream: Pipeline[T]) -> None:
        self._upstream: Pipeline[T] = upstream

    def __deepcopy__(self, memo: Dict[int, Any]) -> "DownPipeline[T, U]":
        new = copy.copy(self)
        new._upstream = copy.deepcopy(self._upstream, memo)
        return new

    @property
    def source(self) -> DriveProcedure:
        return self._upstream.source

    @property
    def upstream(self) -> Pipeline[T]:
        """
        Returns:
            ``Pipeline``: Parent pipeline.
        """
        return self._upstream

    @property
    def concurrency(self) -> int:
        return self._upstream.concurrency


class ConcatPipeline(DownPipeline[T, T]):
    __slots__ = ("_other",)

    def __init__(self, upstream: Pipeline[T], other: Pipeline[T]) -> None:
        super().__init__(upstream)
        self._other = other

    def accept(self, visitor: "Visitor[V]") -> V:
        return visitor.visit_concat_pipeline(self)


class DistinctPipeline(DownPipeline[T, T]):
    __slots__ = ("_identifier",)

    def __init__(
        self, upstream: Pipeline[T], identifier: Optional[Callable[[T], Any]]
    ) -> None:
        super().__init__(upstream)
        self._identifier = identifier

    def accept(self, visitor: "Visitor[V]") -> V:
        return visitor.visit_distinct_pipeline(self)


class DropWhilePipeline(DownPipeline[T, T]):
    __slots__ = ("_predicate",)

    def __init__(self, upstream: Pipeline[T], predicate: Callable[[T], Any]) -> None:
        super().__init__(upstream)
        self._predicate = predicate

    def accept(self, visitor: "Visitor[V]") -> V:
        return visitor.visit_drop_while_pipeline(self)


class FilterPipeline(DownPipeline[T, T]):
    __slots__ = ("_predicate",)

    def __init__(self, upstream: Pipeline[T], predicate: Callable[[T], Any]) -> None:
        super().__init__(upstream)
        self._predicate = predicate

    def accept(self, visitor: "Visitor[V]") -> V:
        return visitor.visit_filter_pipeline(self)


class FlatMapPipeline(DownPipeline[T, U]):
    __slots__ = ("_mapper",)

    def __init__(self, upstream: Pipeline[T], mapper: Callable[[T], Any]) -> None:
        super().__init__(upstream)
        self._mapper = mapper

    def accept(self, visitor: "Visitor[V]") -> V:
        return visitor.visit_flat_map_pipeline(self)


class LimitPipeline(DownPipeline[T, T]):
    __slots__ = ("_count",)

    def __init__(self, upstream: Pipeline[T], count: int) -> None:
        super().__init__(upstream)
        self._count = count

    def accept(self, visitor: "Visitor[V]") -> V:
        return visitor.visit_limit_pipeline(self)


class MapPipeline(DownPipeline[T, U]):
    __slots__ = ("_mapper",)

    def __init__(self, upstream: Pipeline[T], mapper: Callable[[T], U]) -> None:
        super().__init__(upstream)
        self._mapper = mapper

    def accept(self, visitor: "Visitor[V]") -> V:
        return visitor.visit_map_pipeline(self)


class ObservePipeline(DownPipeline[T, T]):
    __slots__ = ("_subject", "_do")

    def __init__(
        self,
        upstream: Pipeline[T],
        subject: str,
        do: Optional[Callable[["Observation"], Any]],
    ) -> None:
        super().__init__(upstream)
        self._subject = subject
        self._do = do

    def accept(self, visitor: "Visitor[V]") -> V:
        return visitor.visit_observe_pipeline(self)


class ParallelPipeline(DownPipeline[T, T]):
    __slots__ = ()

    def __init__(self, upstream: Pipeline[T], concurrency: int) -> None:
        super().__init__(upstream)
        self._concurrency = concurrency

    @property
    def concurrency(self) -> int:
        return self._concurrency

    def accept(self, visitor: "Visitor[V]") -> V:
        return visitor.visit_parallel_pipeline(self)


class PeekPipeline(DownPipeline[T, T]):
    __slots__ = ("_consumer",)

    def __init__(self, upstream: Pipeline[T], consumer: Callable[[T], Any]) -> None:
        super().__init__(upstream)
        self._consumer = consumer

    def accept(self, visitor: "Visitor[V]") -> V:
        return visitor.visit_peek_pipeline(self)


class SkipPipeline(DownPipeline[T, T]):
    __slots__ = ("_count",)

    def __init__(self, upstream: Pipeline[T], count: int) -> None:
        super().__init__(upstream)
        self._count = count

    def accept(self, visitor: "Visitor[V]") -> V:
        return visitor.visit_skip_pipeline(self)


class TakeWhilePipeline(DownPipeline[T, T]):
    __slots__ = ("_predicate",)

    def __init__(self, upstream: Pipeline[T], predicate: Callable[[T], Any]) -> None:
        super().__init__(upstream)
        self._predicate = predicate

    def accept(self, visitor: "Visitor[V]") -> V:
        return visitor.visit_take_while_pipeline(self)
