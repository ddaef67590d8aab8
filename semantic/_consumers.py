import sys
from functools import cmp_to_key
from random import Random
from typing import (
    IO,
    Any,
    Callable,
    Dict,
    Generic,
    List,
    Optional,
    Set,
    TypeVar,
    Union,
    overload,
)

from semantic._collector import Collector
from semantic._drives import DriveProcedure, IterableDrive
from semantic._option import Option
from semantic._pipeline import Pipeline
from semantic._tools._func import NO_VALUE, identity, never
from semantic._tools._validation import validate_callable, validate_int
from semantic.errors import InvalidArgumentError

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")
A = TypeVar("A")
R = TypeVar("R")


def _appended(elements: List[T], element: T) -> List[T]:
    elements.append(element)
    return elements


def _extended(elements: List[T], others: List[T]) -> List[T]:
    elements.extend(others)
    return elements


def _added(elements: Set[T], element: T) -> Set[T]:
    elements.add(element)
    return elements


def _united(elements: Set[T], others: Set[T]) -> Set[T]:
    elements |= others
    return elements


def _updated(mapping: Dict[K, Any], other: Dict[K, Any]) -> Dict[K, Any]:
    mapping.update(other)
    return mapping


def _incremented(count: int, _: Any) -> int:
    return count + 1


def _summed(a: int, b: int) -> int:
    return a + b


class Consumer(Generic[T]):
    """
    Terminal operations over a drive procedure.

    Each terminal operation runs a complete, independent traversal: calling two of them runs the drive twice.

    Args:
        drive (``Callable[[Callable[[T, int], Any], Callable[[T], Any]], None]``): The drive procedure to consume.
        concurrency (``int``, optional): Concurrency degree carried over from the pipeline. (default: 1)
    """

    __slots__ = ("_drive", "_concurrency")

    def __init__(self, drive: DriveProcedure[T], concurrency: int = 1) -> None:
        self._drive = drive
        self._concurrency = concurrency

    @property
    def drive(self) -> DriveProcedure[T]:
        return self._drive

    @property
    def concurrency(self) -> int:
        return self._concurrency

    def pipeline(self) -> Pipeline[T]:
        """
        Returns:
            ``Pipeline[T]``: A pipeline over the same drive, to chain more intermediate operations.
        """
        return Pipeline(self._drive, self._concurrency)

    def any_match(self, predicate: Callable[[T], Any]) -> bool:
        """
        Returns:
            ``bool``: Whether any element satisfies ``predicate``. Stops at the first one that does.
        """
        validate_callable(predicate, name="predicate")
        found = False

        def accept(element: T, _: int) -> None:
            nonlocal found
            if not found and predicate(element):
                found = True

        self._drive(accept, lambda _: found)
        return found

    def all_match(self, predicate: Callable[[T], Any]) -> bool:
        """
        Returns:
            ``bool``: Whether every element satisfies ``predicate`` (True for no element). Stops at the first one that does not.
        """
        validate_callable(predicate, name="predicate")
        all_matched = True

        def accept(element: T, _: int) -> None:
            nonlocal all_matched
            if all_matched and not predicate(element):
                all_matched = False

        self._drive(accept, lambda _: not all_matched)
        return all_matched

    def none_match(self, predicate: Callable[[T], Any]) -> bool:
        return not self.any_match(predicate)

    # fmt: off
    @overload
    def collect(self, supplier: Collector[T, A, R]) -> R: ...
    @overload
    def collect(
        self,
        supplier: Callable[[], A],
        accumulator: Callable[[A, T], A],
        combiner: Callable[[A, A], A],
        interrupter: Optional[Callable[[T], Any]] = None,
        finisher: Optional[Callable[[A], R]] = None,
    ) -> R: ...
    # fmt: on

    def collect(
        self,
        supplier: Union[Collector[T, A, R], Callable[[], A]],
        accumulator: Optional[Callable[[A, T], A]] = None,
        combiner: Optional[Callable[[A, A], A]] = None,
        interrupter: Optional[Callable[[T], Any]] = None,
        finisher: Optional[Callable[[A], R]] = None,
    ) -> R:
        """
        Folds the elements with a ``Collector``, given either built or as its raw functions.

        Args:
            supplier (``Collector[T, A, R] | Callable[[], A]``): A collector, or the supplier of the initial accumulation.
            accumulator (``Callable[[A, T], A]``, optional): Required if ``supplier`` is not a ``Collector``.
            combiner (``Callable[[A, A], A]``, optional): Required if ``supplier`` is not a ``Collector``.
            interrupter (``Callable[[T], Any]``, optional): Stops the fold when truthy. (default: never stops)
            finisher (``Callable[[A], R]``, optional): Turns the accumulation into the result. (default: identity)

        Returns:
            ``R``: The finished accumulation.
        """
        if isinstance(supplier, Collector):
            return self._collect(supplier)
        return self._collect(
            Collector(
                supplier,
                accumulator,  # type: ignore
                combiner,  # type: ignore
                never if interrupter is None else interrupter,
                identity if finisher is None else finisher,  # type: ignore
            )
        )

    def _collect(self, collector: Collector[T, A, R]) -> R:
        result = collector.supplier()
        interrupted = False

        def accept(element: T, _: int) -> None:
            nonlocal result, interrupted
            if interrupted:
                return
            if collector.interrupter(element):
                interrupted = True
                return
            result = collector.accumulator(result, element)

        self._drive(accept, lambda _: interrupted)
        return collector.finisher(result)

    def count(self) -> int:
        return self._collect(Collector(int, _incremented, _summed))

    def cout(
        self,
        formatter: Callable[[T], str] = str,
        file: Optional[IO[str]] = None,
    ) -> None:
        """
        Prints each element formatted by ``formatter``, one per line.

        Args:
            formatter (``Callable[[T], str]``, optional): (default: ``str``)
            file (``IO[str] | None``, optional): (default: ``sys.stdout``)
        """
        validate_callable(formatter, name="formatter")

        def accept(element: T, _: int) -> None:
            print(formatter(element), file=file or sys.stdout)

        self._drive(accept, never)

    def find_first(self) -> Option[T]:
        """
        Returns:
            ``Option[T]``: The first element that is not None, empty if there is none.
            ``None`` elements are skipped: the traversal stops once a non-None element is found.
        """
        first: Optional[T] = None

        def accept(element: T, _: int) -> None:
            nonlocal first
            if first is None:
                first = element

        self._drive(accept, lambda _: first is not None)
        return Option.of_nullable(first)

    def find_any(self) -> Option[T]:
        # traversals are sequential: any element is the first one
        return self.find_first()

    def for_each(self, consumer: Callable[[T, int], Any]) -> None:
        """
        Calls ``consumer(element, index)`` on each element.
        """
        validate_callable(consumer, name="consumer")
        self._drive(consumer, never)

    def group(self, classifier: Callable[[T], K]) -> Dict[K, List[T]]:
        """
        Returns:
            ``Dict[K, List[T]]``: The elements grouped by ``classifier(elem)``, keys in first-seen order.
        """
        validate_callable(classifier, name="classifier")
        return self.group_by(classifier, identity)

    def group_by(
        self, key_extractor: Callable[[T], K], value_extractor: Callable[[T], U]
    ) -> Dict[K, List[U]]:
        """
        Returns:
            ``Dict[K, List[U]]``: The ``value_extractor(elem)`` grouped by ``key_extractor(elem)``, keys in first-seen order.
        """
        validate_callable(key_extractor, name="key_extractor")
        validate_callable(value_extractor, name="value_extractor")

        def accumulate(groups: Dict[K, List[U]], element: T) -> Dict[K, List[U]]:
            groups.setdefault(key_extractor(element), []).append(
                value_extractor(element)
            )
            return groups

        return self._collect(Collector(dict, accumulate, _updated))

    def join(self, delimiter: str = "", prefix: str = "", suffix: str = "") -> str:
        return f"{prefix}{delimiter.join(map(str, self.to_list()))}{suffix}"

    def partition(self, count: int) -> List[List[T]]:
        """
        Chunks the elements by arrival into lists of ``count`` elements. The last chunk may be shorter.

        Args:
            count (``int``): Chunk size, >= 1.

        Returns:
            ``List[List[T]]``
        """
        validate_int(count, gte=1, name="count")

        def accumulate(chunks: List[List[T]], element: T) -> List[List[T]]:
            if not chunks or len(chunks[-1]) >= count:
                chunks.append([])
            chunks[-1].append(element)
            return chunks

        return self._collect(Collector(list, accumulate, _extended))

    def partition_by(self, classifier: Callable[[T], Any]) -> List[List[T]]:
        """
        Returns:
            ``List[List[T]]``: The groups of elements sharing the same ``classifier(elem)``, in first-seen order.
        """
        validate_callable(classifier, name="classifier")
        return list(self.group(classifier).values())

    # fmt: off
    @overload
    def reduce(self, identity: Callable[[T, T], T]) -> Option[T]: ...
    @overload
    def reduce(self, identity: U, accumulator: Callable[[U, T], U]) -> U: ...
    # fmt: on

    def reduce(self, identity: Any, accumulator: Any = NO_VALUE) -> Any:
        """
        ``reduce(accumulator)``: folds the elements, seeded with the first one. Returns an ``Option``, empty if there is no element.

        ``reduce(identity, accumulator)``: folds the elements, seeded with ``identity``. Returns the fold.
        """
        if accumulator is NO_VALUE:
            validate_callable(identity, name="accumulator")
            seeded = False
            result: Any = None

            def accept(element: T, _: int) -> None:
                nonlocal seeded, result
                if seeded:
                    result = identity(result, element)
                else:
                    result = element
                    seeded = True

            self._drive(accept, never)
            return Option.of_nullable(result)
        if not callable(accumulator):
            raise InvalidArgumentError(
                f"`accumulator` must be callable but got {repr(accumulator)}"
            )
        return self._collect(Collector(lambda: identity, accumulator, accumulator))

    def to_list(self) -> List[T]:
        return self._collect(Collector(list, _appended, _extended))

    def to_map(
        self, key_extractor: Callable[[T], K], value_extractor: Callable[[T], U]
    ) -> Dict[K, U]:
        """
        Returns:
            ``Dict[K, U]``: ``key_extractor(elem)`` mapped to ``value_extractor(elem)``; a later key overwrites an earlier one.
        """
        validate_callable(key_extractor, name="key_extractor")
        validate_callable(value_extractor, name="value_extractor")

        def accumulate(mapping: Dict[K, U], element: T) -> Dict[K, U]:
            mapping[key_extractor(element)] = value_extractor(element)
            return mapping

        return self._collect(Collector(dict, accumulate, _updated))

    def to_set(self) -> Set[T]:
        return self._collect(Collector(set, _added, _united))


class OrderedConsumer(Consumer[T]):
    """
    A ``Consumer`` that can also reorder: ``sorted``, ``reverse`` and ``shuffle`` materialize every element,
    reorder a private copy, and return a fresh ``Pipeline`` over it.
    """

    __slots__ = ()

    def _over(self, elements: List[U]) -> Pipeline[U]:
        return Pipeline(IterableDrive(elements), self._concurrency)

    def reverse(self) -> Pipeline[T]:
        elements = self.to_list()
        elements.reverse()
        return self._over(elements)

    def shuffle(self, random: Optional[Callable[[], float]] = None) -> Pipeline[T]:
        """
        Shuffles the elements (Fisher–Yates).

        Args:
            random (``Callable[[], float] | None``, optional): Uniform source of floats in [0, 1). (default: a fresh ``random.Random().random``)

        Returns:
            ``Pipeline[T]``
        """
        if random is None:
            random = Random().random
        validate_callable(random, name="random")
        elements = self.to_list()
        for i in range(len(elements) - 1, 0, -1):
            j = int(random() * (i + 1))
            elements[i], elements[j] = elements[j], elements[i]
        return self._over(elements)

    def sorted(
        self, comparator: Optional[Callable[[T, T], int]] = None
    ) -> Pipeline[T]:
        """
        Sorts the elements (stable).

        Args:
            comparator (``Callable[[T, T], int] | None``, optional): Negative, zero or positive when the first argument sorts before, with, or after the second. (default: natural order)

        Returns:
            ``Pipeline[T]``
        """
        if comparator is not None:
            validate_callable(comparator, name="comparator")
        elements = self.to_list()
        if comparator is None:
            elements.sort()
        else:
            elements.sort(key=cmp_to_key(comparator))
        return self._over(elements)


class UnorderedConsumer(Consumer[T]):
    """
    A ``Consumer`` without reordering operations.
    """

    __slots__ = ()
