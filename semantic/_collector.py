from typing import Any, Callable, Generic, TypeVar

from semantic._tools._func import identity, never
from semantic._tools._guards import are_all, is_function
from semantic.errors import InvalidArgumentError

T = TypeVar("T")
A = TypeVar("A")
R = TypeVar("R")


class Collector(Generic[T, A, R]):
    """
    A pluggable terminal reduction over elements of type ``T``, accumulating into ``A`` and finishing into ``R``:

    ``finisher(accumulator(...accumulator(supplier(), e0)..., en))``, where the fold stops before
    incorporating the first element for which ``interrupter(element)`` is truthy.

    The ``combiner`` merges two accumulations. Traversals are sequential so it is never called,
    but it is required to be callable like the other fields.

    Args:
        supplier (``Callable[[], A]``): Builds the initial accumulation.
        accumulator (``Callable[[A, T], A]``): Incorporates an element, returning the new accumulation.
        combiner (``Callable[[A, A], A]``): Merges two accumulations.
        interrupter (``Callable[[T], Any]``, optional): Stops the fold when truthy. (default: never stops)
        finisher (``Callable[[A], R]``, optional): Turns the accumulation into the result. (default: identity)

    Raises:
        ``InvalidArgumentError``: If any field is not callable.
    """

    __slots__ = ("_supplier", "_accumulator", "_combiner", "_interrupter", "_finisher")

    def __init__(
        self,
        supplier: Callable[[], A],
        accumulator: Callable[[A, T], A],
        combiner: Callable[[A, A], A],
        interrupter: Callable[[T], Any] = never,
        finisher: Callable[[A], R] = identity,  # type: ignore
    ) -> None:
        if not are_all(
            is_function, (supplier, accumulator, combiner, interrupter, finisher)
        ):
            raise InvalidArgumentError(
                "`supplier`, `accumulator`, `combiner`, `interrupter` and `finisher` must all be callable"
            )
        self._supplier = supplier
        self._accumulator = accumulator
        self._combiner = combiner
        self._interrupter = interrupter
        self._finisher = finisher

    @staticmethod
    def of(
        supplier: Callable[[], A],
        accumulator: Callable[[A, T], A],
        combiner: Callable[[A, A], A],
        interrupter: Callable[[T], Any] = never,
        finisher: Callable[[A], R] = identity,  # type: ignore
    ) -> "Collector[T, A, R]":
        return Collector(supplier, accumulator, combiner, interrupter, finisher)

    @staticmethod
    def shortable(
        supplier: Callable[[], A],
        interrupter: Callable[[T], Any],
        accumulator: Callable[[A, T], A],
        combiner: Callable[[A, A], A],
        finisher: Callable[[A], R] = identity,  # type: ignore
    ) -> "Collector[T, A, R]":
        """
        Same as the constructor, with the ``interrupter`` given right after the ``supplier``.
        """
        return Collector(supplier, accumulator, combiner, interrupter, finisher)

    @property
    def supplier(self) -> Callable[[], A]:
        return self._supplier

    @property
    def accumulator(self) -> Callable[[A, T], A]:
        return self._accumulator

    @property
    def combiner(self) -> Callable[[A, A], A]:
        return self._combiner

    @property
    def interrupter(self) -> Callable[[T], Any]:
        return self._interrupter

    @property
    def finisher(self) -> Callable[[A], R]:
        return self._finisher

    def __repr__(self) -> str:
        return (
            f"Collector(supplier={repr(self._supplier)}, accumulator={repr(self._accumulator)}, "
            f"combiner={repr(self._combiner)}, interrupter={repr(self._interrupter)}, "
            f"finisher={repr(self._finisher)})"
        )
