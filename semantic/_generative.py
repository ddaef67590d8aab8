"""
Source factory: builds the initial ``Pipeline`` of a lineage.

Every factory is a convenience over ``iterate``, which wraps a drive procedure directly.
"""

from typing import Any, Callable, Iterable, TypeVar, Union

from semantic._drives import (
    DriveProcedure,
    EmptyDrive,
    FillDrive,
    IterableDrive,
    RangeDrive,
)
from semantic._pipeline import Pipeline
from semantic._tools._guards import are_all, is_iterable, is_number
from semantic._tools._logging import get_logger
from semantic._tools._validation import validate_callable, validate_int
from semantic.errors import InvalidArgumentError

T = TypeVar("T")


def iterate(drive: DriveProcedure[T]) -> Pipeline[T]:
    """
    Wraps a drive procedure ``drive(accept, interrupt)``.

    The procedure must call ``accept(element, index)`` to emit and should consult ``interrupt(element)``
    before each emission: a procedure that never does cannot be stopped early.

    Args:
        drive (``Callable[[Callable[[T, int], Any], Callable[[T], Any]], None]``): The drive procedure.

    Returns:
        ``Pipeline[T]``
    """
    validate_callable(drive, name="drive")
    return Pipeline(drive)


def empty() -> Pipeline[Any]:
    """
    Returns:
        ``Pipeline[Any]``: A pipeline emitting nothing.
    """
    return iterate(EmptyDrive())


def fill(element: Union[T, Callable[[], T]], count: int = 1) -> Pipeline[T]:
    """
    Emits ``count`` elements: ``element`` repeated, or, if ``element`` is a zero-argument callable,
    the result of a fresh call to it for each position.

    Args:
        element (``T | Callable[[], T]``): The value to repeat, or the supplier to call.
        count (``int``, optional): Number of elements, >= 0. (default: 1)

    Returns:
        ``Pipeline[T]``
    """
    validate_int(count, gte=0, name="count")
    return iterate(FillDrive(element, count))


def from_iterable(iterable: Iterable[T]) -> Pipeline[T]:
    """
    Emits the elements of a finite or infinite ``iterable``. A fresh iterator is requested at each traversal.

    A non-iterable argument gives an empty pipeline.

    Returns:
        ``Pipeline[T]``
    """
    if is_iterable(iterable):
        return iterate(IterableDrive(iterable))
    get_logger().debug(
        "from_iterable got a non-iterable %r: building an empty pipeline", iterable
    )
    return empty()


def of(*elements: T) -> Pipeline[T]:
    """
    Returns:
        ``Pipeline[T]``: A pipeline emitting ``elements``.
    """
    return from_iterable(elements)


def range(start: Any, end: Any, step: Any = 1) -> Pipeline[Any]:
    """
    Emits numbers from ``start`` (inclusive) to ``end`` (exclusive).

    The direction is inferred from ``start < end`` and ``abs(step)`` is walked in that direction.
    Each value is indexed by its step count from ``start``.

    Args:
        start (``int | float``): First value.
        end (``int | float``): Excluded bound.
        step (``int | float``, optional): Non-zero step. (default: 1)

    Returns:
        ``Pipeline[int | float]``
    """
    if not are_all(is_number, (start, end, step)):
        raise InvalidArgumentError(
            f"`start`, `end` and `step` must be numbers but got start={repr(start)}, end={repr(end)} and step={repr(step)}"
        )
    if step == 0:
        raise InvalidArgumentError("`step` must not be 0")
    return iterate(RangeDrive(start, end, step))
