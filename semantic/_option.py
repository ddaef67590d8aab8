from typing import Any, Callable, Generic, Optional, TypeVar

from semantic._tools._validation import validate_callable
from semantic.errors import EmptyValueError, InvalidArgumentError

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """
    Holds zero or one value. ``None`` stands for the absence of a value: a present ``Option`` never holds ``None``.

    Returned by the queries that may find nothing (``find_first``, ``reduce``, ``minimum``, ...).
    """

    __slots__ = ("_value",)

    def __init__(self, value: Optional[T] = None) -> None:
        self._value = value

    @staticmethod
    def empty() -> "Option[Any]":
        return Option()

    @staticmethod
    def of(value: T) -> "Option[T]":
        """
        Raises:
            ``InvalidArgumentError``: If ``value`` is None.
        """
        if value is None:
            raise InvalidArgumentError("`value` must not be None")
        return Option(value)

    @staticmethod
    def of_nullable(value: Optional[T]) -> "Option[T]":
        return Option(value)

    of_non_null = of

    def is_empty(self) -> bool:
        return self._value is None

    def is_present(self) -> bool:
        return self._value is not None

    def get(self) -> T:
        """
        Returns:
            ``T``: The value.

        Raises:
            ``EmptyValueError``: If this option is empty.
        """
        if self._value is None:
            raise EmptyValueError()
        return self._value

    def if_present(self, consumer: Callable[[T], Any]) -> None:
        if self._value is not None and callable(consumer):
            consumer(self._value)

    def filter(self, predicate: Callable[[T], Any]) -> "Option[T]":
        if self._value is None or not callable(predicate):
            return Option.empty()
        return self if predicate(self._value) else Option.empty()

    def map(self, mapper: Callable[[T], Optional[U]]) -> "Option[U]":
        if self._value is None or not callable(mapper):
            return Option.empty()
        return Option.of_nullable(mapper(self._value))

    def flat_map(self, mapper: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self._value is None or not callable(mapper):
            return Option.empty()
        result = mapper(self._value)
        if not isinstance(result, Option):
            raise InvalidArgumentError(
                f"`mapper` must return an Option but returned {repr(result)}"
            )
        return result

    def or_else(self, other: T) -> T:
        return self._value if self._value is not None else other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        if self._value is not None:
            return self._value
        validate_callable(supplier, name="supplier")
        return supplier()

    def or_else_throw(
        self, error_supplier: Optional[Callable[[], BaseException]] = None
    ) -> T:
        """
        Returns the value, or raises the exception returned by ``error_supplier()``.

        Raises:
            ``EmptyValueError``: If this option is empty and no ``error_supplier`` is given.
        """
        if self._value is not None:
            return self._value
        if callable(error_supplier):
            raise error_supplier()
        raise EmptyValueError()

    def __bool__(self) -> bool:
        return self._value is not None

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Option) and self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        if self._value is None:
            return "Option.empty()"
        return f"Option.of({repr(self._value)})"
