from numbers import Number
from typing import Any, Callable, Iterable


def is_number(unknown: Any) -> bool:
    # bool is an int subclass but never a valid numeric argument
    return isinstance(unknown, Number) and not isinstance(unknown, bool)


def is_function(unknown: Any) -> bool:
    return callable(unknown)


def is_iterable(unknown: Any) -> bool:
    return isinstance(unknown, Iterable)


def are_all(predicate: Callable[[Any], bool], unknowns: Iterable[Any]) -> bool:
    return all(predicate(unknown) for unknown in unknowns)
