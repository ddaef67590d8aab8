import math
from typing import Any

from semantic._tools._guards import is_function, is_number
from semantic.errors import InvalidArgumentError


def validate_callable(fn: Any, *, name: str) -> None:
    if not is_function(fn):
        raise InvalidArgumentError(f"`{name}` must be callable but got {repr(fn)}")


def validate_number(number: Any, *, gte: Any = None, name: str) -> None:
    if not is_number(number):
        raise InvalidArgumentError(f"`{name}` must be a number but got {repr(number)}")
    if gte is not None and (math.isnan(number) or number < gte):
        raise InvalidArgumentError(f"`{name}` must be >= {gte} but got {number}")


def validate_int(integer: Any, *, gte: int, name: str) -> None:
    if not isinstance(integer, int) or isinstance(integer, bool):
        raise InvalidArgumentError(
            f"`{name}` must be an int but got {repr(integer)}"
        )
    if integer < gte:
        raise InvalidArgumentError(f"`{name}` must be >= {gte} but got {integer}")


def validate_bounds(start: Any, end: Any) -> None:
    validate_number(start, gte=0, name="start")
    validate_number(end, name="end")
    if end < start:
        raise InvalidArgumentError(
            f"`end` must be >= `start` but got start={start} and end={end}"
        )
