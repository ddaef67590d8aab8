from typing import Any, TypeVar

T = TypeVar("T")


class _NoValue:
    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_VALUE"


NO_VALUE: Any = _NoValue()


def identity(x: T) -> T:
    return x


def never(_: Any) -> bool:
    return False


