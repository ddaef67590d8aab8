class InvalidArgumentError(TypeError, ValueError):
    """
    Raised eagerly, by the call that received it, when an argument has the wrong type or an out-of-range value.

    It is both a ``TypeError`` and a ``ValueError``, so code catching either builtin also catches it.
    """


class EmptyValueError(LookupError):
    """
    Raised when reading the value of an empty ``Option``.
    """

    def __init__(self, message: str = "No value present") -> None:
        super().__init__(message)
