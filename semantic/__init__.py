from semantic._collector import Collector
from semantic._consumers import Consumer, OrderedConsumer, UnorderedConsumer
from semantic._generative import empty, fill, from_iterable, iterate, of, range
from semantic._observation import Observation
from semantic._option import Option
from semantic._pipeline import Pipeline
from semantic._statistics import Statistics
from semantic._window import WindowConsumer
from semantic.errors import EmptyValueError, InvalidArgumentError

Pipeline.__module__ = __name__
Consumer.__module__ = __name__
OrderedConsumer.__module__ = __name__
UnorderedConsumer.__module__ = __name__
Statistics.__module__ = __name__
WindowConsumer.__module__ = __name__
Collector.__module__ = __name__
Option.__module__ = __name__
Observation.__module__ = __name__

__all__ = [
    "Pipeline",
    "Consumer",
    "OrderedConsumer",
    "UnorderedConsumer",
    "Statistics",
    "WindowConsumer",
    "Collector",
    "Option",
    "Observation",
    "empty",
    "fill",
    "from_iterable",
    "iterate",
    "of",
    "range",
    "InvalidArgumentError",
    "EmptyValueError",
]

__version__ = "0.1.0"
