import math
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from semantic._consumers import OrderedConsumer
from semantic._drives import IterableDrive
from semantic._option import Option
from semantic._pipeline import Pipeline
from semantic._tools._validation import (
    validate_bounds,
    validate_callable,
    validate_int,
)

T = TypeVar("T")
K = TypeVar("K")
U = TypeVar("U")

Window = List[T]


class WindowConsumer(OrderedConsumer[T]):
    """
    Groups the materialized elements into windows: contiguous lists of ``size`` elements.

    Sliding windows start at offsets ``0, step, 2 * step, ...`` as long as they fit entirely; tumbling windows
    are sliding windows whose ``step`` equals their ``size``. Every operation is built on ``get_sliding_windows``.
    """

    __slots__ = ()

    def _window_consumer(self, windows: List[Window[T]]) -> "WindowConsumer[Window[T]]":
        return WindowConsumer(IterableDrive(windows), self._concurrency)

    def get_sliding_windows(self, size: int, step: int = 1) -> List[Window[T]]:
        """
        Args:
            size (``int``): Window length, >= 1.
            step (``int``, optional): Offset between consecutive windows, >= 1. (default: 1)

        Returns:
            ``List[List[T]]``: Every ``elements[offset:offset + size]`` for ``offset`` in ``0, step, 2 * step, ...`` while ``offset + size <= len(elements)``.
        """
        validate_int(size, gte=1, name="size")
        validate_int(step, gte=1, name="step")
        elements = self.to_list()
        return [
            elements[offset : offset + size]
            for offset in range(0, len(elements) - size + 1, step)
        ]

    def get_tumbling_windows(self, size: int) -> List[Window[T]]:
        return self.get_sliding_windows(size, size)

    def slide(self, size: int, step: int = 1) -> Pipeline[Window[T]]:
        return self._over(self.get_sliding_windows(size, step))

    def tumble(self, size: int) -> Pipeline[Window[T]]:
        return self.slide(size, size)

    def window(
        self, size: int, step: Optional[int] = None
    ) -> "WindowConsumer[Window[T]]":
        """
        Returns:
            ``WindowConsumer[List[T]]``: A window consumer over the windows themselves. (default ``step``: ``size``)
        """
        return self.slide(size, size if step is None else step).to_window()

    def window_stream(self, size: int, step: int = 1) -> Pipeline[Window[T]]:
        return self.slide(size, step)

    def tumbling_window_stream(self, size: int) -> Pipeline[Window[T]]:
        return self.tumble(size)

    def slide_aggregate(
        self, size: int, step: int, aggregator: Callable[[Window[T], int], U]
    ) -> List[U]:
        """
        Returns:
            ``List[U]``: ``aggregator(window, size)`` for each sliding window.
        """
        validate_callable(aggregator, name="aggregator")
        return [
            aggregator(window, size)
            for window in self.get_sliding_windows(size, step)
        ]

    def tumble_aggregate(
        self, size: int, aggregator: Callable[[Window[T], int], U]
    ) -> List[U]:
        return self.slide_aggregate(size, size, aggregator)

    def map_windows(
        self, size: int, step: int, mapper: Callable[[Window[T]], U]
    ) -> List[U]:
        validate_callable(mapper, name="mapper")
        return list(map(mapper, self.get_sliding_windows(size, step)))

    def map_tumbling_windows(
        self, size: int, mapper: Callable[[Window[T]], U]
    ) -> List[U]:
        return self.map_windows(size, size, mapper)

    def timestamped_sliding_windows(
        self, size: int, step: int = 1
    ) -> List[Tuple[int, Window[T]]]:
        """
        Returns:
            ``List[Tuple[int, List[T]]]``: Each sliding window paired with its starting offset.
        """
        return [
            (index * step, window)
            for index, window in enumerate(self.get_sliding_windows(size, step))
        ]

    def timestamped_tumbling_windows(self, size: int) -> List[Tuple[int, Window[T]]]:
        return self.timestamped_sliding_windows(size, size)

    def filter_windows(
        self, size: int, step: int, predicate: Callable[[Window[T]], Any]
    ) -> "WindowConsumer[Window[T]]":
        validate_callable(predicate, name="predicate")
        return self._window_consumer(
            list(filter(predicate, self.get_sliding_windows(size, step)))
        )

    def filter_tumbling_windows(
        self, size: int, predicate: Callable[[Window[T]], Any]
    ) -> "WindowConsumer[Window[T]]":
        return self.filter_windows(size, size, predicate)

    def skip_windows(
        self, size: int, step: int, count: int
    ) -> "WindowConsumer[Window[T]]":
        validate_int(count, gte=0, name="count")
        return self._window_consumer(self.get_sliding_windows(size, step)[count:])

    def limit_windows(
        self, size: int, step: int, count: int
    ) -> "WindowConsumer[Window[T]]":
        validate_int(count, gte=0, name="count")
        return self._window_consumer(self.get_sliding_windows(size, step)[:count])

    def sub_windows(
        self, size: int, step: int, start: int, end: int
    ) -> "WindowConsumer[Window[T]]":
        """
        Returns:
            ``WindowConsumer[List[T]]``: The sliding windows at positions ``start`` (inclusive) to ``end`` (exclusive).
        """
        validate_bounds(start, end)
        return self._window_consumer(self.get_sliding_windows(size, step)[start:end])

    def window_count(self, size: int, step: int = 1) -> int:
        return len(self.get_sliding_windows(size, step))

    def tumbling_window_count(self, size: int) -> int:
        return self.window_count(size, size)

    def first_window(self, size: int, step: int = 1) -> Option[Window[T]]:
        windows = self.get_sliding_windows(size, step)
        return Option.of(windows[0]) if windows else Option.empty()

    def first_tumbling_window(self, size: int) -> Option[Window[T]]:
        return self.first_window(size, size)

    def last_window(self, size: int, step: int = 1) -> Option[Window[T]]:
        windows = self.get_sliding_windows(size, step)
        return Option.of(windows[-1]) if windows else Option.empty()

    def last_tumbling_window(self, size: int) -> Option[Window[T]]:
        return self.last_window(size, size)

    def any_window(
        self, size: int, step: int, predicate: Callable[[Window[T]], Any]
    ) -> bool:
        validate_callable(predicate, name="predicate")
        return any(map(predicate, self.get_sliding_windows(size, step)))

    def all_windows(
        self, size: int, step: int, predicate: Callable[[Window[T]], Any]
    ) -> bool:
        validate_callable(predicate, name="predicate")
        return all(map(predicate, self.get_sliding_windows(size, step)))

    def none_window(
        self, size: int, step: int, predicate: Callable[[Window[T]], Any]
    ) -> bool:
        return not self.any_window(size, step, predicate)

    def partition_windows(
        self, size: int, step: int, partition_count: int
    ) -> List[List[Window[T]]]:
        """
        Splits the sliding windows into at most ``partition_count`` consecutive chunks of ``ceil(windows / partition_count)`` windows.

        Returns:
            ``List[List[List[T]]]``
        """
        validate_int(partition_count, gte=1, name="partition_count")
        windows = self.get_sliding_windows(size, step)
        if not windows:
            return []
        partition_size = math.ceil(len(windows) / partition_count)
        return [
            windows[offset : offset + partition_size]
            for offset in range(0, len(windows), partition_size)
        ]

    def group_windows(
        self, size: int, step: int, classifier: Callable[[Window[T]], K]
    ) -> Dict[K, List[Window[T]]]:
        """
        Returns:
            ``Dict[K, List[List[T]]]``: The sliding windows grouped by ``classifier(window)``, keys in first-seen order.
        """
        validate_callable(classifier, name="classifier")
        groups: Dict[K, List[Window[T]]] = {}
        for window in self.get_sliding_windows(size, step):
            groups.setdefault(classifier(window), []).append(window)
        return groups
