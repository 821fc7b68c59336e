from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..pipeline import Stream


class _CoreOperations(Generic[T]):
    def map(self: 'Stream[T]', selector: Selector[T, T]) -> 'Stream[T]':
        """project each element to a new value of the same kind"""
        from ..pipeline import Stream
        def map_data():
            return [selector(x) for x in self._get_data()]
        return Stream(map_data)

    def filter(self: 'Stream[T]', predicate: Optional[Predicate[T]] = None) -> 'Stream[T]':
        """keep elements satisfying a predicate. a missing predicate keeps everything."""
        from ..pipeline import Stream
        if predicate is None:
            # still a fresh list, so the new stream never shares storage with this one
            return Stream(lambda: list(self._get_data()))
        def filter_data():
            return [x for x in self._get_data() if predicate(x)]
        return Stream(filter_data)

    def distinct(self: 'Stream[T]', key_selector: Optional[KeySelector[T, K]] = None) -> 'Stream[T]':
        """
        drop elements whose key was already seen, keeping first occurrences in order.
        without a key selector each element is its own key and must be hashable.
        """
        from ..pipeline import Stream
        key_of = key_selector if key_selector is not None else identity
        def distinct_data():
            seen = set()
            result = []
            for item in self._get_data():
                key = key_of(item)
                if key not in seen:
                    seen.add(key)
                    result.append(item)
            return result
        return Stream(distinct_data)
