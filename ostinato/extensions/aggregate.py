from __future__ import annotations
import typing
import logging
from collections import defaultdict
from functools import reduce as _fold
from ..types import *

if typing.TYPE_CHECKING:
    from ..pipeline import Stream

logger = logging.getLogger(__name__)


class _AggregateOperations(Generic[T]):
    def reduce(self: 'Stream[T]', accumulator: Optional[Accumulator[A, T]] = None,
               seed: Optional[A] = None) -> Optional[A]:
        """
        fold the sequence left to right into a single value.

        with a seed every element is folded into it. without one the first element
        becomes the seed and only the rest are folded; an empty sequence then yields
        None. a missing accumulator replaces the running value with each element.
        the stream itself is left untouched and can be reduced again.
        """
        fold = accumulator if accumulator is not None else replace
        data = self._get_data()
        if seed is not None:
            return _fold(fold, data, seed)
        if not data:
            logger.debug("reduce over an empty stream without a seed, returning None")
            return None
        # slicing copies, so the cached data keeps its first element
        return _fold(fold, data[1:], data[0])

    def group_by(self: 'Stream[T]', key_selector: Optional[KeySelector[T, K]] = None) -> List[Grouping[T, K]]:
        """
        partition elements into groupings by key (identity when no selector is given).
        values inside a grouping keep encounter order; the order of the groupings
        themselves is unspecified and must not be relied upon.
        """
        key_of = key_selector if key_selector is not None else identity
        groups = defaultdict(list)
        for item in self._get_data():
            groups[key_of(item)].append(item)
        return [Grouping(key, values) for key, values in groups.items()]
