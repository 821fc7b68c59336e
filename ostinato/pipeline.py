from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *

# --- stage mixins ---
from .extensions.core import _CoreOperations
from .extensions.aggregate import _AggregateOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IStream(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base stream implementation ---

class _BaseStream(IStream[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """
        get the current data, caching the result.
        the cached list is shared with child stages and must never be mutated.
        """
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
            logger.debug("materialized %d elements", len(self._cached_result))
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

    def __repr__(self) -> str:
        if not self._is_cached:
            return "Stream(<pending>)"
        return f"Stream({self._cached_result!r})"

# --- main stream class ---

class Stream(
    _BaseStream[T],
    _CoreOperations[T],
    _AggregateOperations[T]
):
    """a chainable pipeline over an ordered in-memory sequence."""
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
