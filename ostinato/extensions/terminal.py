from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..pipeline import Stream


class TerminalAccessor(Generic[T]):
    def __init__(self, stream_instance: 'Stream[T]'):
        self._stream = stream_instance

    def list(self) -> List[T]:
        """
        convert to list. the result is a copy: mutating it never reaches the stream
        or any stream derived from it.
        """
        return list(self._stream._get_data())

    def dict(self, key_selector: Optional[KeySelector[T, K]] = None,
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary. when two elements share a key the later one wins."""
        key_sel = key_selector if key_selector is not None else identity
        val_sel = value_selector if value_selector is not None else identity
        return {key_sel(item): val_sel(item) for item in self._stream._get_data()}

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._stream._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._stream._get_data())
        return sum(1 for x in self._stream._get_data() if predicate(x))

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._stream._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._stream._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._stream._get_data())
