from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Hashable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K', bound=Hashable)
V = TypeVar('V')
A = TypeVar('A')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[A, T], A]


def identity(item: T) -> T:
    """default key selector: an element is its own key"""
    return item


def replace(_accumulated: Any, item: T) -> T:
    """default fold: each step replaces the accumulator with the current element"""
    return item


class Grouping(Generic[T, K]):
    """a key paired with every element that mapped to it, in encounter order"""

    def __init__(self, key: K, values: List[T]):
        self.key = key
        self.values = values

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grouping):
            return NotImplemented
        return self.key == other.key and self.values == other.values

    # mutable value list, so groupings are not hashable
    __hash__ = None

    def __repr__(self) -> str:
        return f"Grouping(key={self.key!r}, values={self.values!r})"
