import typing
from .types import *

if typing.TYPE_CHECKING:
    from .pipeline import Stream

def from_iterable(data: Iterable[T]) -> 'Stream[T]':
    """create stream from iterable"""
    from .pipeline import Stream
    return Stream(lambda: list(data))

def empty() -> 'Stream[Any]':
    """create empty stream"""
    from .pipeline import Stream
    return Stream(lambda: [])

def map_to(source: 'Stream[T]', selector: Selector[T, U]) -> 'Stream[U]':
    """
    project each element of a stream into a possibly different type.
    a free function rather than a method since the result's element type differs
    from the source's. the source stream is never modified.
    """
    from .pipeline import Stream
    if not isinstance(source, Stream):
        raise TypeError(f"map_to expects a Stream, got {type(source).__name__}")
    return Stream(lambda: [selector(x) for x in source._get_data()])

# --- aliases ---
stream = from_iterable
S = from_iterable
