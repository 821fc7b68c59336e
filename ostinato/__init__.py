r"""
'              _   _             _
'     ___  ___| |_(_)_ __   __ _| |_ ___
'    / _ \/ __| __| | '_ \ / _` | __/ _ \
'   | (_) \__ \ |_| | | | | (_| | || (_) |
'    \___/|___/\__|_|_| |_|\__,_|\__\___/
"""

# expose the main class
from .pipeline import Stream

# expose the factory functions
from .factories import (
    from_iterable,
    empty,
    map_to,
    stream,
    S
)

# expose supporting data classes and defaults
from .types import (
    Grouping,
    identity
)

# define what `import *` does
__all__ = [
    "Stream",
    "from_iterable",
    "empty",
    "map_to",
    "stream",
    "S",
    "Grouping",
    "identity"
]
