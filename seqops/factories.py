import typing
from .types import *
from .errors import InvalidArgumentError
from ._validation import as_list, require_count, require_sequence

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """
    wrap a sequence in an enumerable.
    the source is read once, when the enumerable is first materialized.
    """
    from .enumerable import Enumerable
    require_sequence(data, "data")
    return Enumerable(lambda: as_list(data, "data"))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable of `count` consecutive integers starting at `start`"""
    from .enumerable import Enumerable
    if isinstance(start, bool) or not isinstance(start, int):
        raise InvalidArgumentError(f"start must be an integer, got {type(start).__name__}")
    require_count(count)
    return Enumerable(lambda: list(range(start, start + count)))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable holding the same item `count` times"""
    from .enumerable import Enumerable
    require_count(count)
    return Enumerable(lambda: [item] * count)

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: [])

# --- aliases ---
seqops = from_iterable
P = from_iterable
