from __future__ import annotations
import typing
from collections.abc import Hashable
from ..types import *
from .._validation import as_list, require_callable, require_sequence

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _ByIdentity:
    """hash/equality wrapper for unhashable values: two wrappers are equal only for the same object"""
    __slots__ = ('obj',)

    def __init__(self, obj: Any):
        self.obj = obj

    def __hash__(self) -> int:
        return id(self.obj)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _ByIdentity) and other.obj is self.obj


def equality_key(value: Any) -> Hashable:
    """
    the key used to decide whether two values are 'the same' in distinct and join.
    hashable values compare by value (so 1 == 1.0 == True), unhashable ones by identity.
    """
    try:
        hash(value)
    except TypeError:
        return _ByIdentity(value)
    return value


def distinct(source: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None) -> List[T]:
    """distinct elements in order of first appearance, optionally compared by a key"""
    data = as_list(source)
    if key_selector is not None:
        require_callable(key_selector, "key_selector")
    seen = set()
    result = []
    for item in data:
        key = equality_key(key_selector(item) if key_selector is not None else item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def concat(first: Iterable[T], second: Iterable[T]) -> List[T]:
    """all elements of first followed by all elements of second"""
    return as_list(first, "first") + as_list(second, "second")


class SetAccessor(Generic[T]):
    """set-style operations over the wrapped sequence"""
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        if key_selector is not None: require_callable(key_selector, "key_selector")
        return Enumerable(lambda: distinct(self._enumerable._get_data(), key_selector))

    def concat(self, other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..enumerable import Enumerable
        require_sequence(other, "other")
        return Enumerable(lambda: concat(self._enumerable._get_data(), other))
