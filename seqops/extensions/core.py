from __future__ import annotations
import logging
import typing

import numpy as np

from ..types import *
from ..config import get_config
from ..errors import InvalidArgumentError
from .._validation import as_list, bind, require_callable, require_count

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable

logger = logging.getLogger(__name__)

# --- free functions ---

def where(source: Iterable[T], predicate: Predicate) -> List[T]:
    """keep the elements for which predicate(element[, index[, sequence]]) is true"""
    data = as_list(source)
    require_callable(predicate, "predicate")
    test = bind(predicate, 3)
    return [item for index, item in enumerate(data) if test(item, index, data)]


def select(source: Iterable[T], selector: Selector) -> List[U]:
    """project each element to a new form, one output per input"""
    data = as_list(source)
    require_callable(selector, "selector")
    project = bind(selector, 3)
    return [project(item, index, data) for index, item in enumerate(data)]


def order_by(source: Iterable[T], key_selector: KeySelector[T, K]) -> List[T]:
    """stable ascending sort by key"""
    data = as_list(source)
    require_callable(key_selector, "key_selector")
    return sorted(data, key=key_selector)


def order_by_descending(source: Iterable[T], key_selector: KeySelector[T, K]) -> List[T]:
    """stable descending sort by key; equal keys keep their input order"""
    data = as_list(source)
    require_callable(key_selector, "key_selector")
    # reverse=True keeps sort stability, unlike sorting then reversing
    return sorted(data, key=key_selector, reverse=True)


def take(source: Iterable[T], count: int) -> List[T]:
    """the first `count` elements"""
    data = as_list(source)
    return data[:require_count(count)]


def skip(source: Iterable[T], count: int) -> List[T]:
    """everything after the first `count` elements"""
    data = as_list(source)
    return data[require_count(count):]


def reverse(source: Iterable[T]) -> List[T]:
    """a new list with the elements in reverse order"""
    return as_list(source)[::-1]


def default_if_empty(source: Iterable[T], default_value: T = None) -> List[T]:
    """a copy of the sequence, or a single-element list holding default_value if it is empty"""
    data = as_list(source)
    return data if data else [default_value]


def of_type(source: Iterable[Any], type_filter: Any,
            type_check: Optional[TypeCheck] = None) -> List[Any]:
    """
    keep the elements matching type_filter.
    by default this is isinstance(), so subclasses match and a tuple of types works.
    pass type_check(element, type_filter) -> bool to match on anything else,
    e.g. a 'kind' field on tagged records.
    """
    data = as_list(source)
    if type_check is None:
        if not _is_type_spec(type_filter):
            raise InvalidArgumentError(
                f"type_filter must be a type or tuple of types, got {type(type_filter).__name__}")
        return [item for item in data if isinstance(item, type_filter)]
    require_callable(type_check, "type_check")
    return [item for item in data if type_check(item, type_filter)]


def shuffle(source: Iterable[T], rng: Union[np.random.Generator, int, None] = None) -> List[T]:
    """uniformly random permutation of a copy of the sequence (fisher-yates)"""
    data = as_list(source)
    generator = _resolve_rng(rng)
    for i in range(len(data) - 1, 0, -1):
        j = int(generator.integers(0, i + 1))
        data[i], data[j] = data[j], data[i]
    return data


def _is_type_spec(type_filter: Any) -> bool:
    if isinstance(type_filter, type):
        return True
    return isinstance(type_filter, tuple) and len(type_filter) > 0 and all(_is_type_spec(t) for t in type_filter)


def _resolve_rng(rng: Union[np.random.Generator, int, None]) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None:
        seed = get_config().shuffle_seed
        logger.debug("shuffle using configured seed %s", seed)
        return np.random.default_rng(seed)
    if isinstance(rng, int) and not isinstance(rng, bool):
        return np.random.default_rng(rng)
    raise InvalidArgumentError(f"rng must be a numpy Generator or an int seed, got {type(rng).__name__}")


# --- fluent methods ---

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        require_callable(predicate, "predicate")
        return Enumerable(lambda: where(self._get_data(), predicate))

    def select(self: 'Enumerable[T]', selector: Selector) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        require_callable(selector, "selector")
        return Enumerable(lambda: select(self._get_data(), selector))

    def order_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """sort elements by a key"""
        from ..enumerable import OrderedEnumerable
        require_callable(key_selector, "key_selector")
        return OrderedEnumerable(self._get_data, [(key_selector, False)])

    def order_by_descending(self: 'Enumerable[T]', key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """sort elements by a key in descending order"""
        from ..enumerable import OrderedEnumerable
        require_callable(key_selector, "key_selector")
        return OrderedEnumerable(self._get_data, [(key_selector, True)])

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        require_count(count)
        return Enumerable(lambda: take(self._get_data(), count))

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        require_count(count)
        return Enumerable(lambda: skip(self._get_data(), count))

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: reverse(self._get_data()))

    def default_if_empty(self: 'Enumerable[T]', default_value: T = None) -> 'Enumerable[T]':
        """the elements of the sequence, or default_value in a singleton sequence if it is empty"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: default_if_empty(self._get_data(), default_value))

    def of_type(self: 'Enumerable[T]', type_filter: Any,
                type_check: Optional[TypeCheck] = None) -> 'Enumerable[Any]':
        """filters the elements of a sequence based on a specified type"""
        from ..enumerable import Enumerable
        if type_check is None and not _is_type_spec(type_filter):
            raise InvalidArgumentError(
                f"type_filter must be a type or tuple of types, got {type(type_filter).__name__}")
        return Enumerable(lambda: of_type(self._get_data(), type_filter, type_check))

    def shuffle(self: 'Enumerable[T]', rng: Union[np.random.Generator, int, None] = None) -> 'Enumerable[T]':
        """
        random permutation of the sequence.
        the permutation is drawn once, when the result is first materialized.
        """
        from ..enumerable import Enumerable
        return Enumerable(lambda: shuffle(self._get_data(), rng))
