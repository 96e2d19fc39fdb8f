from __future__ import annotations
import logging
import typing
from collections import defaultdict
from ..types import *
from .._validation import as_list, require_callable, require_sequence
from .set import equality_key

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


def join(outer: Iterable[T], inner: Iterable[U], outer_key_selector: KeySelector[T, K],
         inner_key_selector: KeySelector[U, K],
         result_selector: Callable[[T, U], V]) -> List[V]:
    """
    inner join two sequences based on matching keys.
    rows come out outer-major: each outer element in order, paired with its matching
    inner elements in their order. outer elements without a match produce nothing.
    """
    outer_data = as_list(outer, "outer")
    inner_data = as_list(inner, "inner")
    require_callable(outer_key_selector, "outer_key_selector")
    require_callable(inner_key_selector, "inner_key_selector")
    require_callable(result_selector, "result_selector")

    inner_lookup = defaultdict(list)
    for inner_item in inner_data:
        inner_lookup[equality_key(inner_key_selector(inner_item))].append(inner_item)

    result = []
    for outer_item in outer_data:
        matches = inner_lookup.get(equality_key(outer_key_selector(outer_item)))
        if matches:
            for inner_item in matches:
                result.append(result_selector(outer_item, inner_item))

    logger.debug("join matched %d row(s) from %d outer x %d inner element(s)",
                 len(result), len(outer_data), len(inner_data))
    return result


class JoinAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
             inner_key_selector: KeySelector[U, K],
             result_selector: Callable[[T, U], V]) -> 'Enumerable[V]':
        """inner join two sequences based on matching keys"""
        from ..enumerable import Enumerable
        require_sequence(inner, "inner")
        require_callable(outer_key_selector, "outer_key_selector")
        require_callable(inner_key_selector, "inner_key_selector")
        require_callable(result_selector, "result_selector")
        return Enumerable(lambda: join(self._enumerable._get_data(), inner,
                                       outer_key_selector, inner_key_selector, result_selector))
