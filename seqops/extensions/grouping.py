from __future__ import annotations
import logging
import typing
from ..types import *
from ..errors import InvalidArgumentError
from .._validation import as_list, require_callable

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


def group_by(source: Iterable[T], key_selector: KeySelector[T, K],
             element_selector: Optional[Selector] = None) -> Dict[K, List[Any]]:
    """
    partition elements by key.
    keys appear in order of first sighting and each group keeps the input order.
    element_selector, when given, maps each element before it is stored.
    """
    data = as_list(source)
    require_callable(key_selector, "key_selector")
    if element_selector is not None: require_callable(element_selector, "element_selector")

    groups: Dict[K, List[Any]] = {}
    for item in data:
        key = key_selector(item)
        try:
            bucket = groups.setdefault(key, [])
        except TypeError:
            raise InvalidArgumentError(f"group key must be hashable, got {type(key).__name__}") from None
        bucket.append(element_selector(item) if element_selector is not None else item)

    logger.debug("group_by produced %d group(s) from %d element(s)", len(groups), len(data))
    return groups


class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K],
                 element_selector: Optional[Selector] = None) -> Dict[K, List[Any]]:
        """group elements by a key"""
        return group_by(self._enumerable._get_data(), key_selector, element_selector)
