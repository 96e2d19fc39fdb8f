from __future__ import annotations
import builtins
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..errors import EmptySequenceError, MultipleMatchesError
from .._validation import as_list, bind, require_callable

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

# count, any, all, sum, max and min shadow the builtins in this module; use builtins.<name>


def _matcher(predicate: Optional[Predicate]) -> Optional[Callable[..., bool]]:
    if predicate is None: return None
    require_callable(predicate, "predicate")
    return bind(predicate, 3)


def _find_first(data: List[T], predicate: Optional[Predicate]) -> Tuple[bool, Any]:
    test = _matcher(predicate)
    for index, item in enumerate(data):
        if test is None or test(item, index, data):
            return True, item
    return False, ABSENT


def _find_last(data: List[T], predicate: Optional[Predicate]) -> Tuple[bool, Any]:
    test = _matcher(predicate)
    for index in builtins.range(len(data) - 1, -1, -1):
        item = data[index]
        if test is None or test(item, index, data):
            return True, item
    return False, ABSENT


def _find_single(data: List[T], predicate: Optional[Predicate]) -> Tuple[int, Any]:
    """(number of matches capped at 2, the match)"""
    test = _matcher(predicate)
    found, match = 0, ABSENT
    for index, item in enumerate(data):
        if test is None or test(item, index, data):
            found += 1
            if found > 1:
                return found, ABSENT
            match = item
    return found, match


# --- element lookup ---

def first(source: Iterable[T], predicate: Optional[Predicate] = None) -> Union[T, Any]:
    """first element satisfying predicate (or the first element); ABSENT when there is none"""
    return _find_first(as_list(source), predicate)[1]


def first_or_default(source: Iterable[T], predicate: Optional[Predicate] = None,
                     default: Optional[T] = None) -> Optional[T]:
    """
    like first(), but returns default when nothing matches.
    the default replaces a missing element only, never a found element that happens to be falsy.
    """
    found, item = _find_first(as_list(source), predicate)
    return item if found else default


def last(source: Iterable[T], predicate: Optional[Predicate] = None) -> Union[T, Any]:
    """last element satisfying predicate (or the last element); ABSENT when there is none"""
    return _find_last(as_list(source), predicate)[1]


def last_or_default(source: Iterable[T], predicate: Optional[Predicate] = None,
                    default: Optional[T] = None) -> Optional[T]:
    found, item = _find_last(as_list(source), predicate)
    return item if found else default


def single(source: Iterable[T], predicate: Optional[Predicate] = None) -> Union[T, Any]:
    """
    the one element satisfying predicate.
    returns ABSENT for no match and raises MultipleMatchesError for more than one.
    """
    found, item = _find_single(as_list(source), predicate)
    if found > 1: raise MultipleMatchesError()
    return item


def single_or_default(source: Iterable[T], predicate: Optional[Predicate] = None,
                      default: Optional[T] = None) -> Optional[T]:
    """the one matching element, or default for zero or several matches"""
    found, item = _find_single(as_list(source), predicate)
    return item if found == 1 else default


# --- quantifiers ---

def count(source: Iterable[T], predicate: Optional[Predicate] = None) -> int:
    """count elements"""
    data = as_list(source)
    test = _matcher(predicate)
    if test is None: return len(data)
    return builtins.sum(1 for index, item in enumerate(data) if test(item, index, data))


def any(source: Iterable[T], predicate: Optional[Predicate] = None) -> bool:
    """check if any element satisfies condition"""
    data = as_list(source)
    test = _matcher(predicate)
    if test is None: return len(data) > 0
    return builtins.any(test(item, index, data) for index, item in enumerate(data))


def all(source: Iterable[T], predicate: Predicate) -> bool:
    """check if all elements satisfy condition"""
    data = as_list(source)
    require_callable(predicate, "predicate")
    test = bind(predicate, 3)
    return builtins.all(test(item, index, data) for index, item in enumerate(data))


# --- aggregation ---

def aggregate(source: Iterable[T], accumulator: Accumulator, seed: U,
              result_selector: Optional[Selector] = None) -> Any:
    """left fold: acc = accumulator(acc, element[, index[, sequence]]) starting from seed"""
    data = as_list(source)
    require_callable(accumulator, "accumulator")
    if result_selector is not None: require_callable(result_selector, "result_selector")
    step = bind(accumulator, 4, fallback=2)
    acc = seed
    for index, item in enumerate(data):
        acc = step(acc, item, index, data)
    return result_selector(acc) if result_selector is not None else acc


def _keys(data: List[T], key_selector: Optional[KeySelector[T, K]]) -> List[Any]:
    if key_selector is None: return data
    require_callable(key_selector, "key_selector")
    return [key_selector(item) for item in data]


def sum(source: Iterable[T], key_selector: Optional[KeySelector[T, Any]] = None) -> Any:
    """arithmetic sum of the selected keys; 0 for an empty sequence"""
    return builtins.sum(_keys(as_list(source), key_selector), 0)


def max(source: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None) -> K:
    """largest selected key"""
    keys = _keys(as_list(source), key_selector)
    if not keys: raise EmptySequenceError("max")
    return builtins.max(keys)


def min(source: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None) -> K:
    """smallest selected key"""
    keys = _keys(as_list(source), key_selector)
    if not keys: raise EmptySequenceError("min")
    return builtins.min(keys)


class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    # --- materializers ---

    def list(self) -> List[T]:
        """convert to list"""
        return builtins.list(self._enumerable._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return builtins.set(self._enumerable._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector] = None) -> Dict[K, V]:
        """convert to dictionary; later elements win on duplicate keys"""
        require_callable(key_selector, "key_selector")
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable._get_data()}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    # --- terminals ---

    def count(self, predicate: Optional[Predicate] = None) -> int:
        return count(self._enumerable._get_data(), predicate)

    def any(self, predicate: Optional[Predicate] = None) -> bool:
        return any(self._enumerable._get_data(), predicate)

    def all(self, predicate: Predicate) -> bool:
        return all(self._enumerable._get_data(), predicate)

    def first(self, predicate: Optional[Predicate] = None) -> Union[T, Any]:
        return first(self._enumerable._get_data(), predicate)

    def first_or_default(self, predicate: Optional[Predicate] = None,
                         default: Optional[T] = None) -> Optional[T]:
        return first_or_default(self._enumerable._get_data(), predicate, default)

    def last(self, predicate: Optional[Predicate] = None) -> Union[T, Any]:
        return last(self._enumerable._get_data(), predicate)

    def last_or_default(self, predicate: Optional[Predicate] = None,
                        default: Optional[T] = None) -> Optional[T]:
        return last_or_default(self._enumerable._get_data(), predicate, default)

    def single(self, predicate: Optional[Predicate] = None) -> Union[T, Any]:
        return single(self._enumerable._get_data(), predicate)

    def single_or_default(self, predicate: Optional[Predicate] = None,
                          default: Optional[T] = None) -> Optional[T]:
        return single_or_default(self._enumerable._get_data(), predicate, default)

    def aggregate(self, accumulator: Accumulator, seed: U,
                  result_selector: Optional[Selector] = None) -> Any:
        """applies accumulator function over sequence"""
        return aggregate(self._enumerable._get_data(), accumulator, seed, result_selector)

    def sum(self, key_selector: Optional[KeySelector[T, Any]] = None) -> Any:
        return sum(self._enumerable._get_data(), key_selector)

    def max(self, key_selector: Optional[KeySelector[T, K]] = None) -> K:
        return max(self._enumerable._get_data(), key_selector)

    def min(self, key_selector: Optional[KeySelector[T, K]] = None) -> K:
        return min(self._enumerable._get_data(), key_selector)
