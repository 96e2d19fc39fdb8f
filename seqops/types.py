from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# callables may also declare (index) and (index, sequence) after the element
Predicate = Callable[..., bool]
Selector = Callable[..., U]
KeySelector = Callable[[T], K]
Accumulator = Callable[..., U]
TypeCheck = Callable[[Any, Any], bool]


class _Absent:
    """marker returned when a search finds no element"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "ABSENT"

    def __reduce__(self): return (_Absent, ())


ABSENT = _Absent()
