import inspect
from collections.abc import Iterable, Mapping
from typing import Any, Callable, List, Optional

from .errors import InvalidArgumentError

_TEXT_TYPES = (str, bytes, bytearray)


def require_sequence(source: Any, name: str = "source") -> None:
    """accept any ordered iterable except text and mappings"""
    if source is None:
        raise InvalidArgumentError(f"{name} must be a sequence, got None")
    if isinstance(source, _TEXT_TYPES) or isinstance(source, Mapping) or not isinstance(source, Iterable):
        raise InvalidArgumentError(f"{name} must be a sequence, got {type(source).__name__}")


def as_list(source: Any, name: str = "source") -> List[Any]:
    """materialize a sequence argument into a private list"""
    require_sequence(source, name)
    return list(source)


def require_callable(func: Any, name: str) -> None:
    if not callable(func):
        raise InvalidArgumentError(f"{name} must be callable, got {type(func).__name__}")


def require_count(count: Any, name: str = "count") -> int:
    # bool is an int subclass but never a meaningful count
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(count).__name__}")
    if count < 0:
        raise InvalidArgumentError(f"{name} cannot be negative, got {count}")
    return count


def _positional_arity(func: Callable) -> Optional[int]:
    """required positional parameters; None when *args takes everything, -1 when uninspectable"""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return -1

    arity, optional = 0, 0
    for param in signature.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return None
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            if param.default is param.empty:
                arity += 1
            else:
                optional += 1
    # str, bool and friends take the element through an optional parameter
    return 1 if arity == 0 and optional else arity


def bind(func: Callable, max_args: int, fallback: int = 1) -> Callable:
    """
    wrap a callback so it can always be called with max_args positional arguments.
    the callback receives only as many leading arguments as it declares, so
    `lambda x: ...` and `lambda x, i: ...` both work where (element, index, sequence)
    is offered. callables without an inspectable signature get `fallback` arguments.
    """
    arity = _positional_arity(func)
    if arity == -1:
        arity = fallback
    if arity is None or arity >= max_args:
        return func
    return lambda *args: func(*args[:arity])
