"""
seqops: linq-style sequence operations for python.

every operation is available as a free function over any ordered iterable
(returning a new list, a scalar or a dict), and fluently through `Enumerable`:

    >>> from seqops import P, where
    >>> where([1, 2, 3, 4], lambda x: x % 2 == 0)
    [2, 4]
    >>> P([3, 1, 2]).order_by(lambda x: x).take(2).to.list()
    [1, 2]
"""
import logging

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    seqops,
    P,
)

# expose the free functions
from .extensions.core import (
    where,
    select,
    order_by,
    order_by_descending,
    take,
    skip,
    reverse,
    default_if_empty,
    of_type,
    shuffle,
)
from .extensions.terminal import (
    first,
    first_or_default,
    last,
    last_or_default,
    single,
    single_or_default,
    count,
    any,
    all,
    aggregate,
    sum,
    max,
    min,
)
from .extensions.set import distinct, concat
from .extensions.grouping import group_by
from .extensions.join import join

# expose supporting types, errors and configuration
from .types import ABSENT
from .errors import (
    SequenceError,
    InvalidArgumentError,
    EmptySequenceError,
    MultipleMatchesError,
)
from .config import SeqOpsConfig, configure, get_config, reset_config

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does; the builtin-shadowing names are left out
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "seqops",
    "P",
    "where",
    "select",
    "order_by",
    "order_by_descending",
    "take",
    "skip",
    "reverse",
    "default_if_empty",
    "of_type",
    "shuffle",
    "first",
    "first_or_default",
    "last",
    "last_or_default",
    "single",
    "single_or_default",
    "count",
    "aggregate",
    "distinct",
    "concat",
    "group_by",
    "join",
    "ABSENT",
    "SequenceError",
    "InvalidArgumentError",
    "EmptySequenceError",
    "MultipleMatchesError",
    "SeqOpsConfig",
    "configure",
    "get_config",
    "reset_config",
]
