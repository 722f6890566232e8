"""
Comparators and the sort routine shared by both catalogues.

The comparators never report two keys as equal. Elements with equal keys are
therefore not guaranteed to keep their source order; set
``IterableFnsConfig.sort_strategy`` to ``SortStrategy.STABLE`` for a stable
key sort instead.
"""

from functools import cmp_to_key
from operator import itemgetter
from typing import Any, Callable, List, Tuple, TypeVar

from iterable_fns.config import config, SortStrategy

T = TypeVar('T')

Comparator = Callable[[Any, Any], int]


def ascending(a: Any, b: Any) -> int:
    """Order used by ``sort`` and ``sort_by``."""
    return 1 if a > b else -1


def descending(a: Any, b: Any) -> int:
    """Order used by ``sort_descending``."""
    return 1 if a < b else -1


def by_descending(a: Any, b: Any) -> int:
    """Order used by ``sort_by_descending``."""
    return -1 if a > b else 1


def order_keyed(keyed: List[Tuple[Any, T]], comparator: Comparator, reverse: bool) -> List[T]:
    """
    Sort (key, element) pairs and return the elements.

    Args:
        keyed: Pairs of precomputed sort key and element, in source order
        comparator: One of the comparators above, applied to keys
        reverse: Whether the comparator orders descending; only consulted by
            the stable strategy

    Returns:
        Sorted list of elements
    """
    if len(keyed) < 2:
        return [item for _, item in keyed]
    if config.sort_strategy is SortStrategy.STABLE:
        keyed.sort(key=itemgetter(0), reverse=reverse)
    else:
        keyed.sort(key=cmp_to_key(lambda a, b: comparator(a[0], b[0])))
    return [item for _, item in keyed]
