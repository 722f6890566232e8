"""
Eager operations over synchronous iterables.

Every function here consumes its source (fully, or until it has an answer)
and returns a plain value.
"""

import logging
import operator
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar

from iterable_fns.errors import ElementNotFoundError, EmptySequenceError
from iterable_fns.ordering import ascending, by_descending, descending, order_keyed
from iterable_fns.util import identity, with_index

logger = logging.getLogger(__name__)

T = TypeVar('T')
Key = TypeVar('Key')


def to_list(source: Iterable[T]) -> List[T]:
    """
    Creates a list from the source iterable.

    >>> to_list(iter([1, 2]))
    [1, 2]
    """
    return [item for item in source]


def exists(source: Iterable[T], predicate: Callable[[T, int], bool]) -> bool:
    """
    Tests if any element of the collection satisfies the given predicate.
    Stops pulling as soon as one does.
    """
    predicate = with_index(predicate)
    for index, item in enumerate(source):
        if predicate(item, index):
            return True
    return False


def every(source: Iterable[T], predicate: Callable[[T, int], bool]) -> bool:
    """
    Tests if every element of the collection satisfies the given predicate.
    Stops pulling at the first element that does not.
    """
    predicate = with_index(predicate)
    for index, item in enumerate(source):
        if not predicate(item, index):
            return False
    return True


def get(source: Iterable[T], predicate: Callable[[T, int], bool]) -> T:
    """
    Returns the first element for which predicate returns true.

    Raises:
        ElementNotFoundError: If the source is exhausted without a match
    """
    predicate = with_index(predicate)
    for index, item in enumerate(source):
        if predicate(item, index):
            return item
    raise ElementNotFoundError()


def find(source: Iterable[T], predicate: Callable[[T, int], bool]) -> Optional[T]:
    """Returns the first element for which predicate returns true, otherwise None."""
    predicate = with_index(predicate)
    for index, item in enumerate(source):
        if predicate(item, index):
            return item
    return None


def group_by(source: Iterable[T], selector: Callable[[T, int], Key]) -> Dict[Key, List[T]]:
    """
    Group elements by the key selector returns for them.

    Args:
        source: Iterable of items to group
        selector: Function of (item, index) returning the group key

    Returns:
        Dictionary mapping keys, in order of first appearance, to lists of
        items in source order
    """
    selector = with_index(selector)
    groups: Dict[Key, List[T]] = {}
    index = -1
    for index, item in enumerate(source):
        key = selector(item, index)
        group = groups.get(key)
        if group is None:
            groups[key] = [item]
        else:
            group.append(item)
    logger.debug("group_by consumed %d items into %d groups", index + 1, len(groups))
    return groups


def _sort(source: Iterable[T], selector: Callable[[T], Any], comparator, reverse: bool) -> List[T]:
    keyed = [(selector(item), item) for item in source]
    logger.debug("Sorting %d items", len(keyed))
    return order_keyed(keyed, comparator, reverse)


def sort(source: Iterable[T], selector: Optional[Callable[[T], Any]] = None) -> List[T]:
    """
    Returns the elements ordered by the selected key, ascending.
    If no selector is given the elements are compared directly.

    >>> sort([21, 2, 18])
    [2, 18, 21]
    """
    return _sort(source, selector or identity, ascending, False)


def sort_descending(source: Iterable[T], selector: Optional[Callable[[T], Any]] = None) -> List[T]:
    """
    Returns the elements ordered by the selected key, descending.
    If no selector is given the elements are compared directly.

    >>> sort_descending([21, 2, 18])
    [21, 18, 2]
    """
    return _sort(source, selector or identity, descending, True)


def sort_by(source: Iterable[T], selector: Callable[[T], Any]) -> List[T]:
    """
    Returns the elements ordered ascending by the key selector returns.

    >>> sort_by(['Cat', 'amy', 'BOB'], str.lower)
    ['amy', 'BOB', 'Cat']
    """
    return _sort(source, selector, ascending, False)


def sort_by_descending(source: Iterable[T], selector: Callable[[T], Any]) -> List[T]:
    """
    Returns the elements ordered descending by the key selector returns.

    >>> sort_by_descending(['Cat', 'amy', 'BOB'], str.lower)
    ['Cat', 'BOB', 'amy']
    """
    return _sort(source, selector, by_descending, True)


def reverse(source: Iterable[T]) -> List[T]:
    """
    Returns the elements of the source in reverse order.

    >>> reverse(['cat', 'amy', 'bob'])
    ['bob', 'amy', 'cat']
    """
    items = to_list(source)
    items.reverse()
    return items


def sum(source: Iterable[Any]) -> Any:
    """Returns the sum of the elements, 0 for an empty source."""
    return sum_by(source, identity)


def sum_by(source: Iterable[T], selector: Callable[[T], Any]) -> Any:
    """Returns the sum of the values selector returns for each element."""
    total = 0
    for item in source:
        total += selector(item)
    return total


def _extremum(source: Iterable[T], selector: Callable[[T], Any], better, operation: str) -> Any:
    found = False
    best = None
    for item in source:
        value = selector(item)
        if not found or better(value, best):
            best = value
            found = True
    if not found:
        logger.debug("%s called on an empty collection", operation)
        raise EmptySequenceError(operation)
    return best


def max(source: Iterable[Any]) -> Any:
    """
    Returns the largest element.

    Raises:
        EmptySequenceError: If the source is empty
    """
    return _extremum(source, identity, operator.gt, "max")


def max_by(source: Iterable[T], selector: Callable[[T], Any]) -> Any:
    """
    Returns the largest value selector returns for any element.

    Raises:
        EmptySequenceError: If the source is empty
    """
    return _extremum(source, selector, operator.gt, "max")


def min(source: Iterable[Any]) -> Any:
    """
    Returns the smallest element.

    Raises:
        EmptySequenceError: If the source is empty
    """
    return _extremum(source, identity, operator.lt, "min")


def min_by(source: Iterable[T], selector: Callable[[T], Any]) -> Any:
    """
    Returns the smallest value selector returns for any element.

    Raises:
        EmptySequenceError: If the source is empty
    """
    return _extremum(source, selector, operator.lt, "min")


def mean(source: Iterable[Any]) -> Any:
    """
    Returns the arithmetic mean of the elements.

    Raises:
        EmptySequenceError: If the source is empty
    """
    return mean_by(source, identity)


def mean_by(source: Iterable[T], selector: Callable[[T], Any]) -> Any:
    """
    Returns the arithmetic mean of the values selector returns.

    Raises:
        EmptySequenceError: If the source is empty
    """
    total = 0
    count = 0
    for item in source:
        total += selector(item)
        count += 1
    if count == 0:
        logger.debug("mean called on an empty collection")
        raise EmptySequenceError("mean")
    return total / count


def count(source: Iterable[Any]) -> int:
    """Returns the number of elements in the source."""
    tally = 0
    for _ in source:
        tally += 1
    return tally


length = count
