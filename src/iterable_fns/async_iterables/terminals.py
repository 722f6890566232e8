"""
Eager operations over asynchronous iterables.

Every function here is a coroutine function: it pulls from its source with
``async for`` and awaits any awaitable a callback returns.
"""

import logging
import operator
from typing import Any, AsyncIterable, Callable, Dict, Iterable, List, Optional, TypeVar, Union

from iterable_fns.errors import ElementNotFoundError, EmptySequenceError
from iterable_fns.ordering import ascending, by_descending, descending, order_keyed
from iterable_fns.util import as_async_iterable, identity, release, resolve, with_index

logger = logging.getLogger(__name__)

T = TypeVar('T')
Key = TypeVar('Key')

AnyIterable = Union[Iterable[T], AsyncIterable[T]]

_MISSING = object()


async def to_list(source: AnyIterable) -> List[T]:
    """Creates a list from the source async iterable."""
    return [item async for item in as_async_iterable(source)]


async def exists(source: AnyIterable, predicate: Callable[[T, int], Any]) -> bool:
    """Tests if any element satisfies predicate, stopping at the first that does."""
    predicate = with_index(predicate)
    source = as_async_iterable(source)
    iterator = source.__aiter__()
    index = 0
    try:
        async for item in iterator:
            if await resolve(predicate(item, index)):
                return True
            index += 1
    finally:
        await release(iterator, source)
    return False


async def every(source: AnyIterable, predicate: Callable[[T, int], Any]) -> bool:
    """Tests if every element satisfies predicate, stopping at the first that does not."""
    predicate = with_index(predicate)
    source = as_async_iterable(source)
    iterator = source.__aiter__()
    index = 0
    try:
        async for item in iterator:
            if not await resolve(predicate(item, index)):
                return False
            index += 1
    finally:
        await release(iterator, source)
    return True


async def get(source: AnyIterable, predicate: Callable[[T, int], Any]) -> T:
    """
    Returns the first element for which predicate returns true.

    Raises:
        ElementNotFoundError: If the source is exhausted without a match
    """
    found = await _first(source, predicate)
    if found is _MISSING:
        raise ElementNotFoundError()
    return found


async def find(source: AnyIterable, predicate: Callable[[T, int], Any]) -> Optional[T]:
    """Returns the first element for which predicate returns true, otherwise None."""
    found = await _first(source, predicate)
    return None if found is _MISSING else found


async def _first(source: AnyIterable, predicate: Callable[[T, int], Any]) -> Any:
    predicate = with_index(predicate)
    source = as_async_iterable(source)
    iterator = source.__aiter__()
    index = 0
    try:
        async for item in iterator:
            if await resolve(predicate(item, index)):
                return item
            index += 1
    finally:
        await release(iterator, source)
    return _MISSING


async def group_by(source: AnyIterable, selector: Callable[[T, int], Any]) -> Dict[Key, List[T]]:
    """
    Group elements by the key selector returns for them.

    Args:
        source: Sync or async iterable of items to group
        selector: Function of (item, index) returning the group key, or an
            awaitable of it

    Returns:
        Dictionary mapping keys, in order of first appearance, to lists of
        items in source order
    """
    selector = with_index(selector)
    groups: Dict[Key, List[T]] = {}
    index = 0
    async for item in as_async_iterable(source):
        key = await resolve(selector(item, index))
        group = groups.get(key)
        if group is None:
            groups[key] = [item]
        else:
            group.append(item)
        index += 1
    logger.debug("group_by consumed %d items into %d groups", index, len(groups))
    return groups


async def _sort(source: AnyIterable, selector: Callable[[T], Any], comparator, reverse: bool) -> List[T]:
    keyed = [(await resolve(selector(item)), item) async for item in as_async_iterable(source)]
    logger.debug("Sorting %d items", len(keyed))
    return order_keyed(keyed, comparator, reverse)


async def sort(source: AnyIterable, selector: Optional[Callable[[T], Any]] = None) -> List[T]:
    """
    Returns the elements ordered by the selected key, ascending.
    If no selector is given the elements are compared directly.
    """
    return await _sort(source, selector or identity, ascending, False)


async def sort_descending(source: AnyIterable, selector: Optional[Callable[[T], Any]] = None) -> List[T]:
    """
    Returns the elements ordered by the selected key, descending.
    If no selector is given the elements are compared directly.
    """
    return await _sort(source, selector or identity, descending, True)


async def sort_by(source: AnyIterable, selector: Callable[[T], Any]) -> List[T]:
    """Returns the elements ordered ascending by the key selector returns."""
    return await _sort(source, selector, ascending, False)


async def sort_by_descending(source: AnyIterable, selector: Callable[[T], Any]) -> List[T]:
    """Returns the elements ordered descending by the key selector returns."""
    return await _sort(source, selector, by_descending, True)


async def reverse(source: AnyIterable) -> List[T]:
    """Returns the elements of the source in reverse order."""
    items = await to_list(source)
    items.reverse()
    return items


async def sum(source: AnyIterable) -> Any:
    """Returns the sum of the elements, 0 for an empty source."""
    return await sum_by(source, identity)


async def sum_by(source: AnyIterable, selector: Callable[[T], Any]) -> Any:
    """Returns the sum of the values selector returns for each element."""
    total = 0
    async for item in as_async_iterable(source):
        total += await resolve(selector(item))
    return total


async def _extremum(source: AnyIterable, selector: Callable[[T], Any], better, operation: str) -> Any:
    found = False
    best = None
    async for item in as_async_iterable(source):
        value = await resolve(selector(item))
        if not found or better(value, best):
            best = value
            found = True
    if not found:
        logger.debug("%s called on an empty collection", operation)
        raise EmptySequenceError(operation)
    return best


async def max(source: AnyIterable) -> Any:
    """
    Returns the largest element.

    Raises:
        EmptySequenceError: If the source is empty
    """
    return await _extremum(source, identity, operator.gt, "max")


async def max_by(source: AnyIterable, selector: Callable[[T], Any]) -> Any:
    """
    Returns the largest value selector returns for any element.

    Raises:
        EmptySequenceError: If the source is empty
    """
    return await _extremum(source, selector, operator.gt, "max")


async def min(source: AnyIterable) -> Any:
    """
    Returns the smallest element.

    Raises:
        EmptySequenceError: If the source is empty
    """
    return await _extremum(source, identity, operator.lt, "min")


async def min_by(source: AnyIterable, selector: Callable[[T], Any]) -> Any:
    """
    Returns the smallest value selector returns for any element.

    Raises:
        EmptySequenceError: If the source is empty
    """
    return await _extremum(source, selector, operator.lt, "min")


async def mean(source: AnyIterable) -> Any:
    """
    Returns the arithmetic mean of the elements.

    Raises:
        EmptySequenceError: If the source is empty
    """
    return await mean_by(source, identity)


async def mean_by(source: AnyIterable, selector: Callable[[T], Any]) -> Any:
    """
    Returns the arithmetic mean of the values selector returns.

    Raises:
        EmptySequenceError: If the source is empty
    """
    total = 0
    count = 0
    async for item in as_async_iterable(source):
        total += await resolve(selector(item))
        count += 1
    if count == 0:
        logger.debug("mean called on an empty collection")
        raise EmptySequenceError("mean")
    return total / count


async def count(source: AnyIterable) -> int:
    """Returns the number of elements in the source."""
    tally = 0
    async for _ in as_async_iterable(source):
        tally += 1
    return tally


length = count
