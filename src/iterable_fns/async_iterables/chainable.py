"""
Fluent wrapper over the asynchronous catalogue.
"""

from typing import (
    Any, AsyncIterable, AsyncIterator, Awaitable, Callable, Dict, List, Optional, Tuple, TypeVar
)

from iterable_fns.async_iterables import operators, terminals
from iterable_fns.async_iterables.operators import AnyIterable
from iterable_fns.ranges import Number, init_infinite_raw, init_raw
from iterable_fns.util import as_async_iterable

T = TypeVar('T')
U = TypeVar('U')
Key = TypeVar('Key')


class ChainableAsyncIterable(AsyncIterable[T]):
    """
    A lazy, chainable view over an async iterable.

    Lazy methods return a new ChainableAsyncIterable; terminal methods return
    a coroutine producing their result, so they are awaited:

        total = await achain(source()).filter(is_valid).map(score).sum()
    """

    def __init__(self, source: AnyIterable):
        """
        Initialize chainable async iterable.

        Args:
            source: Any async iterable, or a plain iterable to adapt
        """
        self._source = as_async_iterable(source)

    def __aiter__(self) -> AsyncIterator[T]:
        return self._source.__aiter__()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"

    # Transformation operators

    def map(self, mapping: Callable[[T, int], Any]) -> 'ChainableAsyncIterable[U]':
        """Apply mapping to each element, awaiting its result if needed."""
        return ChainableAsyncIterable(operators.map(self._source, mapping))

    def filter(self, predicate: Callable[[T, int], Any]) -> 'ChainableAsyncIterable[T]':
        """Keep only elements matching predicate."""
        return ChainableAsyncIterable(operators.filter(self._source, predicate))

    def choose(self, chooser: Callable[[T, int], Any]) -> 'ChainableAsyncIterable[U]':
        """Map each element, dropping those mapped to None."""
        return ChainableAsyncIterable(operators.choose(self._source, chooser))

    def collect(self, mapping: Callable[[T, int], Any]) -> 'ChainableAsyncIterable[U]':
        """Map each element to a sync or async sequence and flatten."""
        return ChainableAsyncIterable(operators.collect(self._source, mapping))

    def append(self, second: AnyIterable) -> 'ChainableAsyncIterable[T]':
        """Follow the elements of this sequence with the elements of second."""
        return ChainableAsyncIterable(operators.append(self._source, second))

    def distinct(self) -> 'ChainableAsyncIterable[T]':
        """Remove duplicate elements."""
        return ChainableAsyncIterable(operators.distinct(self._source))

    def distinct_by(self, selector: Callable[[T, int], Any]) -> 'ChainableAsyncIterable[T]':
        """Remove elements whose key was already seen."""
        return ChainableAsyncIterable(operators.distinct_by(self._source, selector))

    def pairwise(self) -> 'ChainableAsyncIterable[Tuple[T, T]]':
        """Pair each element with its predecessor."""
        return ChainableAsyncIterable(operators.pairwise(self._source))

    def skip(self, count: int) -> 'ChainableAsyncIterable[T]':
        """Skip first n elements."""
        return ChainableAsyncIterable(operators.skip(self._source, count))

    def take(self, count: int) -> 'ChainableAsyncIterable[T]':
        """Take first n elements."""
        return ChainableAsyncIterable(operators.take(self._source, count))

    # Terminal operators

    def to_list(self) -> Awaitable[List[T]]:
        """Collect all elements into a list."""
        return terminals.to_list(self._source)

    def exists(self, predicate: Callable[[T, int], Any]) -> Awaitable[bool]:
        return terminals.exists(self._source, predicate)

    def every(self, predicate: Callable[[T, int], Any]) -> Awaitable[bool]:
        return terminals.every(self._source, predicate)

    def get(self, predicate: Callable[[T, int], Any]) -> Awaitable[T]:
        """First element matching predicate; raises ElementNotFoundError if none does."""
        return terminals.get(self._source, predicate)

    def find(self, predicate: Callable[[T, int], Any]) -> Awaitable[Optional[T]]:
        """First element matching predicate, or None."""
        return terminals.find(self._source, predicate)

    def group_by(self, selector: Callable[[T, int], Any]) -> Awaitable[Dict[Key, List[T]]]:
        """Group elements by key into a dict."""
        return terminals.group_by(self._source, selector)

    def sort(self, selector: Optional[Callable[[T], Any]] = None) -> Awaitable[List[T]]:
        return terminals.sort(self._source, selector)

    def sort_descending(self, selector: Optional[Callable[[T], Any]] = None) -> Awaitable[List[T]]:
        return terminals.sort_descending(self._source, selector)

    def sort_by(self, selector: Callable[[T], Any]) -> Awaitable[List[T]]:
        return terminals.sort_by(self._source, selector)

    def sort_by_descending(self, selector: Callable[[T], Any]) -> Awaitable[List[T]]:
        return terminals.sort_by_descending(self._source, selector)

    def reverse(self) -> Awaitable[List[T]]:
        return terminals.reverse(self._source)

    def sum(self) -> Awaitable[Any]:
        return terminals.sum(self._source)

    def sum_by(self, selector: Callable[[T], Any]) -> Awaitable[Any]:
        return terminals.sum_by(self._source, selector)

    def max(self) -> Awaitable[Any]:
        return terminals.max(self._source)

    def max_by(self, selector: Callable[[T], Any]) -> Awaitable[Any]:
        return terminals.max_by(self._source, selector)

    def min(self) -> Awaitable[Any]:
        return terminals.min(self._source)

    def min_by(self, selector: Callable[[T], Any]) -> Awaitable[Any]:
        return terminals.min_by(self._source, selector)

    def mean(self) -> Awaitable[Any]:
        return terminals.mean(self._source)

    def mean_by(self, selector: Callable[[T], Any]) -> Awaitable[Any]:
        return terminals.mean_by(self._source, selector)

    def count(self) -> Awaitable[int]:
        return terminals.count(self._source)

    def length(self) -> Awaitable[int]:
        return terminals.count(self._source)

    # Factory methods

    @classmethod
    def from_iterable(cls, iterable: AnyIterable) -> 'ChainableAsyncIterable[T]':
        """Create chainable async iterable from a sync or async iterable."""
        return cls(iterable)


def achain(source: AnyIterable) -> ChainableAsyncIterable[T]:
    """Create a new chainable async iterable from an existing source."""
    return ChainableAsyncIterable(source)


def ainit(options: Any = None, **kwargs: Any) -> ChainableAsyncIterable[Number]:
    """
    Generates a chainable async iterable of the specified number sequence.

    Raises:
        InfiniteSequenceError: When the options describe a sequence that would
            never complete; use ainit_infinite for that.
    """
    return ChainableAsyncIterable(init_raw(options, **kwargs))


def ainit_infinite(options: Optional[Dict[str, Number]] = None, *,
                   start: Optional[Number] = None,
                   increment: Optional[Number] = None) -> ChainableAsyncIterable[Number]:
    """Generates a chainable async iterable that counts forever."""
    return ChainableAsyncIterable(init_infinite_raw(options, start=start, increment=increment))
