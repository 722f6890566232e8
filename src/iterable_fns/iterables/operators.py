"""
Lazy transform stages over synchronous iterables.

Each stage is bound to its upstream when constructed and does nothing until
it is iterated. Iterating a stage again starts a new pull chain with fresh
state; when the upstream is a one-shot iterator the second pass is empty.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, TypeVar

from iterable_fns.util import SeenSet, with_index

T = TypeVar('T')
U = TypeVar('U')
Key = TypeVar('Key')


class StreamOperator(ABC, Iterable[T]):
    """Base class for stream operators."""

    def __init__(self, source: Iterable[Any]):
        self.source = source

    def __iter__(self) -> Iterator[T]:
        return self.apply(iter(self.source))

    @abstractmethod
    def apply(self, iterator: Iterator[Any]) -> Iterator[T]:
        """Apply operator to iterator."""
        pass


class MapOperator(StreamOperator[U]):
    """Map each element to a new value."""

    def __init__(self, source: Iterable[T], mapping: Callable[[T, int], U]):
        super().__init__(source)
        self.mapping = with_index(mapping)

    def apply(self, iterator: Iterator[T]) -> Iterator[U]:
        for index, item in enumerate(iterator):
            yield self.mapping(item, index)


class FilterOperator(StreamOperator[T]):
    """Filter elements by predicate."""

    def __init__(self, source: Iterable[T], predicate: Callable[[T, int], bool]):
        super().__init__(source)
        self.predicate = with_index(predicate)

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        for index, item in enumerate(iterator):
            if self.predicate(item, index):
                yield item


class ChooseOperator(StreamOperator[U]):
    """Map and filter in one step; a ``None`` result drops the element."""

    def __init__(self, source: Iterable[T], chooser: Callable[[T, int], Optional[U]]):
        super().__init__(source)
        self.chooser = with_index(chooser)

    def apply(self, iterator: Iterator[T]) -> Iterator[U]:
        for index, item in enumerate(iterator):
            chosen = self.chooser(item, index)
            if chosen is not None:
                yield chosen


class CollectOperator(StreamOperator[U]):
    """Map each element to a sequence and flatten the results in order."""

    def __init__(self, source: Iterable[T], mapping: Callable[[T, int], Iterable[U]]):
        super().__init__(source)
        self.mapping = with_index(mapping)

    def apply(self, iterator: Iterator[T]) -> Iterator[U]:
        for index, item in enumerate(iterator):
            yield from self.mapping(item, index)


class AppendOperator(StreamOperator[T]):
    """Yield every element of the source, then every element of second."""

    def __init__(self, source: Iterable[T], second: Iterable[T]):
        super().__init__(source)
        self.second = second

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        yield from iterator
        yield from self.second


class ConcatOperator(StreamOperator[T]):
    """Flatten a sequence of sequences."""

    def apply(self, iterator: Iterator[Iterable[T]]) -> Iterator[T]:
        for source in iterator:
            yield from source


class DistinctOperator(StreamOperator[T]):
    """Remove duplicate elements, keeping the first occurrence."""

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        seen = SeenSet()
        for item in iterator:
            if seen.add(item):
                yield item


class DistinctByOperator(StreamOperator[T]):
    """Remove elements whose selected key was already produced."""

    def __init__(self, source: Iterable[T], selector: Callable[[T, int], Key]):
        super().__init__(source)
        self.selector = with_index(selector)

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        seen = SeenSet()
        for index, item in enumerate(iterator):
            if seen.add(self.selector(item, index)):
                yield item


class SkipOperator(StreamOperator[T]):
    """Skip first n elements."""

    def __init__(self, source: Iterable[T], count: int):
        super().__init__(source)
        self.count = count

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        skipped = 0
        for item in iterator:
            if skipped >= self.count:
                yield item
            else:
                skipped += 1


class TakeOperator(StreamOperator[T]):
    """Take first n elements without pulling the one after them."""

    def __init__(self, source: Iterable[T], count: int):
        super().__init__(source)
        self.count = count

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        if self.count <= 0:
            return
        taken = 0
        for item in iterator:
            yield item
            taken += 1
            if taken >= self.count:
                return


class PairwiseOperator(StreamOperator[Tuple[T, T]]):
    """Yield each element together with its predecessor."""

    def apply(self, iterator: Iterator[T]) -> Iterator[Tuple[T, T]]:
        started = False
        previous = None
        for item in iterator:
            if started:
                yield previous, item
            else:
                started = True
            previous = item


def map(source: Iterable[T], mapping: Callable[[T, int], U]) -> Iterable[U]:
    """
    Creates a new iterable whose elements are the results of applying mapping
    to each element of the source.

    >>> list(map([1, 2, 3], lambda x: x * 2))
    [2, 4, 6]
    """
    return MapOperator(source, mapping)


def filter(source: Iterable[T], predicate: Callable[[T, int], bool]) -> Iterable[T]:
    """
    Returns a new iterable containing only the elements for which predicate
    returns true.

    >>> list(filter([1, 2, 3, 4], lambda x: x % 2 == 0))
    [2, 4]
    """
    return FilterOperator(source, predicate)


def choose(source: Iterable[T], chooser: Callable[[T, int], Optional[U]]) -> Iterable[U]:
    """
    Applies chooser to each element and yields every result that is not None.
    This can be thought of as doing both a filter and a map at the same time.

    >>> list(choose([1, 2, 3], lambda x: x * 2 if x % 2 == 1 else None))
    [2, 6]
    """
    return ChooseOperator(source, chooser)


def collect(source: Iterable[T], mapping: Callable[[T, int], Iterable[U]]) -> Iterable[U]:
    """
    Applies mapping to each element and concatenates all the results.

    >>> list(collect([1, 2], lambda x: [x, x]))
    [1, 1, 2, 2]
    """
    return CollectOperator(source, mapping)


def append(first: Iterable[T], second: Iterable[T]) -> Iterable[T]:
    """
    Wraps the two given iterables as a single concatenated iterable.

    >>> list(append([1, 2], [8, 9]))
    [1, 2, 8, 9]
    """
    return AppendOperator(first, second)


def concat(sources: Iterable[Iterable[T]]) -> Iterable[T]:
    """
    Combines the given sequence of iterables as a single concatenated iterable.

    >>> list(concat([[1, 2], [3], [4, 5]]))
    [1, 2, 3, 4, 5]
    """
    return ConcatOperator(sources)


def distinct(source: Iterable[T]) -> Iterable[T]:
    """
    Returns an iterable with no duplicate entries. Later occurrences of an
    element are discarded.

    >>> list(distinct(['bob', 'cat', 'bob', 'amy']))
    ['bob', 'cat', 'amy']
    """
    return DistinctOperator(source)


def distinct_by(source: Iterable[T], selector: Callable[[T, int], Key]) -> Iterable[T]:
    """
    Returns an iterable with no two elements sharing a key, as returned by
    selector. Later occurrences of a key are discarded.
    """
    return DistinctByOperator(source, selector)


def skip(source: Iterable[T], count: int) -> Iterable[T]:
    """
    Returns the elements of the iterable after a specified count.

    >>> list(skip([1, 2, 3, 4, 5], 2))
    [3, 4, 5]
    """
    return SkipOperator(source, count)


def take(source: Iterable[T], count: int) -> Iterable[T]:
    """
    Returns the elements of the iterable up to a specified count.

    >>> list(take([1, 2, 3, 4], 2))
    [1, 2]
    """
    return TakeOperator(source, count)


def pairwise(source: Iterable[T]) -> Iterable[Tuple[T, T]]:
    """
    Returns an iterable of each element together with its predecessor; the
    first element only appears as the predecessor of the second.

    >>> list(pairwise([1, 2, 3, 4]))
    [(1, 2), (2, 3), (3, 4)]
    """
    return PairwiseOperator(source)
