"""
Lazy transform stages over asynchronous iterables.

The stages mirror :mod:`iterable_fns.iterables.operators`. Upstream and
nested sequences may be plain or async iterables, and callbacks may return
awaitables, which are awaited before their result is used.
"""

from abc import ABC, abstractmethod
from typing import (
    Any, AsyncIterable, AsyncIterator, Callable, Iterable, Optional, Tuple, TypeVar, Union
)

from iterable_fns.util import SeenSet, aclose, as_async_iterable, release, resolve, with_index

T = TypeVar('T')
U = TypeVar('U')
Key = TypeVar('Key')

AnyIterable = Union[Iterable[T], AsyncIterable[T]]


class AsyncStreamOperator(ABC, AsyncIterable[T]):
    """Base class for async stream operators."""

    def __init__(self, source: AnyIterable):
        self.source = source

    def __aiter__(self) -> AsyncIterator[T]:
        return self._pull(as_async_iterable(self.source))

    async def _pull(self, source: AsyncIterable[Any]) -> AsyncIterator[T]:
        # upstream is closed as soon as this stage stops, not when it is collected
        iterator = source.__aiter__()
        applied = self.apply(iterator)
        try:
            async for item in applied:
                yield item
        finally:
            await aclose(applied)
            await release(iterator, source)

    @abstractmethod
    def apply(self, iterator: AsyncIterator[Any]) -> AsyncIterator[T]:
        """Apply operator to async iterator."""
        pass


class MapOperator(AsyncStreamOperator[U]):
    """Map each element to a new value."""

    def __init__(self, source: AnyIterable, mapping: Callable[[T, int], Any]):
        super().__init__(source)
        self.mapping = with_index(mapping)

    async def apply(self, iterator: AsyncIterator[T]) -> AsyncIterator[U]:
        index = 0
        async for item in iterator:
            yield await resolve(self.mapping(item, index))
            index += 1


class FilterOperator(AsyncStreamOperator[T]):
    """Filter elements by predicate."""

    def __init__(self, source: AnyIterable, predicate: Callable[[T, int], Any]):
        super().__init__(source)
        self.predicate = with_index(predicate)

    async def apply(self, iterator: AsyncIterator[T]) -> AsyncIterator[T]:
        index = 0
        async for item in iterator:
            if await resolve(self.predicate(item, index)):
                yield item
            index += 1


class ChooseOperator(AsyncStreamOperator[U]):
    """Map and filter in one step; a ``None`` result drops the element."""

    def __init__(self, source: AnyIterable, chooser: Callable[[T, int], Any]):
        super().__init__(source)
        self.chooser = with_index(chooser)

    async def apply(self, iterator: AsyncIterator[T]) -> AsyncIterator[U]:
        index = 0
        async for item in iterator:
            chosen = await resolve(self.chooser(item, index))
            if chosen is not None:
                yield chosen
            index += 1


class CollectOperator(AsyncStreamOperator[U]):
    """Map each element to a sync or async sequence and flatten the results in order."""

    def __init__(self, source: AnyIterable, mapping: Callable[[T, int], Any]):
        super().__init__(source)
        self.mapping = with_index(mapping)

    async def apply(self, iterator: AsyncIterator[T]) -> AsyncIterator[U]:
        index = 0
        async for item in iterator:
            children = await resolve(self.mapping(item, index))
            nested = as_async_iterable(children).__aiter__()
            try:
                async for child in nested:
                    yield child
            finally:
                await aclose(nested)
            index += 1


class AppendOperator(AsyncStreamOperator[T]):
    """Yield every element of the source, then every element of second."""

    def __init__(self, source: AnyIterable, second: AnyIterable):
        super().__init__(source)
        self.second = second

    async def apply(self, iterator: AsyncIterator[T]) -> AsyncIterator[T]:
        async for item in iterator:
            yield item
        second = as_async_iterable(self.second).__aiter__()
        try:
            async for item in second:
                yield item
        finally:
            await aclose(second)


class ConcatOperator(AsyncStreamOperator[T]):
    """Flatten a sequence of sequences; either level may be sync or async."""

    async def apply(self, iterator: AsyncIterator[AnyIterable]) -> AsyncIterator[T]:
        async for source in iterator:
            nested = as_async_iterable(source).__aiter__()
            try:
                async for item in nested:
                    yield item
            finally:
                await aclose(nested)


class DistinctOperator(AsyncStreamOperator[T]):
    """Remove duplicate elements, keeping the first occurrence."""

    async def apply(self, iterator: AsyncIterator[T]) -> AsyncIterator[T]:
        seen = SeenSet()
        async for item in iterator:
            if seen.add(item):
                yield item


class DistinctByOperator(AsyncStreamOperator[T]):
    """Remove elements whose selected key was already produced."""

    def __init__(self, source: AnyIterable, selector: Callable[[T, int], Any]):
        super().__init__(source)
        self.selector = with_index(selector)

    async def apply(self, iterator: AsyncIterator[T]) -> AsyncIterator[T]:
        seen = SeenSet()
        index = 0
        async for item in iterator:
            if seen.add(await resolve(self.selector(item, index))):
                yield item
            index += 1


class SkipOperator(AsyncStreamOperator[T]):
    """Skip first n elements."""

    def __init__(self, source: AnyIterable, count: int):
        super().__init__(source)
        self.count = count

    async def apply(self, iterator: AsyncIterator[T]) -> AsyncIterator[T]:
        skipped = 0
        async for item in iterator:
            if skipped >= self.count:
                yield item
            else:
                skipped += 1


class TakeOperator(AsyncStreamOperator[T]):
    """Take first n elements without pulling the one after them."""

    def __init__(self, source: AnyIterable, count: int):
        super().__init__(source)
        self.count = count

    async def apply(self, iterator: AsyncIterator[T]) -> AsyncIterator[T]:
        if self.count <= 0:
            return
        taken = 0
        async for item in iterator:
            yield item
            taken += 1
            if taken >= self.count:
                return


class PairwiseOperator(AsyncStreamOperator[Tuple[T, T]]):
    """Yield each element together with its predecessor."""

    async def apply(self, iterator: AsyncIterator[T]) -> AsyncIterator[Tuple[T, T]]:
        started = False
        previous = None
        async for item in iterator:
            if started:
                yield previous, item
            else:
                started = True
            previous = item


def map(source: AnyIterable, mapping: Callable[[T, int], Any]) -> AsyncIterable[U]:
    """Creates a new async iterable of the results of applying mapping to each element."""
    return MapOperator(source, mapping)


def filter(source: AnyIterable, predicate: Callable[[T, int], Any]) -> AsyncIterable[T]:
    """Returns a new async iterable of the elements for which predicate returns true."""
    return FilterOperator(source, predicate)


def choose(source: AnyIterable, chooser: Callable[[T, int], Any]) -> AsyncIterable[U]:
    """Applies chooser to each element and yields every result that is not None."""
    return ChooseOperator(source, chooser)


def collect(source: AnyIterable, mapping: Callable[[T, int], Any]) -> AsyncIterable[U]:
    """
    Applies mapping to each element and concatenates all the results. The
    mapping may return a list, a generator, an async generator or an awaitable
    of any of these.
    """
    return CollectOperator(source, mapping)


def append(first: AnyIterable, second: AnyIterable) -> AsyncIterable[T]:
    """Wraps the two given iterables as a single concatenated async iterable."""
    return AppendOperator(first, second)


def concat(sources: AnyIterable) -> AsyncIterable[T]:
    """Combines the given sequence of iterables as a single concatenated async iterable."""
    return ConcatOperator(sources)


def distinct(source: AnyIterable) -> AsyncIterable[T]:
    """Returns an async iterable with no duplicate entries."""
    return DistinctOperator(source)


def distinct_by(source: AnyIterable, selector: Callable[[T, int], Any]) -> AsyncIterable[T]:
    """Returns an async iterable with no two elements sharing a selected key."""
    return DistinctByOperator(source, selector)


def skip(source: AnyIterable, count: int) -> AsyncIterable[T]:
    """Returns the elements after a specified count."""
    return SkipOperator(source, count)


def take(source: AnyIterable, count: int) -> AsyncIterable[T]:
    """Returns the elements up to a specified count."""
    return TakeOperator(source, count)


def pairwise(source: AnyIterable) -> AsyncIterable[Tuple[T, T]]:
    """Returns an async iterable of each element together with its predecessor."""
    return PairwiseOperator(source)
