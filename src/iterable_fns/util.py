"""
Helpers shared by the synchronous and asynchronous catalogues.
"""

import inspect
from collections.abc import AsyncIterable, Iterable
from typing import Any, AsyncIterator, Awaitable, Callable, TypeVar, Union

from iterable_fns.config import config, IndexMode

T = TypeVar('T')


def accepts_index(func: Callable[..., Any]) -> bool:
    """
    Check whether func can be called with a second positional argument.

    >>> accepts_index(lambda item: item)
    False
    >>> accepts_index(lambda item, index: item)
    True
    >>> accepts_index(lambda *args: args)
    True
    >>> accepts_index(round)
    False

    Optional parameters are not counted, so callables such as ``str.split``
    or ``round`` are called with the item alone. Callables whose signature
    cannot be inspected (some builtins and C extension types) are treated as
    single-argument callables.

    :param func: callable to inspect
    :return: True if func requires at least two positional arguments
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return False
    positional = 0
    for param in sig.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return True
        if (param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)
                and param.default is param.empty):
            positional += 1
    return positional >= 2


def with_index(func: Callable[..., T]) -> Callable[[Any, int], T]:
    """
    Adapt an element callback so it can always be invoked as func(item, index).

    :param func: user supplied mapping, predicate, chooser or selector
    :return: callable taking (item, index)
    """
    if not callable(func):
        raise TypeError(f"{func!r} is not callable")
    if config.index_mode is IndexMode.ALWAYS or accepts_index(func):
        return func
    return lambda item, index: func(item)


def identity(arg: T) -> T:
    """
    Function which returns the argument. Used as the default sort selector.

    >>> obj = object()
    >>> obj is identity(obj)
    True
    """
    return arg


class SeenSet:
    """
    Membership record for distinct stages.

    Hashable values are tracked in a set; values that cannot be hashed (lists,
    dicts) fall back to a list compared with ``==``.
    """

    def __init__(self):
        self._hashable: set = set()
        self._unhashable: list = []

    def add(self, value: Any) -> bool:
        """Record value and return True if it had not been seen before."""
        try:
            if value in self._hashable:
                return False
            self._hashable.add(value)
        except TypeError:
            if value in self._unhashable:
                return False
            self._unhashable.append(value)
        return True

    def __len__(self) -> int:
        return len(self._hashable) + len(self._unhashable)


async def resolve(value: Union[T, Awaitable[T]]) -> T:
    """Await value if it is awaitable, otherwise hand it back unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


async def aclose(iterator: Any) -> None:
    """Close an async iterator that was left early, if it supports closing."""
    close = getattr(iterator, "aclose", None)
    if callable(close):
        await close()


async def release(iterator: Any, source: Any) -> None:
    """
    Close an iterator opened over source once a pull chain stops.

    An async iterator passed in directly is its own iterator and is left open
    for its caller to resume, as a plain generator is by a ``for`` loop.
    """
    if iterator is not source:
        await aclose(iterator)


class IterableAdapter:
    """Async view of a plain iterable; each ``async for`` calls ``iter()`` again."""

    def __init__(self, source: Iterable):
        self.source = source

    async def __aiter__(self) -> AsyncIterator[Any]:
        for item in self.source:
            yield item

    def __repr__(self) -> str:
        return f"IterableAdapter({self.source!r})"


def as_async_iterable(source: Union[Iterable[T], AsyncIterable]) -> AsyncIterable:
    """
    Return source unchanged if it is an AsyncIterable, else adapt a plain Iterable.

    :param source: sync or async sequence
    :return: an AsyncIterable over the same elements
    """
    if isinstance(source, AsyncIterable):
        return source
    if isinstance(source, Iterable):
        return IterableAdapter(source)
    raise TypeError(f"{type(source).__name__!r} object is not iterable")
