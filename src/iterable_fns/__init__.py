"""
iterable-fns: lazy, chainable operations over sync and async iterables.

Plain functions live in :mod:`iterable_fns.iterables` and
:mod:`iterable_fns.async_iterables`; the fluent wrappers are built with
:func:`chain` / :func:`achain` or the number producers :func:`init` /
:func:`ainit`.
"""

import logging

from iterable_fns.config import IterableFnsConfig, SortStrategy, IndexMode
from iterable_fns.errors import (
    IterableFnsError,
    ElementNotFoundError,
    EmptySequenceError,
    InfiniteSequenceError,
)
from iterable_fns.ranges import init_raw, init_infinite_raw
from iterable_fns import iterables, async_iterables
from iterable_fns.iterables import ChainableIterable, chain, init, init_infinite
from iterable_fns.async_iterables import (
    ChainableAsyncIterable,
    achain,
    ainit,
    ainit_infinite,
)

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "IterableFnsConfig",
    "SortStrategy",
    "IndexMode",
    "IterableFnsError",
    "ElementNotFoundError",
    "EmptySequenceError",
    "InfiniteSequenceError",
    "iterables",
    "async_iterables",
    "ChainableIterable",
    "ChainableAsyncIterable",
    "chain",
    "achain",
    "init",
    "init_infinite",
    "ainit",
    "ainit_infinite",
    "init_raw",
    "init_infinite_raw",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
