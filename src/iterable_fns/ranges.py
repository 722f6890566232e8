"""
Numeric sequence producers shared by both catalogues.

A range object is re-iterable and can be consumed with either ``for`` or
``async for``; every iteration starts again from the first number.
"""

import math
import logging
import numbers
from collections.abc import Mapping
from typing import Any, AsyncIterator, Iterator, Optional, Tuple, Union

from iterable_fns.errors import InfiniteSequenceError

logger = logging.getLogger(__name__)

Number = Union[int, float]

_RANGE_KEYS = frozenset(("from", "to", "increment"))
_COUNT_KEYS = frozenset(("start", "count", "increment"))


def _options_from(options: Any, kwargs: dict) -> Union[Number, Mapping]:
    if options is None:
        if not kwargs:
            raise TypeError("init expects a count, range options or keyword arguments")
        # ``from`` is reserved in Python, accept ``from_`` as its keyword spelling
        return {("from" if key == "from_" else key): value for key, value in kwargs.items()}
    if kwargs:
        raise TypeError("init takes either positional options or keyword arguments, not both")
    return options


def normalise_range(options: Any = None, **kwargs: Any) -> Tuple[Number, Number, Number]:
    """
    Turn range options into a (start, count, increment) triple.

    Args:
        options: A count, a mapping with ``from``/``to``/``increment`` keys or
            a mapping with ``start``/``count``/``increment`` keys
        **kwargs: The same keys given as keyword arguments (``from_`` for ``from``)

    Returns:
        Tuple of first value, number of values and step between values

    Raises:
        InfiniteSequenceError: If the increment is zero or points away from ``to``
    """
    options = _options_from(options, kwargs)

    if isinstance(options, numbers.Real) and not isinstance(options, bool):
        return 0, options, 1

    if not isinstance(options, Mapping):
        raise TypeError(f"unsupported range options: {options!r}")

    if "from" in options:
        unknown = set(options) - _RANGE_KEYS
        if unknown or "to" not in options:
            raise TypeError(f"range options need 'from' and 'to', got {sorted(options)}")
        start, to = options["from"], options["to"]
        sign = -1 if to < start else 1
        increment = options.get("increment")
        if increment is not None and (increment == 0 or increment / sign < 0):
            logger.debug("Rejecting range from=%s to=%s increment=%s", start, to, increment)
            raise InfiniteSequenceError()
        increment = increment or sign
        return start, math.floor((to - start) / increment + 1), increment

    unknown = set(options) - _COUNT_KEYS
    if unknown or "count" not in options:
        raise TypeError(f"count options need 'count', got {sorted(options)}")
    start = options.get("start")
    increment = options.get("increment")
    return (
        0 if start is None else start,
        options["count"],
        1 if increment is None else increment,
    )


class NumberRange:
    """A bounded arithmetic sequence of ``count`` numbers."""

    def __init__(self, start: Number, count: Number, increment: Number):
        self.start = start
        self.count = count
        self.increment = increment

    def __iter__(self) -> Iterator[Number]:
        current = self.start
        index = 0
        while index < self.count:
            yield current
            current += self.increment
            index += 1

    async def __aiter__(self) -> AsyncIterator[Number]:
        for value in self:
            yield value

    def __repr__(self) -> str:
        return (f"NumberRange(start={self.start!r}, count={self.count!r}, "
                f"increment={self.increment!r})")


class InfiniteRange:
    """An arithmetic sequence that never terminates."""

    def __init__(self, start: Number = 0, increment: Number = 1):
        self.start = start
        self.increment = increment

    def __iter__(self) -> Iterator[Number]:
        current = self.start
        while True:
            yield current
            current += self.increment

    async def __aiter__(self) -> AsyncIterator[Number]:
        for value in self:
            yield value

    def __repr__(self) -> str:
        return f"InfiniteRange(start={self.start!r}, increment={self.increment!r})"


def init_raw(options: Any = None, **kwargs: Any) -> NumberRange:
    """
    Create the number sequence described by options.

    >>> list(init_raw(3))
    [0, 1, 2]
    >>> list(init_raw({"from": 2, "to": 5}))
    [2, 3, 4, 5]
    >>> list(init_raw(from_=0, to=100, increment=25))
    [0, 25, 50, 75, 100]

    Validation happens here, before anything is pulled.
    """
    start, count, increment = normalise_range(options, **kwargs)
    logger.debug("Range start=%s count=%s increment=%s", start, count, increment)
    return NumberRange(start, count, increment)


def init_infinite_raw(options: Optional[Mapping] = None, *,
                      start: Optional[Number] = None,
                      increment: Optional[Number] = None) -> InfiniteRange:
    """
    Create an unbounded number sequence.

    >>> from itertools import islice
    >>> list(islice(init_infinite_raw(start=1, increment=-0.5), 4))
    [1, 0.5, 0.0, -0.5]
    """
    if options is not None:
        start = options.get("start", start)
        increment = options.get("increment", increment)
    return InfiniteRange(
        0 if start is None else start,
        1 if increment is None else increment,
    )
