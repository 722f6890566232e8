"""
Fluent wrapper over the synchronous catalogue.
"""

from typing import (
    Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, TypeVar
)

from iterable_fns.iterables import operators, terminals
from iterable_fns.ranges import Number, init_infinite_raw, init_raw

T = TypeVar('T')
U = TypeVar('U')
Key = TypeVar('Key')


class ChainableIterable(Iterable[T]):
    """
    A lazy, chainable view over an iterable.

    Lazy methods return a new ChainableIterable around a new stage; terminal
    methods consume the sequence and return their result. A wrapper and the
    wrappers derived from it share the same upstream, so consuming one of
    them exhausts a one-shot source for the others.
    """

    def __init__(self, source: Iterable[T]):
        """
        Initialize chainable iterable.

        Args:
            source: Any iterable, including another ChainableIterable
        """
        if not hasattr(source, '__iter__'):
            raise TypeError("Source must be iterable")
        self._source = source

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"

    # Transformation operators

    def map(self, mapping: Callable[[T, int], U]) -> 'ChainableIterable[U]':
        """
        Apply mapping to each element.

        >>> init(from_=1, to=3).map(lambda x: x * 2).to_list()
        [2, 4, 6]
        """
        return ChainableIterable(operators.map(self._source, mapping))

    def filter(self, predicate: Callable[[T, int], bool]) -> 'ChainableIterable[T]':
        """Keep only elements matching predicate."""
        return ChainableIterable(operators.filter(self._source, predicate))

    def choose(self, chooser: Callable[[T, int], Optional[U]]) -> 'ChainableIterable[U]':
        """Map each element, dropping those mapped to None."""
        return ChainableIterable(operators.choose(self._source, chooser))

    def collect(self, mapping: Callable[[T, int], Iterable[U]]) -> 'ChainableIterable[U]':
        """
        Map each element to multiple elements.

        >>> init(from_=1, to=3).collect(lambda x: [x, x]).to_list()
        [1, 1, 2, 2, 3, 3]
        """
        return ChainableIterable(operators.collect(self._source, mapping))

    def append(self, second: Iterable[T]) -> 'ChainableIterable[T]':
        """Follow the elements of this sequence with the elements of second."""
        return ChainableIterable(operators.append(self._source, second))

    def distinct(self) -> 'ChainableIterable[T]':
        """Remove duplicate elements."""
        return ChainableIterable(operators.distinct(self._source))

    def distinct_by(self, selector: Callable[[T, int], Key]) -> 'ChainableIterable[T]':
        """Remove elements whose key was already seen."""
        return ChainableIterable(operators.distinct_by(self._source, selector))

    def pairwise(self) -> 'ChainableIterable[Tuple[T, T]]':
        """Pair each element with its predecessor."""
        return ChainableIterable(operators.pairwise(self._source))

    def skip(self, count: int) -> 'ChainableIterable[T]':
        """Skip first n elements."""
        return ChainableIterable(operators.skip(self._source, count))

    def take(self, count: int) -> 'ChainableIterable[T]':
        """Take first n elements."""
        return ChainableIterable(operators.take(self._source, count))

    def group_by(self, selector: Callable[[T, int], Key]) -> 'ChainableIterable[Tuple[Key, List[T]]]':
        """
        Group elements by key, as a chainable sequence of (key, items) pairs.

        Unlike :func:`iterable_fns.iterables.group_by`, which returns a dict,
        the pairs stay chainable here.
        """
        return ChainableIterable(terminals.group_by(self._source, selector).items())

    # Terminal operators

    def to_list(self) -> List[T]:
        """Collect all elements into a list."""
        return terminals.to_list(self._source)

    def exists(self, predicate: Callable[[T, int], bool]) -> bool:
        """Tests if any element satisfies predicate."""
        return terminals.exists(self._source, predicate)

    def every(self, predicate: Callable[[T, int], bool]) -> bool:
        """Tests if every element satisfies predicate."""
        return terminals.every(self._source, predicate)

    def get(self, predicate: Callable[[T, int], bool]) -> T:
        """First element matching predicate; raises ElementNotFoundError if none does."""
        return terminals.get(self._source, predicate)

    def find(self, predicate: Callable[[T, int], bool]) -> Optional[T]:
        """First element matching predicate, or None."""
        return terminals.find(self._source, predicate)

    def sort(self, selector: Optional[Callable[[T], Any]] = None) -> List[T]:
        """Elements in ascending order."""
        return terminals.sort(self._source, selector)

    def sort_descending(self, selector: Optional[Callable[[T], Any]] = None) -> List[T]:
        """Elements in descending order."""
        return terminals.sort_descending(self._source, selector)

    def sort_by(self, selector: Callable[[T], Any]) -> List[T]:
        """Elements in ascending order of selector."""
        return terminals.sort_by(self._source, selector)

    def sort_by_descending(self, selector: Callable[[T], Any]) -> List[T]:
        """Elements in descending order of selector."""
        return terminals.sort_by_descending(self._source, selector)

    def reverse(self) -> List[T]:
        """Elements in reverse order."""
        return terminals.reverse(self._source)

    def sum(self) -> Any:
        return terminals.sum(self._source)

    def sum_by(self, selector: Callable[[T], Any]) -> Any:
        return terminals.sum_by(self._source, selector)

    def max(self) -> Any:
        return terminals.max(self._source)

    def max_by(self, selector: Callable[[T], Any]) -> Any:
        return terminals.max_by(self._source, selector)

    def min(self) -> Any:
        return terminals.min(self._source)

    def min_by(self, selector: Callable[[T], Any]) -> Any:
        return terminals.min_by(self._source, selector)

    def mean(self) -> Any:
        return terminals.mean(self._source)

    def mean_by(self, selector: Callable[[T], Any]) -> Any:
        return terminals.mean_by(self._source, selector)

    def count(self) -> int:
        """Count elements."""
        return terminals.count(self._source)

    def length(self) -> int:
        """Count elements."""
        return terminals.count(self._source)

    # Factory methods

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> 'ChainableIterable[T]':
        """Create chainable iterable from iterable."""
        return cls(iterable)


def chain(source: Iterable[T]) -> ChainableIterable[T]:
    """
    Create a new chainable iterable from an existing iterable source.

    >>> people = [{'name': 'CAT', 'age': 18}, {'name': 'Amy', 'age': 21}, {'name': 'bob', 'age': 2}]
    >>> chain(people).filter(lambda p: p['age'] >= 18).map(lambda p: p['name']).sort_by(str.lower)
    ['Amy', 'CAT']
    """
    return ChainableIterable(source)


def init(options: Any = None, **kwargs: Any) -> ChainableIterable[Number]:
    """
    Generates a chainable iterable of the specified number sequence.

    >>> init(3).to_list()
    [0, 1, 2]
    >>> init({'from': 2, 'to': 5}).to_list()
    [2, 3, 4, 5]

    Raises:
        InfiniteSequenceError: When the options describe a sequence that would
            never complete; use init_infinite for that.
    """
    return ChainableIterable(init_raw(options, **kwargs))


def init_infinite(options: Optional[Dict[str, Number]] = None, *,
                  start: Optional[Number] = None,
                  increment: Optional[Number] = None) -> ChainableIterable[Number]:
    """
    Generates a chainable iterable that counts forever.

    >>> init_infinite(start=99).take(3).to_list()
    [99, 100, 101]
    """
    return ChainableIterable(init_infinite_raw(options, start=start, increment=increment))
