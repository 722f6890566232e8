"""Lazy operations over synchronous iterables."""

from iterable_fns.iterables.operators import (
    StreamOperator,
    MapOperator,
    FilterOperator,
    ChooseOperator,
    CollectOperator,
    AppendOperator,
    ConcatOperator,
    DistinctOperator,
    DistinctByOperator,
    SkipOperator,
    TakeOperator,
    PairwiseOperator,
    map,
    filter,
    choose,
    collect,
    append,
    concat,
    distinct,
    distinct_by,
    skip,
    take,
    pairwise,
)
from iterable_fns.iterables.terminals import (
    to_list,
    exists,
    every,
    get,
    find,
    group_by,
    sort,
    sort_descending,
    sort_by,
    sort_by_descending,
    reverse,
    sum,
    sum_by,
    max,
    max_by,
    min,
    min_by,
    mean,
    mean_by,
    count,
    length,
)
from iterable_fns.iterables.chainable import (
    ChainableIterable,
    chain,
    init,
    init_infinite,
)
from iterable_fns.ranges import init_raw, init_infinite_raw

__all__ = [
    "StreamOperator",
    "MapOperator",
    "FilterOperator",
    "ChooseOperator",
    "CollectOperator",
    "AppendOperator",
    "ConcatOperator",
    "DistinctOperator",
    "DistinctByOperator",
    "SkipOperator",
    "TakeOperator",
    "PairwiseOperator",
    "map",
    "filter",
    "choose",
    "collect",
    "append",
    "concat",
    "distinct",
    "distinct_by",
    "skip",
    "take",
    "pairwise",
    "to_list",
    "exists",
    "every",
    "get",
    "find",
    "group_by",
    "sort",
    "sort_descending",
    "sort_by",
    "sort_by_descending",
    "reverse",
    "sum",
    "sum_by",
    "max",
    "max_by",
    "min",
    "min_by",
    "mean",
    "mean_by",
    "count",
    "length",
    "ChainableIterable",
    "chain",
    "init",
    "init_infinite",
    "init_raw",
    "init_infinite_raw",
]
