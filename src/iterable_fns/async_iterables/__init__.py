"""Lazy operations over asynchronous iterables."""

from iterable_fns.async_iterables.operators import (
    AsyncStreamOperator,
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
from iterable_fns.async_iterables.terminals import (
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
from iterable_fns.async_iterables.chainable import (
    ChainableAsyncIterable,
    achain,
    ainit,
    ainit_infinite,
)
from iterable_fns.ranges import init_raw, init_infinite_raw

__all__ = [
    "AsyncStreamOperator",
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
    "ChainableAsyncIterable",
    "achain",
    "ainit",
    "ainit_infinite",
    "init_raw",
    "init_infinite_raw",
]
