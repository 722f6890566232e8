#!/usr/bin/env python3
"""
Tests for ChainableAsyncIterable and the achain / ainit helpers.
"""

import asyncio
import unittest

from iterable_fns import (
    ChainableAsyncIterable, ElementNotFoundError, InfiniteSequenceError,
    achain, ainit, ainit_infinite, init_infinite_raw,
)
from iterable_fns import async_iterables as ait

from scenarios import AGES, NAMES, PEOPLE, AsyncCountingIterable, anumbers


async def age(person):
    await asyncio.sleep(0)
    return person["age"]


class TestChainableAsyncProtocol(unittest.IsolatedAsyncioTestCase):

    async def test_is_async_iterable(self):
        self.assertEqual([x async for x in achain(anumbers())], [1, 2, 3])

    async def test_accepted_where_async_iterables_are(self):
        self.assertEqual(await ait.to_list(ait.map(achain([1, 2]), lambda x: -x)), [-1, -2])

    async def test_from_iterable(self):
        self.assertEqual(await ChainableAsyncIterable.from_iterable("ab").to_list(), ["a", "b"])

    def test_rejects_non_iterables(self):
        with self.assertRaises(TypeError):
            achain(42)

    async def test_wrapping_a_list_is_reusable(self):
        source = achain([1, 2, 3])
        self.assertEqual(await source.to_list(), [1, 2, 3])
        self.assertEqual(await source.map(lambda x: x * 2).to_list(), [2, 4, 6])

    async def test_lazy_methods_do_not_pull(self):
        source = AsyncCountingIterable([1, 2, 3])
        mapped = achain(source).map(lambda x: x).filter(lambda x: True)
        self.assertIsInstance(mapped, ChainableAsyncIterable)
        self.assertEqual(source.pulled, 0)
        self.assertEqual(await mapped.count(), 3)
        self.assertEqual(source.pulled, 3)


class TestAsyncChainingMatchesFunctions(unittest.IsolatedAsyncioTestCase):
    """Each chained operation gives the same result as the plain function."""

    async def test_filter_map_take(self):
        source = list(range(20))
        predicate = lambda x: x % 3 == 0
        mapping = lambda x, index: (x, index)
        self.assertEqual(
            await achain(source).filter(predicate).map(mapping).take(4).to_list(),
            await ait.to_list(ait.take(ait.map(ait.filter(source, predicate), mapping), 4)),
        )

    async def test_lazy_operations(self):
        cases = [
            (lambda c: c.choose(lambda x: x * 2 if x % 2 == 1 else None), [2, 6]),
            (lambda c: c.collect(lambda x: [x, x]), [1, 1, 2, 2, 3, 3]),
            (lambda c: c.append(anumbers()), [1, 2, 3, 1, 2, 3]),
            (lambda c: c.distinct(), [1, 2, 3]),
            (lambda c: c.distinct_by(lambda x: x % 2), [1, 2]),
            (lambda c: c.pairwise(), [(1, 2), (2, 3)]),
            (lambda c: c.skip(2), [3]),
            (lambda c: c.take(2), [1, 2]),
        ]
        for build, expected in cases:
            self.assertEqual(await build(ainit(from_=1, to=3)).to_list(), expected)

    async def test_terminal_operations(self):
        self.assertTrue(await ainit(from_=1, to=3).exists(lambda x: x == 2))
        self.assertFalse(await ainit(from_=1, to=3).every(lambda x: x < 2))
        self.assertEqual((await achain(PEOPLE).get(lambda p: p["age"] == 2))["name"], "bob")
        self.assertIsNone(await achain(PEOPLE).find(lambda p: p["age"] == 3))
        self.assertEqual(await achain([21, 2, 18]).sort(), [2, 18, 21])
        self.assertEqual(await achain([21, 2, 18]).sort_descending(), [21, 18, 2])
        self.assertEqual(await achain(NAMES).sort_by(str.lower), ["amy", "BOB", "Cat"])
        self.assertEqual(await achain(NAMES).sort_by_descending(str.lower), ["Cat", "BOB", "amy"])
        self.assertEqual(await achain(anumbers()).reverse(), [3, 2, 1])
        self.assertEqual(await achain([21, 2, 18]).sum(), 41)
        self.assertEqual(await achain(PEOPLE).sum_by(age), 41)
        self.assertEqual(await achain([2, 21, 18]).max(), 21)
        self.assertEqual(await achain(PEOPLE).max_by(age), 21)
        self.assertEqual(await achain([2, 21, 18]).min(), 2)
        self.assertEqual(await achain(PEOPLE).min_by(age), 2)
        self.assertEqual(await achain([1, 2, 3, 6]).mean(), 3)
        self.assertEqual(await achain([1, 2, 3, 6]).mean_by(lambda x: x * 2), 6)
        self.assertEqual(await ainit(5).count(), 5)
        self.assertEqual(await ainit(5).length(), 5)

    async def test_get_raises(self):
        with self.assertRaises(ElementNotFoundError):
            await achain(PEOPLE).get(lambda p: p["name"] == "dot")

    async def test_group_by_returns_dict(self):
        groups = await achain(AGES).group_by(age)
        self.assertIsInstance(groups, dict)
        self.assertEqual(sorted(groups), [1, 2])
        self.assertEqual([p["name"] for p in groups[2]], ["bob", "cat"])

    async def test_async_callbacks_in_pipeline(self):
        async def adult(person):
            await asyncio.sleep(0)
            return person["age"] >= 18

        result = await achain(PEOPLE).filter(adult).map(lambda p: p["name"]).sort_by(str.lower)
        self.assertEqual(result, ["amy", "cat"])


class TestAsyncRanges(unittest.IsolatedAsyncioTestCase):

    async def test_ainit(self):
        self.assertEqual(await ainit(3).to_list(), [0, 1, 2])
        self.assertEqual(await ainit({"from": 1, "to": 2, "increment": 0.5}).to_list(), [1, 1.5, 2])
        self.assertEqual(await ainit(start=2, count=3, increment=-1).to_list(), [2, 1, 0])

    def test_ainit_refuses_never_completing_ranges(self):
        with self.assertRaises(InfiniteSequenceError):
            ainit(from_=0, to=5, increment=-1)

    async def test_ainit_infinite_with_take(self):
        self.assertEqual(await ainit_infinite().take(3).to_list(), [0, 1, 2])
        self.assertEqual(
            await ainit_infinite(start=10, increment=-2).take(3).to_list(),
            [10, 8, 6],
        )

    async def test_infinite_pipeline_pulls_minimum(self):
        source = AsyncCountingIterable(init_infinite_raw())
        result = await achain(source).skip(2).filter(lambda x: x % 2 == 1).take(2).to_list()
        self.assertEqual(result, [3, 5])
        self.assertEqual(source.pulled, 6)


if __name__ == "__main__":
    unittest.main()
