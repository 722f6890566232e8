#!/usr/bin/env python3
"""
Tests for eager operations over synchronous iterables.
"""

import unittest

from iterable_fns import (
    ElementNotFoundError, EmptySequenceError, IterableFnsConfig, SortStrategy,
    init_infinite_raw, init_raw,
)
from iterable_fns import iterables as it

from scenarios import AGES, NAMES, PEOPLE, CountingIterable, numbers


class TestToListAndCount(unittest.TestCase):

    def test_to_list(self):
        self.assertEqual(it.to_list(numbers()), [1, 2, 3])

    def test_to_list_empty(self):
        self.assertEqual(it.to_list([]), [])

    def test_count(self):
        self.assertEqual(it.count(init_raw(5)), 5)
        self.assertEqual(it.length(init_raw(5)), 5)
        self.assertEqual(it.count([]), 0)

    def test_take_then_count(self):
        for n in (0, 2, 3, 7):
            self.assertEqual(it.count(it.take([1, 2, 3], n)), min(n, 3))


class TestSearch(unittest.TestCase):

    def test_exists(self):
        self.assertTrue(it.exists(init_raw(from_=1, to=3), lambda x: x == 2))
        self.assertFalse(it.exists(init_raw(from_=1, to=3), lambda x: x == 4))
        self.assertFalse(it.exists([], lambda x: True))

    def test_exists_stops_at_match(self):
        source = CountingIterable(init_infinite_raw())
        self.assertTrue(it.exists(source, lambda x: x == 5))
        self.assertEqual(source.pulled, 6)

    def test_every(self):
        self.assertTrue(it.every(init_raw(from_=1, to=3), lambda x: x > 0))
        self.assertFalse(it.every(init_raw(from_=1, to=3), lambda x: x < 2))
        self.assertTrue(it.every([], lambda x: False))

    def test_every_stops_at_failure(self):
        source = CountingIterable(init_infinite_raw())
        self.assertFalse(it.every(source, lambda x: x < 3))
        self.assertEqual(source.pulled, 4)

    def test_get(self):
        people = [{"name": "amy", "id": 1}, {"name": "bob", "id": 2}]
        self.assertEqual(it.get(people, lambda p: p["name"] == "bob"), {"name": "bob", "id": 2})

    def test_get_with_index(self):
        self.assertEqual(it.get("abc", lambda x, index: index == 2), "c")

    def test_get_raises_when_missing(self):
        with self.assertRaises(ElementNotFoundError) as ctx:
            it.get([1, 2], lambda x: x == 3)
        self.assertEqual(str(ctx.exception), "Element not found matching criteria")

    def test_find(self):
        people = [{"name": "amy", "id": 1}, {"name": "bob", "id": 2}]
        self.assertEqual(it.find(people, lambda p: p["name"] == "bob"), {"name": "bob", "id": 2})
        self.assertIsNone(it.find(people, lambda p: p["name"] == "cat"))

    def test_find_over_infinite_source(self):
        self.assertEqual(it.find(init_infinite_raw(), lambda x: x * x > 50), 8)


class TestGroupBy(unittest.TestCase):

    def test_groups_by_key(self):
        groups = it.group_by(AGES, lambda x: x["age"])
        self.assertEqual(list(groups.items()), [
            (1, [{"name": "amy", "age": 1}]),
            (2, [{"name": "bob", "age": 2}, {"name": "cat", "age": 2}]),
        ])

    def test_groups_by_index(self):
        groups = it.group_by(AGES, lambda x, index: index % 2)
        self.assertEqual(list(groups.items()), [
            (0, [{"name": "amy", "age": 1}, {"name": "cat", "age": 2}]),
            (1, [{"name": "bob", "age": 2}]),
        ])

    def test_key_order_is_first_occurrence(self):
        groups = it.group_by([3, 1, 2, 1, 3], lambda x: x)
        self.assertEqual(list(groups), [3, 1, 2])

    def test_empty(self):
        self.assertEqual(it.group_by([], lambda x: x), {})


class TestSort(unittest.TestCase):

    def setUp(self):
        IterableFnsConfig.reset()

    def tearDown(self):
        IterableFnsConfig.reset()

    def test_numbers(self):
        self.assertEqual(it.sort([21, 2, 18]), [2, 18, 21])

    def test_strings(self):
        self.assertEqual(it.sort(iter(["cat", "amy", "bob"])), ["amy", "bob", "cat"])

    def test_with_key_selector(self):
        self.assertEqual(it.sort(PEOPLE, lambda x: x["age"]), [
            {"name": "bob", "age": 2},
            {"name": "cat", "age": 18},
            {"name": "amy", "age": 21},
        ])

    def test_trivial_inputs(self):
        self.assertEqual(it.sort([]), [])
        self.assertEqual(it.sort([1]), [1])

    def test_sort_descending(self):
        self.assertEqual(it.sort_descending([21, 2, 18]), [21, 18, 2])
        self.assertEqual(it.sort_descending(["cat", "amy", "bob"]), ["cat", "bob", "amy"])

    def test_sort_by(self):
        self.assertEqual(it.sort_by(NAMES, lambda x: x.lower()), ["amy", "BOB", "Cat"])
        self.assertEqual(
            [p["name"] for p in it.sort_by(PEOPLE, lambda x: x["age"])],
            ["bob", "cat", "amy"],
        )

    def test_sort_by_descending(self):
        self.assertEqual(it.sort_by_descending(NAMES, lambda x: x.lower()), ["Cat", "BOB", "amy"])

    def test_sort_does_not_mutate_source(self):
        source = [3, 1, 2]
        it.sort(source)
        self.assertEqual(source, [3, 1, 2])

    def test_equal_keys_known_quirk(self):
        """
        The comparator never reports equal keys, so elements sharing a key are
        grouped together in key order but their relative order is unspecified.
        """
        source = [("b", 1), ("a", 2), ("b", 3), ("a", 4), ("b", 5)]
        result = it.sort_by(source, lambda x: x[0])
        self.assertEqual([key for key, _ in result], ["a", "a", "b", "b", "b"])
        self.assertEqual(sorted(result), sorted(source))

    def test_stable_strategy(self):
        IterableFnsConfig.set_defaults(sort_strategy=SortStrategy.STABLE)
        source = [("b", 1), ("a", 2), ("b", 3), ("a", 4), ("b", 5)]
        self.assertEqual(
            it.sort_by(source, lambda x: x[0]),
            [("a", 2), ("a", 4), ("b", 1), ("b", 3), ("b", 5)],
        )
        self.assertEqual(
            it.sort_by_descending(source, lambda x: x[0]),
            [("b", 1), ("b", 3), ("b", 5), ("a", 2), ("a", 4)],
        )


class TestReverse(unittest.TestCase):

    def test_reverse(self):
        self.assertEqual(it.reverse(iter(["cat", "amy", "bob"])), ["bob", "amy", "cat"])

    def test_reverse_empty(self):
        self.assertEqual(it.reverse([]), [])


class TestAggregates(unittest.TestCase):

    def test_sum(self):
        self.assertEqual(it.sum([21, 2, 18]), 41)
        self.assertEqual(it.sum([]), 0)

    def test_sum_by(self):
        self.assertEqual(it.sum_by(PEOPLE, lambda x: x["age"]), 41)

    def test_max_min(self):
        self.assertEqual(it.max([2, 21, 18]), 21)
        self.assertEqual(it.min([2, 21, 18]), 2)

    def test_max_by_min_by_return_selected_value(self):
        self.assertEqual(it.max_by(PEOPLE, lambda x: x["age"]), 21)
        self.assertEqual(it.min_by(PEOPLE, lambda x: x["age"]), 2)

    def test_mean(self):
        self.assertEqual(it.mean([21, 2, 18, 39]), 20)

    def test_mean_by(self):
        people = PEOPLE + [{"name": "dot", "age": 39}]
        self.assertEqual(it.mean_by(people, lambda x: x["age"]), 20)

    def test_empty_collections(self):
        cases = [
            (it.max, "max"),
            (it.min, "min"),
            (it.mean, "mean"),
            (lambda s: it.max_by(s, abs), "max"),
            (lambda s: it.min_by(s, abs), "min"),
            (lambda s: it.mean_by(s, abs), "mean"),
        ]
        for func, name in cases:
            with self.assertRaises(EmptySequenceError) as ctx:
                func([])
            self.assertEqual(str(ctx.exception), f"Can't find {name} of an empty collection")
            self.assertEqual(ctx.exception.operation, name)

    def test_selector_errors_propagate(self):
        with self.assertRaises(ZeroDivisionError):
            it.sum_by([1, 0], lambda x: 1 / x)


if __name__ == "__main__":
    unittest.main()
