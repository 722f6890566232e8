#!/usr/bin/env python3
"""
Basic usage examples for iterable-fns.
"""

import asyncio
import logging

from iterable_fns import (
    IterableFnsConfig,
    achain,
    ainit_infinite,
    chain,
    init,
    init_infinite,
)
from iterable_fns import iterables as it


PEOPLE = [
    {'name': 'Alice', 'age': 25, 'team': 'red'},
    {'name': 'bob', 'age': 17, 'team': 'blue'},
    {'name': 'Carol', 'age': 31, 'team': 'red'},
    {'name': 'dave', 'age': 42, 'team': 'blue'},
]


def example_functions():
    """Example: Plain functions nested inside one another."""
    print("\n=== Plain Function Example ===")

    adults = it.filter(PEOPLE, lambda p: p['age'] >= 18)
    names = it.map(adults, lambda p: p['name'])
    print(f"Adults: {it.sort_by(names, str.lower)}")
    print(f"Total age: {it.sum_by(PEOPLE, lambda p: p['age'])}")


def example_chaining():
    """Example: The same pipeline written fluently."""
    print("\n=== Chaining Example ===")

    names = (
        chain(PEOPLE)
        .filter(lambda p: p['age'] >= 18)
        .map(lambda p, index: f"{index}:{p['name']}")
        .to_list()
    )
    print(f"Indexed adults: {names}")

    for team, members in chain(PEOPLE).group_by(lambda p: p['team']):
        print(f"  {team}: {[m['name'] for m in members]}")


def example_ranges():
    """Example: Number producers and infinite sequences."""
    print("\n=== Range Example ===")

    print(f"init(5): {init(5).to_list()}")
    print(f"from 0 to 1 by 0.25: {init(from_=0, to=1, increment=0.25).to_list()}")

    # Only as many numbers as needed are ever produced
    squares = init_infinite(start=1).map(lambda x: x * x).filter(lambda x: x % 3 == 1).take(5)
    print(f"First squares that are 1 mod 3: {squares.to_list()}")


async def example_async():
    """Example: Async callbacks over an infinite async sequence."""
    print("\n=== Async Example ===")

    async def lookup(n):
        await asyncio.sleep(0.01)
        return {'id': n, 'even': n % 2 == 0}

    records = await ainit_infinite(start=1).map(lookup).filter(lambda r: r['even']).take(3).to_list()
    print(f"Fetched: {records}")

    total = await achain(PEOPLE).map(lambda p: p['age']).sum()
    print(f"Total age: {total}")


def main():
    """Run all examples."""
    print("=== iterable-fns Examples ===")

    logging.basicConfig(level=logging.INFO)

    # Keep elements with equal keys in source order
    IterableFnsConfig.set_defaults(sort_strategy='stable')

    example_functions()
    example_chaining()
    example_ranges()
    asyncio.run(example_async())

    print("\n=== All examples completed! ===")


if __name__ == "__main__":
    main()
