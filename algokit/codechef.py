"""Solutions to two contest problems: selling cars and seating with distance."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

MODULUS = 1000000007
MIN_SEAT_GAP = 6


def max_car_profit(prices: Iterable[int]) -> int:
    """Return the best total profit modulo 1000000007.

    Cars are sold most expensive first; each year every unsold car loses
    one unit of value, and selling stops once a car would be worth less
    than nothing.
    """
    result = 0
    for year, price in enumerate(sorted(prices, reverse=True)):
        value = price - year
        if value < 0:
            break
        result = (result + value) % MODULUS
    return result


def social_distancing_ok(seats: Sequence[int]) -> bool:
    """Return True if every two occupied seats (value 1) are at least six apart."""
    occupied = [index for index, seat in enumerate(seats) if seat == 1]
    return all(later - earlier >= MIN_SEAT_GAP for earlier, later in zip(occupied, occupied[1:]))


def _open_input(argv: Sequence[str] | None, description: str) -> TextIO:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="file holding the test cases (default: standard input)",
    )
    return parser.parse_args(argv).input


def _test_cases(stream: TextIO) -> Iterator[list[int]]:
    numbers = iter(int(token) for token in stream.read().split())
    for _ in range(next(numbers, 0)):
        size = next(numbers)
        yield [next(numbers) for _ in range(size)]


def carsell_main(argv: Sequence[str] | None = None) -> int:
    """Read car-price test cases and print the best profit for each."""
    stream = _open_input(argv, "Maximum profit from selling depreciating cars.")
    for prices in _test_cases(stream):
        print(max_car_profit(prices))
    return 0


def covid_main(argv: Sequence[str] | None = None) -> int:
    """Read seating test cases and print YES or NO for each."""
    stream = _open_input(argv, "Check that occupied seats keep their distance.")
    for seats in _test_cases(stream):
        print("YES" if social_distancing_ok(seats) else "NO")
    return 0