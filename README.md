# algokit

A small collection of classic algorithms in plain Python, with no
third-party dependencies.

- **Number theory** (`algokit.number_theory`): `gcd`, `lcm`,
  `extended_euclid`, `mod_inverse`, `chinese_remainder`, `fast_power`
  and `fast_modular_power`.
- **Primes** (`algokit.primes`): `is_prime` (trial division), `sieve`
  (sieve of Eratosthenes, returning a list of flags for 0..limit),
  `primes_up_to` and `prime_factors`.
- **Searching** (`algokit.searching`): `lower_bound`, `upper_bound` and
  `contains` over sorted sequences.
- **Containers** (`algokit.containers`): `max_heap_order`,
  `min_heap_order`, `stack_order`, `queue_order`, `oldest_first` for
  `Person` records, and a `MultiMap` that keeps several values per key and
  yields them in ascending key order.
- **Contest solvers** (`algokit.codechef`): `max_car_profit` and
  `social_distancing_ok`, with the commands `algokit-carsell` and
  `algokit-covid`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algokit.number_theory import gcd, lcm, mod_inverse, chinese_remainder, fast_modular_power
from algokit.primes import primes_up_to, prime_factors
from algokit.searching import lower_bound, upper_bound, contains
from algokit.containers import MultiMap, Person, oldest_first

gcd(12, 18)                                   # 6
lcm(4, 6)                                     # 12
mod_inverse(3, 11)                            # 4
chinese_remainder([2, 3, 7], [1, 2, 5])       # 5
fast_modular_power(2, 10, 1000)               # 24

primes_up_to(20)                              # [2, 3, 5, 7, 11, 13, 17, 19]
prime_factors(60, 100)                        # [2, 2, 3, 5]

data = [10, 10, 40, 40, 40, 50, 60]
lower_bound(data, 40), upper_bound(data, 40)  # (2, 5)
contains([1, 5, 7, 18, 19], 7)                # True

mm = MultiMap()
mm.insert("A", "first")
mm.insert("A", "second")
mm.insert("B", "third")
mm.remove_first("A")                          # "first"
list(mm.items())                              # [("A", "second"), ("B", "third")]

people = [Person("ann", 31), Person("bob", 45), Person("cy", 22)]
[p.name for p in oldest_first(people, 2)]     # ["bob", "ann"]
```

## Errors

Invalid input raises `ValueError`: `lcm(0, 0)`, `mod_inverse` when no
inverse exists or the modulus is not positive, `chinese_remainder` with
mismatched lengths, non-positive or non-coprime moduli, negative exponents
to `fast_power` and `fast_modular_power`, a negative `sieve` limit,
`prime_factors` when the primes up to `limit` cannot factor the number
completely, and `oldest_first` with a count outside `0..len(people)`.
`MultiMap.remove_first` raises `KeyError` for an absent key.

## Command-line solvers

Two commands read contest-style input and print one answer per test case.
Input comes from the file named as the only argument, or from standard
input when no file is given.

`algokit-carsell` reads the number of test cases, then for each case a
count followed by that many car prices. Cars are sold most expensive
first, every unsold car loses one unit of value per sale, and selling stops
once a car would be worth less than nothing; it prints the total profit
modulo 1000000007:

```
printf '2\n3\n6 6 6\n3\n0 1 0\n' | algokit-carsell
```

`algokit-covid` reads the number of test cases, then for each case a count
followed by that many seat flags (0 or 1), and prints `YES` when every pair
of occupied seats is at least six apart and `NO` otherwise:

```
printf '2\n3\n1 0 1\n7\n1 0 0 0 0 0 1\n' | algokit-covid
```