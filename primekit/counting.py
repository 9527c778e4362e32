"""
Prime-counting function pi(n).

Exact below the cache limit, a prime number theorem estimate above it.
"""

import math
from operator import index
from typing import NamedTuple, Optional

from .cache import DEFAULT_CACHE, PrimeCache


class PrimeCount(NamedTuple):
    """Result of prime_count: the count and whether it is exact."""
    count: int
    exact: bool


def estimate_pi(n: int) -> int:
    """
    Estimate pi(n) as floor(n / (ln(n) - 1)).

    Based on the prime number theorem, pi(n) ~ n / ln(n). Relative error
    stays below 1% from 10^4 to about 10^9; nothing is promised beyond.
    Only meaningful for n > e.
    """
    return int(n / (math.log(n) - 1))


def prime_count(n: int, cache: Optional[PrimeCache] = None) -> PrimeCount:
    """
    Count the primes <= n.

    Parameters
    ----------
    n : int
        Upper bound (inclusive).
    cache : PrimeCache, optional
        Cache to consult. Defaults to the module-level cache.

    Returns
    -------
    PrimeCount
        (count, exact). If n is at most the cache limit the count is
        exact; otherwise it is an estimate and exact is False.
    """
    n = index(n)
    if cache is None:
        cache = DEFAULT_CACHE

    if n <= cache.limit:
        i, found = cache.search(n)
        # Not found: i primes are strictly below n
        return PrimeCount(i + 1 if found else i, True)

    return PrimeCount(estimate_pi(n), False)
