"""
Primality test by trial division.

Optimizations, in the order they are tried:
- n at or below the cache limit is looked up in the prime cache.
- Otherwise only divisors up to isqrt(n) are considered, the cached
  primes first.
- If the cache runs out before isqrt(n), only numbers of the form 6k±1
  above the largest cached prime are tried, since every prime > 3 has
  that form.

Slow for large n, but fine for occasional queries in the int64 range.
"""

from math import isqrt
from operator import index
from typing import Optional

import numpy as np

from .cache import DEFAULT_CACHE, PrimeCache

INT64_MAX = int(np.iinfo(np.int64).max)

# Candidate pairs (6k-1, 6k+1) tested per numpy block
BLOCK_SIZE = 1 << 16


def first_wheel_candidate(after: int) -> int:
    """Smallest 6k-1 such that 6k+1 > after."""
    return (after // 6 + 1) * 6 - 1


def has_wheel_divisor(n: int, start: int, stop: int) -> bool:
    """
    Check n against every 6k-1 and 6k+1 from start up to stop.

    Parameters
    ----------
    n : int
        Number to test, n <= INT64_MAX.
    start : int
        First candidate; must be ≡ 5 (mod 6).
    stop : int
        Largest divisor worth trying (inclusive).

    Returns
    -------
    bool
        True if some candidate divides n.
    """
    n = np.int64(n)
    step = 6 * BLOCK_SIZE
    for lo in range(start, stop + 1, step):
        d = np.arange(lo, min(lo + step, stop + 1), 6, dtype=np.int64)
        if np.any(n % d == 0) or np.any(n % (d + 2) == 0):
            return True
    return False


def is_prime(n: int, cache: Optional[PrimeCache] = None) -> bool:
    """
    Return True iff n is prime.

    Parameters
    ----------
    n : int
        Integer to test. Anything below 2 is not prime.
    cache : PrimeCache, optional
        Cache to consult. Defaults to the module-level cache.

    Returns
    -------
    bool

    Raises
    ------
    OverflowError
        If n does not fit in a signed 64-bit integer.
    """
    n = index(n)
    if cache is None:
        cache = DEFAULT_CACHE

    if n <= cache.limit:
        # If n is prime, it is in the cache
        _, found = cache.search(n)
        return found

    if n > INT64_MAX:
        raise OverflowError(f"{n} does not fit in a signed 64-bit integer")

    root = isqrt(n)
    divisors = cache.primes_upto(root)
    if np.any(np.int64(n) % divisors == 0):
        return False
    # Every prime up to the limit is cached
    if root <= cache.limit:
        return True

    return not has_wheel_divisor(n, first_wheel_candidate(cache.largest), root)
