"""
Sieve of Eratosthenes over odd candidates.

Responsibility: prime enumeration only. No caching, no primality queries.

Index mapping (odd numbers only, 2 is handled outside the bitmap):
- Index i → 2i + 3
- Value n → (n - 3) // 2

For n=3: index 0
For n=5: index 1
For n=9: index 3
"""

from math import isqrt
from operator import index

import numpy as np


def index_to_n(i: int) -> int:
    """Convert bitmap index to the odd number it represents."""
    return 2 * i + 3


def n_to_index(n: int) -> int:
    """Convert an odd number >= 3 to its bitmap index."""
    if n < 3 or n % 2 == 0:
        raise ValueError(f"{n} is not an odd number >= 3")
    return (n - 3) // 2


def odd_composite_flags(n: int) -> np.ndarray:
    """
    Mark the odd composites in [3, n].

    Parameters
    ----------
    n : int
        Upper bound (inclusive), n >= 3.

    Returns
    -------
    np.ndarray
        Boolean array of length 1 + (n-3)//2 where flags[i] is True
        iff index_to_n(i) is composite.
    """
    length = 1 + (n - 3) // 2
    composite = np.zeros(length, dtype=bool)

    # Any composite <= n has a prime factor <= isqrt(n)
    for p in range(3, isqrt(n) + 1, 2):
        if composite[(p - 3) // 2]:
            continue
        # Multiples below p*p were marked by smaller primes.
        # Consecutive odd multiples of p are 2p apart, i.e. p indices apart.
        composite[(p * p - 3) // 2::p] = True

    return composite


def sieve(n: int) -> np.ndarray:
    """
    Return array of all primes <= n, in ascending order.

    Only odd candidates are stored, so the bitmap is half the size of a
    plain sieve. Takes O(n) memory and O(n log log n) time.

    Parameters
    ----------
    n : int
        Upper bound (inclusive). Values below 2 give an empty array.

    Returns
    -------
    np.ndarray
        int64 array of primes.
    """
    n = index(n)
    if n < 2:
        return np.array([], dtype=np.int64)
    if n == 2:
        return np.array([2], dtype=np.int64)

    composite = odd_composite_flags(n)
    odd_primes = 2 * np.flatnonzero(~composite).astype(np.int64) + 3

    return np.concatenate((np.array([2], dtype=np.int64), odd_primes))
