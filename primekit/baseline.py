"""
Unoptimized reference implementations.

Responsibility: ground truth for tests and benchmarks. Deliberately
plain; never used by the optimized code paths.
"""

from math import isqrt

import numpy as np


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Plain Sieve of Eratosthenes over every integer, even and odd.

    Parameters
    ----------
    N : int
        Upper bound (inclusive), N >= 1.

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    flags = np.ones(N + 1, dtype=bool)
    flags[0] = flags[1] = False
    for p in range(2, isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def baseline_sieve(N: int) -> np.ndarray:
    """
    Return array of all primes <= N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive). Values below 2 give an empty array.

    Returns
    -------
    np.ndarray
        Array of primes.
    """
    if N < 2:
        return np.array([], dtype=np.int64)
    flags = prime_flags_upto(N)
    return np.nonzero(flags)[0].astype(np.int64)


def baseline_is_prime(n: int) -> bool:
    """
    Trial division by every d in [2, ceil(sqrt(n))].

    Extremely slow for large n.
    """
    if n < 2:
        return False
    if n == 2:
        return True
    root = isqrt(n)
    if root * root < n:
        root += 1
    for d in range(2, root + 1):
        if n % d == 0:
            return False
    return True
