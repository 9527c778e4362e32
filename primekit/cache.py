"""
Prime cache shared by the query functions.

Responsibility: hold the small primes, built once, read-only afterwards.
is_prime and prime_count both key their fast paths on the cache limit.
"""

from operator import index
from typing import Iterator, Tuple

import numpy as np

from .sieve import sieve

# All primes <= 10,000 (1,229 of them)
CACHE_LIMIT = 10_000


class PrimeCache:
    """
    Immutable sorted array of every prime <= limit.

    Parameters
    ----------
    primes : np.ndarray
        Ascending primes, exactly those <= limit.
    limit : int
        Threshold below which the cache is complete.
    """

    __slots__ = ('_primes', '_limit')

    def __init__(self, primes: np.ndarray, limit: int):
        primes = np.array(primes, dtype=np.int64)
        primes.flags.writeable = False
        object.__setattr__(self, '_primes', primes)
        object.__setattr__(self, '_limit', index(limit))

    @classmethod
    def build(cls, limit: int = CACHE_LIMIT) -> 'PrimeCache':
        """Sieve every prime <= limit into a new cache."""
        limit = index(limit)
        if limit < 3:
            raise ValueError(f"cache limit must be >= 3, got {limit}")
        return cls(sieve(limit), limit)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def primes(self) -> np.ndarray:
        """Read-only view of the cached primes."""
        return self._primes

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def largest(self) -> int:
        """Largest cached prime."""
        return int(self._primes[-1])

    def __len__(self) -> int:
        return len(self._primes)

    def __iter__(self) -> Iterator[int]:
        return (int(p) for p in self._primes)

    def __contains__(self, n) -> bool:
        _, found = self.search(n)
        return found

    def __repr__(self) -> str:
        return f"PrimeCache(limit={self._limit}, size={len(self)})"

    def search(self, n: int) -> Tuple[int, bool]:
        """
        Binary search for n.

        Returns
        -------
        tuple
            (i, found). If found, primes[i] == n; otherwise i is the number
            of cached primes strictly less than n.
        """
        n = index(n)
        if n > self.largest:
            return len(self._primes), False
        if n < 2:
            return 0, False
        i = int(np.searchsorted(self._primes, n))
        return i, bool(self._primes[i] == n)

    def primes_upto(self, n: int) -> np.ndarray:
        """Cached primes <= n."""
        n = index(n)
        stop = int(np.searchsorted(self._primes, min(n, self.largest), side='right'))
        return self._primes[:stop]


# Built at import, before any query function can run
DEFAULT_CACHE = PrimeCache.build(CACHE_LIMIT)
