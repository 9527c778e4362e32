"""
Prime number utilities for moderate-size integers.

Call sieve(n) to list the primes <= n, is_prime(n) to test primality,
coprime(a, b) to test coprimality, and prime_count(n) to count (or
estimate) the primes <= n.

These are simple algorithms that work well for primes up to a few
billion. They are not meant for cryptography.
"""

from .sieve import sieve
from .cache import CACHE_LIMIT, DEFAULT_CACHE, PrimeCache
from .counting import PrimeCount, prime_count
from .primality import is_prime
from .coprime import coprime, gcd

__all__ = [
    'CACHE_LIMIT',
    'DEFAULT_CACHE',
    'PrimeCache',
    'PrimeCount',
    'coprime',
    'gcd',
    'is_prime',
    'prime_count',
    'sieve',
]
