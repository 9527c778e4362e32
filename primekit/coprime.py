"""
Coprimality via the Euclidean algorithm.

Signs are dropped before dividing: gcd(-4, 6) == gcd(4, 6) == 2, so the
answer never depends on how the remainder of a negative operand is taken.
"""

from operator import index


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of |a| and |b|; gcd(n, 0) == |n|."""
    a, b = abs(index(a)), abs(index(b))
    while b != 0:
        a, b = b, a % b
    return a


def coprime(a: int, b: int) -> bool:
    """
    Return True iff the only positive integer dividing both a and b is 1.

    coprime(n, 0) holds only for n = 1 or -1; coprime(0, 0) is False.
    """
    return gcd(a, b) == 1
